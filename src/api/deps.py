import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.sharing_rules import RulesSharingAdapter
from src.components.popup import PopupConfig
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("SHARE_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(rules_path: Path) -> Rules:
    return load_rules(rules_path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


def get_sharing_rules(rules: Rules = Depends(get_rules)) -> RulesSharingAdapter:
    return RulesSharingAdapter.from_rules(rules)


def get_popup_config(rules: Rules = Depends(get_rules)) -> PopupConfig:
    return rules.popup.to_config()
