from pathlib import Path
from typing import Any

import pytest
import yaml

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules_path() -> Path:
    """The project's own rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def write_rules(tmp_path: Path):
    """
    Write a rules dict (or raw text) to a temporary rules.yaml.
    """

    def _write(rules: dict[str, Any] | str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        if isinstance(rules, str):
            path.write_text(rules)
        else:
            path.write_text(yaml.dump(rules))
        return path

    return _write
