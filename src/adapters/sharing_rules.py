"""
Rules-backed sharing adapter.

Exposes the `sharing` section of rules.yaml through SharingRulesPort.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.rules.models import Rules, SharingRules


@dataclass(frozen=True)
class RulesSharingAdapter:
    """SharingRulesPort implementation over loaded rules."""

    sharing: SharingRules

    @classmethod
    def from_rules(cls, rules: Rules) -> RulesSharingAdapter:
        return cls(sharing=rules.sharing)

    def is_enabled(self) -> bool:
        return self.sharing.enabled

    def get_platforms(self) -> tuple[str, ...]:
        if not self.sharing.enabled:
            return ()
        return tuple(self.sharing.platforms)
