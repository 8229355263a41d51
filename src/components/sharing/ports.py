"""
Sharing component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class SharingRulesPort(Protocol):
    """Port for sharing rules configuration."""

    def is_enabled(self) -> bool:
        """Check if social sharing is enabled."""
        ...

    def get_platforms(self) -> tuple[str, ...]:
        """Get the enabled share targets, in display order."""
        ...
