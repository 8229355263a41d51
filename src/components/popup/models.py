"""
Popup component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PopupConfig:
    """Popup window geometry and the attribute marking adopted links."""

    width: int = 600
    height: int = 600
    window_name: str = "_blank"
    marker_attribute: str = "open-win"

    @property
    def features(self) -> str:
        """window.open() feature string, e.g. "popup,width=600,height=600"."""
        return f"popup,width={self.width},height={self.height}"

    @property
    def selector(self) -> str:
        """CSS selector for marked anchors, e.g. "a[open-win]"."""
        return f"a[{self.marker_attribute}]"


DEFAULT_POPUP_CONFIG = PopupConfig()
