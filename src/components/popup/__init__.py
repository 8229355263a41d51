"""
Popup component - Reused popup window for share links.
"""

from .component import (
    DOM_CONTENT_LOADED,
    PopupDispatcher,
    install,
    render_popup_link,
)
from .models import DEFAULT_POPUP_CONFIG, PopupConfig
from .ports import (
    AnchorPort,
    ClickEventPort,
    DocumentPort,
    PopupWindowPort,
    WindowPort,
)

__all__ = [
    # Component
    "PopupDispatcher",
    "install",
    "render_popup_link",
    "DOM_CONTENT_LOADED",
    # Models
    "PopupConfig",
    "DEFAULT_POPUP_CONFIG",
    # Ports
    "AnchorPort",
    "ClickEventPort",
    "DocumentPort",
    "PopupWindowPort",
    "WindowPort",
]
