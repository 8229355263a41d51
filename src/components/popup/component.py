"""
Popup component - open share links in a single reused popup window.

Anchors carrying the marker attribute (`open-win` by default) are adopted:
their `target` is removed and clicks open the link in one popup window
instead of a new tab per click.

Invariants:
- At most one popup is tracked per dispatcher
- A closed popup is replaced on the next click; an open one is focused
- Default navigation is always prevented for adopted anchors
- Nothing is installed without a window (non-browser contexts)
"""

from __future__ import annotations

import html
import logging

from .models import DEFAULT_POPUP_CONFIG, PopupConfig
from .ports import AnchorPort, ClickEventPort, DocumentPort, PopupWindowPort, WindowPort

logger = logging.getLogger(__name__)

DOM_CONTENT_LOADED = "DOMContentLoaded"


class PopupDispatcher:
    """
    Opens adopted links in one reusable popup window.

    Owns the only mutable state of the component: the handle of the last
    popup it opened.
    """

    def __init__(self, window: WindowPort, config: PopupConfig = DEFAULT_POPUP_CONFIG) -> None:
        self._window = window
        self._config = config
        self._popup: PopupWindowPort | None = None

    @property
    def config(self) -> PopupConfig:
        return self._config

    @property
    def popup(self) -> PopupWindowPort | None:
        """The tracked popup handle, if any."""
        return self._popup

    def open_requested_tab(self, url: str) -> None:
        """Open url in the popup, or focus the popup if it is still open."""
        if self._popup is None or self._popup.closed:
            logger.debug("Opening share popup: %s", url)
            self._popup = self._window.open(url, self._config.window_name, self._config.features)
        else:
            logger.debug("Focusing existing share popup")
            self._popup.focus()

    def adopt(self, anchor: AnchorPort) -> None:
        """Strip the anchor's target and route its clicks through the popup."""
        anchor.remove_attribute("target")

        def on_click(event: ClickEventPort) -> None:
            self.open_requested_tab(anchor.href)
            event.prevent_default()

        anchor.add_event_listener("click", on_click)

    def adopt_all(self, document: DocumentPort) -> int:
        """
        Adopt every marked anchor in the document.

        Returns:
            Number of anchors adopted
        """
        count = 0
        for anchor in document.query_selector_all(self._config.selector):
            self.adopt(anchor)
            count += 1
        logger.debug("Adopted %d share links", count)
        return count


def install(
    document: DocumentPort | None,
    window: WindowPort | None,
    config: PopupConfig | None = None,
) -> PopupDispatcher | None:
    """
    Wire a dispatcher to run once the document content has loaded.

    Args:
        document: Page document, or None outside a browser
        window: Page window, or None outside a browser
        config: Popup geometry and marker (defaults to 600x600, "open-win")

    Returns:
        The installed dispatcher, or None when there is no browser context
    """
    if window is None or document is None:
        logger.debug("No browser context, popup dispatcher not installed")
        return None

    dispatcher = PopupDispatcher(window, config or DEFAULT_POPUP_CONFIG)
    document.add_event_listener(DOM_CONTENT_LOADED, lambda _event: dispatcher.adopt_all(document))
    return dispatcher


def render_popup_link(
    href: str,
    text: str,
    config: PopupConfig | None = None,
    rel: str = "noopener noreferrer",
) -> str:
    """
    Render an anchor the dispatcher will adopt.

    Without the dispatcher the link still opens in a new tab.

    Args:
        href: Share URL
        text: Link text content (escaped)
        config: Supplies the marker attribute
        rel: Rel attribute for security

    Returns:
        HTML anchor tag string

    Example:
        >>> render_popup_link("https://wa.me?text=hi", "WhatsApp")
        '<a href="https://wa.me?text=hi" target="_blank" rel="noopener noreferrer" open-win>WhatsApp</a>'
    """
    marker = (config or DEFAULT_POPUP_CONFIG).marker_attribute
    return (
        f'<a href="{html.escape(href)}" target="_blank" rel="{html.escape(rel)}" {marker}>'
        f"{html.escape(text)}</a>"
    )
