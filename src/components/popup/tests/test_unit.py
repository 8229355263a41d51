"""
Unit tests for Popup component.

Tests:
- Single popup is reused (open, focus, reopen after close)
- Adopted anchors lose their target and never navigate
- install() is a no-op outside a browser context
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from src.components.popup import (
    DOM_CONTENT_LOADED,
    PopupConfig,
    PopupDispatcher,
    install,
    render_popup_link,
)

# --- Fake Browser Objects ---


class FakePopup:
    """Popup window handle."""

    def __init__(self) -> None:
        self.closed = False
        self.focus_count = 0

    def focus(self) -> None:
        self.focus_count += 1


class FakeWindow:
    """Window recording open() calls."""

    def __init__(self) -> None:
        self.opened: list[tuple[str, str, str]] = []
        self.popups: list[FakePopup] = []

    def open(self, url: str, name: str, features: str) -> FakePopup:
        self.opened.append((url, name, features))
        popup = FakePopup()
        self.popups.append(popup)
        return popup


class FakeEvent:
    def __init__(self) -> None:
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class FakeAnchor:
    """Anchor element with attributes and click listeners."""

    def __init__(self, href: str, attributes: dict[str, str] | None = None) -> None:
        self.href = href
        self.attributes = dict(attributes or {})
        self.listeners: dict[str, list[Callable[[Any], Any]]] = {}

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def add_event_listener(self, event_type: str, listener: Callable[[Any], Any]) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def click(self) -> FakeEvent:
        event = FakeEvent()
        for listener in self.listeners.get("click", []):
            listener(event)
        return event


class FakeDocument:
    """Document supporting `a[attr]` selectors only."""

    def __init__(self, anchors: list[FakeAnchor]) -> None:
        self.anchors = anchors
        self.listeners: dict[str, list[Callable[[Any], Any]]] = {}

    def query_selector_all(self, selector: str) -> list[FakeAnchor]:
        attribute = selector.removeprefix("a[").removesuffix("]")
        return [a for a in self.anchors if attribute in a.attributes]

    def add_event_listener(self, event_type: str, listener: Callable[[Any], Any]) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def fire(self, event_type: str) -> None:
        for listener in self.listeners.get(event_type, []):
            listener(object())


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture
def dispatcher(window: FakeWindow) -> PopupDispatcher:
    return PopupDispatcher(window)


# --- Config Tests ---


class TestPopupConfig:
    """Tests for PopupConfig."""

    def test_defaults(self) -> None:
        config = PopupConfig()
        assert config.features == "popup,width=600,height=600"
        assert config.selector == "a[open-win]"
        assert config.window_name == "_blank"

    def test_custom_geometry(self) -> None:
        config = PopupConfig(width=800, height=500, marker_attribute="data-share")
        assert config.features == "popup,width=800,height=500"
        assert config.selector == "a[data-share]"


# --- Dispatcher Tests ---


class TestOpenRequestedTab:
    """Tests for popup reuse."""

    def test_first_request_opens_popup(
        self, dispatcher: PopupDispatcher, window: FakeWindow
    ) -> None:
        dispatcher.open_requested_tab("https://wa.me?text=hi")

        assert window.opened == [("https://wa.me?text=hi", "_blank", "popup,width=600,height=600")]
        assert dispatcher.popup is window.popups[0]

    def test_open_popup_is_focused_not_reopened(
        self, dispatcher: PopupDispatcher, window: FakeWindow
    ) -> None:
        dispatcher.open_requested_tab("https://a.example")
        dispatcher.open_requested_tab("https://b.example")

        assert len(window.opened) == 1
        assert window.popups[0].focus_count == 1

    def test_closed_popup_is_replaced(
        self, dispatcher: PopupDispatcher, window: FakeWindow
    ) -> None:
        dispatcher.open_requested_tab("https://a.example")
        window.popups[0].closed = True
        dispatcher.open_requested_tab("https://b.example")

        assert [url for url, _, _ in window.opened] == ["https://a.example", "https://b.example"]
        assert dispatcher.popup is window.popups[1]

    def test_blocked_popup_retries_on_next_request(self) -> None:
        """A blocked open() (None) leaves nothing tracked."""

        class BlockingWindow(FakeWindow):
            def open(self, url: str, name: str, features: str) -> None:  # type: ignore[override]
                self.opened.append((url, name, features))
                return None

        window = BlockingWindow()
        dispatcher = PopupDispatcher(window)
        dispatcher.open_requested_tab("https://a.example")
        dispatcher.open_requested_tab("https://a.example")

        assert len(window.opened) == 2
        assert dispatcher.popup is None


class TestAdopt:
    """Tests for anchor adoption."""

    def test_strips_target(self, dispatcher: PopupDispatcher) -> None:
        anchor = FakeAnchor("https://a.example", {"open-win": "", "target": "_blank"})
        dispatcher.adopt(anchor)
        assert "target" not in anchor.attributes

    def test_click_opens_and_prevents_default(
        self, dispatcher: PopupDispatcher, window: FakeWindow
    ) -> None:
        anchor = FakeAnchor("https://a.example", {"open-win": ""})
        dispatcher.adopt(anchor)

        event = anchor.click()

        assert event.default_prevented is True
        assert window.opened[0][0] == "https://a.example"

    def test_default_prevented_when_focusing(self, dispatcher: PopupDispatcher) -> None:
        anchor = FakeAnchor("https://a.example", {"open-win": ""})
        dispatcher.adopt(anchor)
        anchor.click()

        assert anchor.click().default_prevented is True

    def test_anchors_share_one_popup(
        self, dispatcher: PopupDispatcher, window: FakeWindow
    ) -> None:
        first = FakeAnchor("https://a.example", {"open-win": ""})
        second = FakeAnchor("https://b.example", {"open-win": ""})
        dispatcher.adopt(first)
        dispatcher.adopt(second)

        first.click()
        second.click()

        assert len(window.opened) == 1
        assert window.popups[0].focus_count == 1

    def test_adopt_all_only_marked_anchors(self, dispatcher: PopupDispatcher) -> None:
        marked = FakeAnchor("https://a.example", {"open-win": "", "target": "_blank"})
        plain = FakeAnchor("https://b.example", {"target": "_blank"})
        document = FakeDocument([marked, plain])

        assert dispatcher.adopt_all(document) == 1
        assert "target" not in marked.attributes
        assert plain.attributes == {"target": "_blank"}
        assert plain.listeners == {}


# --- Install Tests ---


class TestInstall:
    """Tests for install()."""

    def test_no_window_is_noop(self) -> None:
        document = FakeDocument([])
        assert install(document, None) is None
        assert document.listeners == {}

    def test_no_document_is_noop(self, window: FakeWindow) -> None:
        assert install(None, window) is None

    def test_adopts_after_content_loaded(self, window: FakeWindow) -> None:
        anchor = FakeAnchor("https://a.example", {"open-win": "", "target": "_blank"})
        document = FakeDocument([anchor])

        dispatcher = install(document, window)

        assert isinstance(dispatcher, PopupDispatcher)
        assert "target" in anchor.attributes  # not adopted before the event

        document.fire(DOM_CONTENT_LOADED)
        anchor.click()

        assert "target" not in anchor.attributes
        assert len(window.opened) == 1

    def test_custom_config(self, window: FakeWindow) -> None:
        anchor = FakeAnchor("https://a.example", {"data-share": ""})
        document = FakeDocument([anchor])
        config = PopupConfig(width=400, height=300, marker_attribute="data-share")

        install(document, window, config)
        document.fire(DOM_CONTENT_LOADED)
        anchor.click()

        assert window.opened == [("https://a.example", "_blank", "popup,width=400,height=300")]


# --- Rendering Tests ---


class TestRenderPopupLink:
    """Tests for render_popup_link."""

    def test_renders_marked_anchor(self) -> None:
        result = render_popup_link("https://wa.me?text=hi", "WhatsApp")
        assert result == (
            '<a href="https://wa.me?text=hi" target="_blank" '
            'rel="noopener noreferrer" open-win>WhatsApp</a>'
        )

    def test_escapes_href_and_text(self) -> None:
        result = render_popup_link("https://x.example?a=1&b=2", "<Share>")
        assert 'href="https://x.example?a=1&amp;b=2"' in result
        assert "&lt;Share&gt;" in result

    def test_custom_marker(self) -> None:
        result = render_popup_link("https://a.example", "A", PopupConfig(marker_attribute="data-share"))
        assert " data-share>" in result
