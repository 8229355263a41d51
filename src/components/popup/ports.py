"""
Popup component port definitions.

Narrow views of the browser objects the dispatcher touches. Any host (a
browser bridge, a test fake) can satisfy them structurally.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Protocol


class ClickEventPort(Protocol):
    """A dispatched click event."""

    def prevent_default(self) -> None:
        """Cancel the browser's default navigation."""
        ...


class PopupWindowPort(Protocol):
    """Handle to an opened popup window."""

    @property
    def closed(self) -> bool:
        """True once the user has closed the window."""
        ...

    def focus(self) -> None:
        """Bring the window to the front."""
        ...


class WindowPort(Protocol):
    """The page's top-level window."""

    def open(self, url: str, name: str, features: str) -> PopupWindowPort | None:
        """Open url in a new browsing context. May return None if blocked."""
        ...


class AnchorPort(Protocol):
    """An `<a>` element."""

    @property
    def href(self) -> str:
        """Resolved link target."""
        ...

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute if present."""
        ...

    def add_event_listener(
        self, event_type: str, listener: Callable[[ClickEventPort], Any]
    ) -> None:
        """Register an event listener."""
        ...


class DocumentPort(Protocol):
    """The page's document."""

    def query_selector_all(self, selector: str) -> Iterable[AnchorPort]:
        """Return elements matching a CSS selector."""
        ...

    def add_event_listener(self, event_type: str, listener: Callable[[Any], Any]) -> None:
        """Register a document-level event listener."""
        ...
