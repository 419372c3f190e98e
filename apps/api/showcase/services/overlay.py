"""Global full-screen image preview (lightbox) and key event dispatch."""
from __future__ import annotations

import enum
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"

KeyHandler = Callable[[str], None]


class Subscription:
    """Handle returned by ``KeyEvents.subscribe``.

    Usable as a context manager; leaving the block unsubscribes.
    """

    def __init__(self, events: "KeyEvents", handler: KeyHandler) -> None:
        self._events = events
        self._handler = handler
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._events._remove(self._handler)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.unsubscribe()
        return False


class KeyEvents:
    """Process-wide keyboard event dispatcher."""

    def __init__(self) -> None:
        self._handlers: list[KeyHandler] = []

    def subscribe(self, handler: KeyHandler) -> Subscription:
        self._handlers.append(handler)
        return Subscription(self, handler)

    def dispatch(self, key: str) -> None:
        # Handlers may unsubscribe while being called.
        for handler in list(self._handlers):
            handler(key)

    @property
    def listener_count(self) -> int:
        return len(self._handlers)

    def _remove(self, handler: KeyHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass


class ClickTarget(str, enum.Enum):
    """Where a click inside the overlay landed."""

    BACKDROP = "backdrop"
    CONTENT = "content"
    CLOSE_BUTTON = "close_button"


@dataclass(frozen=True, slots=True)
class OverlayState:
    visible: bool = False
    image_ref: str | None = None
    caption: str = ""


HIDDEN = OverlayState()


class Overlay:
    """Owner of the single lightbox instance.

    States are ``Hidden`` and ``Visible(image_ref, caption)``. A hidden
    overlay never carries a payload; ``show`` while visible replaces it.
    """

    def __init__(self) -> None:
        self._state = HIDDEN

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state.visible

    def show(self, image_ref: str | None, caption: str | None = "") -> OverlayState:
        self._state = OverlayState(visible=True, image_ref=image_ref, caption=caption or "")
        logger.debug("Overlay shown for %s", image_ref)
        return self._state

    def hide(self) -> OverlayState:
        if self._state.visible:
            logger.debug("Overlay hidden")
        self._state = HIDDEN
        return self._state

    def handle_click(self, target: ClickTarget) -> OverlayState:
        """Apply a click; clicks on the image or caption do not dismiss."""

        if target is ClickTarget.CONTENT:
            return self._state
        return self.hide()

    def handle_key(self, key: str) -> None:
        if key == ESCAPE_KEY and self._state.visible:
            self.hide()

    @contextmanager
    def mount(self, events: KeyEvents) -> Iterator["Overlay"]:
        """Listen for Escape on ``events`` for the duration of the block."""

        with events.subscribe(self.handle_key):
            yield self
