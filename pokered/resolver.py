"""Translation of backend input events into game events."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

from pokered.events import EventData, EventType, MouseButton, MouseEvent

_BUTTON_MAP: tuple[tuple[int, MouseButton], ...] = (
    (pygame.BUTTON_LEFT, MouseButton.LEFT),
)


def resolve_button(button: int) -> MouseButton | None:
    """Map a backend mouse button to a game button, or None if it is not mapped."""
    for backend_button, game_button in _BUTTON_MAP:
        if backend_button == button:
            return game_button
    return None


def to_backend_button(button: MouseButton) -> int | None:
    """Map a game mouse button to the backend's, or None if it is not mapped."""
    for backend_button, game_button in _BUTTON_MAP:
        if game_button == button:
            return backend_button
    return None


def _mouse_payload(event: Any) -> MouseEvent:
    x, y = event.pos
    return MouseEvent(button=resolve_button(event.button), x=int(x), y=int(y))


def _window_closed(context: Any, event: Any) -> None:
    context.handlers.process(context, EventData(EventType.WINDOW_CLOSED))


def _mouse_released(context: Any, event: Any) -> None:
    data = EventData(EventType.MOUSE_RELEASED, payload=_mouse_payload(event))
    context.handlers.process(context, data)


def _mouse_pressed(context: Any, event: Any) -> None:
    data = EventData(EventType.MOUSE_PRESSED, payload=_mouse_payload(event))
    context.handlers.process(context, data)


_EVENT_MAP: tuple[tuple[int, Callable[[Any, Any], None]], ...] = (
    (pygame.QUIT, _window_closed),
    (pygame.MOUSEBUTTONUP, _mouse_released),
    (pygame.MOUSEBUTTONDOWN, _mouse_pressed),
)


def process_backend_event(context: Any, event: Any) -> None:
    """Dispatch a backend event to the game handlers registered for it."""
    for event_type, function in _EVENT_MAP:
        if event_type == event.type:
            function(context, event)