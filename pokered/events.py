"""Prioritised event handlers dispatched by event type and scene."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Protocol


class Scene(IntEnum):
    """Game scenes; handlers bound to ALL run in every scene."""

    ALL = 0
    GAME = 1


class EventType(IntEnum):
    PRE_UPDATE = 0
    POST_UPDATE = 1
    MOUSE_PRESSED = 2
    MOUSE_RELEASED = 3
    WINDOW_CLOSED = 4


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    XBUTTON1 = 3
    XBUTTON2 = 4


class EventPriority(IntEnum):
    HIGHEST = 0xFFFF
    HIGH = 0x0FFF
    NORMAL = 0x00FF
    LOW = 0x000F
    LOWEST = 0x0000


@dataclass
class EventData:
    """An event in flight; handlers may cancel it for those that follow."""

    type: EventType
    is_canceled: bool = False
    payload: Any = None


@dataclass(frozen=True)
class MouseEvent:
    """Payload of mouse pressed and released events."""

    button: MouseButton | None
    x: int
    y: int


HandlingFunction = Callable[[Any, EventData], None]


@dataclass(frozen=True)
class HandlerInfo:
    """Description of a handler to register."""

    priority: EventPriority
    target_event: EventType
    target_scene: Scene
    ignore_canceled: bool
    handling_function: HandlingFunction


@dataclass(eq=False)
class EventHandler:
    """A registered handler and the number of times it has run."""

    priority: EventPriority
    target_event: EventType
    target_scene: Scene
    ignore_canceled: bool
    handling_function: HandlingFunction
    call_count: int = 0


class _SceneHolder(Protocol):
    scene: Scene


class _InfoLogger(Protocol):
    def info(self, message: str, *args: object) -> object: ...


def priority_ascending(handler: EventHandler) -> int:
    """Sort key putting the lowest priority first."""
    return int(handler.priority)


def priority_descending(handler: EventHandler) -> int:
    """Sort key putting the highest priority first."""
    return -int(handler.priority)


@dataclass
class EventBus:
    """Ordered collection of event handlers."""

    _handlers: list[EventHandler] = field(default_factory=list)

    def register(self, info: HandlerInfo) -> EventHandler:
        """Add a handler; among equal priorities the newest runs first."""
        handler = EventHandler(
            priority=info.priority,
            target_event=info.target_event,
            target_scene=info.target_scene,
            ignore_canceled=info.ignore_canceled,
            handling_function=info.handling_function,
        )
        self._handlers.insert(0, handler)
        self.sort(priority_descending)
        return handler

    def remove(self, handler: EventHandler) -> None:
        """Remove ``handler`` if registered; unknown handlers are ignored."""
        for index, current in enumerate(self._handlers):
            if current is handler:
                del self._handlers[index]
                return

    def clear(self) -> None:
        """Remove every handler."""
        self._handlers.clear()

    def process(self, context: _SceneHolder, data: EventData) -> None:
        """Run every matching handler on ``data`` in order."""
        for handler in list(self._handlers):
            if data.type != handler.target_event:
                continue
            if data.is_canceled and handler.ignore_canceled:
                continue
            if handler.target_scene != Scene.ALL and context.scene != handler.target_scene:
                continue
            handler.call_count += 1
            handler.handling_function(context, data)

    def sort(self, key: Callable[[EventHandler], Any]) -> None:
        """Reorder the handlers stably by ``key``."""
        self._handlers.sort(key=key)

    def dump(self, logger: _InfoLogger) -> None:
        """Log one line describing each handler."""
        logger.info("<EventHandlerDump>")
        for index, handler in enumerate(self._handlers):
            logger.info(
                "[%i] Type[%i] | Priority[%i] | Scene[%i] | "
                "CallCount[%i] | IgnoreCanceled[%i].",
                index,
                int(handler.target_event),
                int(handler.priority),
                int(handler.target_scene),
                handler.call_count,
                int(handler.ignore_canceled),
            )
        logger.info("</EventHandlerDump>")

    def __iter__(self) -> Iterator[EventHandler]:
        return iter(list(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)