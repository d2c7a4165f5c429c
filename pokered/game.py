"""Game context, start-up, main loop and shutdown."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import pygame

from pokered.camera import Camera, CameraLine, create_camera
from pokered.delta import MICRO_PER_MS, Delta, create_delta
from pokered.events import EventBus, EventData, EventPriority, EventType, HandlerInfo, Scene
from pokered.logger import Logger, init_logger
from pokered.position import Size2f, Vector2f, vector2f
from pokered.resolver import process_backend_event

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
WINDOW_TITLE = "Pokemon Red"
FRAMERATE_LIMIT = 144


class GameLoadError(RuntimeError):
    """Raised when the game cannot be set up."""


@dataclass
class GameContext:
    """Everything the running game shares between its parts."""

    window: Any = None
    window_open: bool = False
    clock: Any = None
    camera: Camera | None = None
    scene: Scene = Scene.ALL
    running: bool = False
    delta: Delta | None = None
    logger: Logger | None = None
    handlers: EventBus = field(default_factory=EventBus)

    def is_key_pressed(self, key: int) -> bool:
        """Tell whether ``key`` is currently held down."""
        return bool(pygame.key.get_pressed()[key])

    def close_window(self) -> None:
        """Mark the window as closed; the main loop stops on its next check."""
        self.window_open = False


def log_path(now: datetime) -> str:
    """Return the log file path for the date of ``now``."""
    return f"./log/{now.month:02d}-{now.day:02d}-{now.year:02d}.log"


def window_close_handler(context: GameContext, event_data: EventData) -> None:
    """Close the window when the game is running and the window is open."""
    if not context.running or not context.window_open:
        return
    context.close_window()


def _load_window(context: GameContext) -> None:
    try:
        pygame.display.init()
        context.window = pygame.display.set_mode(
            (WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
    except pygame.error as error:
        raise GameLoadError(f"unable to create the window: {error}") from error
    context.window_open = True


def load_game(context: GameContext) -> None:
    """Set up logger, window, clock, camera and the basic handlers.

    Raises GameLoadError if the window cannot be created.
    """
    context.logger = init_logger(log_path(datetime.now()))
    _load_window(context)
    context.clock = pygame.time.Clock()
    context.camera = create_camera(
        context, Vector2f(0.0, 0.0), Size2f(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
    )
    context.scene = Scene.GAME
    context.handlers.register(
        HandlerInfo(
            EventPriority.LOWEST,
            EventType.WINDOW_CLOSED,
            Scene.ALL,
            False,
            window_close_handler,
        )
    )


def _render(context: GameContext) -> None:
    context.window.fill((0, 0, 0))
    context.camera.draw_line(
        CameraLine(vector2f(10, 10), vector2f(100, 100), 20.0, (255, 0, 0))
    )
    pygame.display.flip()


def _update(context: GameContext) -> None:
    context.handlers.process(context, EventData(EventType.PRE_UPDATE))
    for event in pygame.event.get():
        process_backend_event(context, event)
    context.handlers.process(context, EventData(EventType.POST_UPDATE))


def launch_game(context: GameContext) -> None:
    """Run the main loop until the window is closed."""
    delta = create_delta(1.0)
    context.running = True
    context.delta = delta
    context.clock.tick()
    while context.running:
        delta.update(context.clock.tick(FRAMERATE_LIMIT) * MICRO_PER_MS)
        _render(context)
        _update(context)
        if not context.window_open:
            context.running = False


def destroy_game(context: GameContext) -> None:
    """Release the handlers, the logger and the window."""
    context.handlers.clear()
    if context.logger is not None:
        context.logger.close()
    if context.window is not None:
        pygame.display.quit()
        context.window = None
        context.window_open = False


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game and return the process exit status."""
    context = GameContext()
    try:
        load_game(context)
    except GameLoadError:
        print("An error occur while loading the game !", file=sys.stderr)
        destroy_game(context)
        return 84
    try:
        launch_game(context)
    finally:
        destroy_game(context)
    return 0