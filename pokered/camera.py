"""A camera translating world positions to screen positions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import pygame

from pokered.events import EventData, EventPriority, EventType, HandlerInfo, Scene
from pokered.position import Size2f, Vector2f

CAMERA_MOVEMENT_SPEED = 100


@dataclass
class Camera:
    """View onto the game world; ``position`` is its world origin."""

    context: Any = field(repr=False)
    offset: Vector2f = field(default_factory=Vector2f)
    position: Vector2f = field(default_factory=Vector2f)
    size: Size2f = field(default_factory=Size2f)

    def to_local(self, global_position: Vector2f) -> Vector2f:
        """Convert a world position to a position relative to the camera."""
        return Vector2f(
            global_position.x - self.position.x,
            global_position.y - self.position.y,
        )

    def to_global(self, local_position: Vector2f) -> Vector2f:
        """Convert a camera-relative position to a world position."""
        return Vector2f(
            local_position.x + self.position.x,
            local_position.y + self.position.y,
        )

    def draw_line(self, line: CameraLine) -> None:
        """Draw a thick line given in world coordinates onto the context's window."""
        local = CameraLine(
            start_position=self.to_local(line.start_position),
            end_position=self.to_local(line.end_position),
            thickness=line.thickness,
            color=line.color,
        )
        points = line_triangles(local)
        surface = self.context.window
        for first in range(0, len(points), 3):
            triangle = [point.to_tuple() for point in points[first:first + 3]]
            pygame.draw.polygon(surface, local.color, triangle)


@dataclass(frozen=True)
class CameraLine:
    """A straight segment with a thickness and a colour."""

    start_position: Vector2f
    end_position: Vector2f
    thickness: float
    color: Any


def line_triangles(line: CameraLine) -> list[Vector2f]:
    """Return the six vertices of the two triangles covering ``line``.

    A line of zero length covers nothing and yields no vertices.
    """
    start, end = line.start_position, line.end_position
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return []
    half = line.thickness / 2
    nx, ny = -(dy / length), dx / length
    of1 = (nx * half, ny * half)
    of2 = (-nx * half, -ny * half)
    start_1 = Vector2f(start.x + of1[0], start.y + of1[1])
    start_2 = Vector2f(start.x + of2[0], start.y + of2[1])
    end_1 = Vector2f(end.x + of1[0], end.y + of1[1])
    end_2 = Vector2f(end.x + of2[0], end.y + of2[1])
    return [start_1, start_2, end_1, end_1, start_2, end_2]


def camera_movement_handler(context: Any, event_data: EventData) -> None:
    """Move the camera according to the W, A, S and D keys."""
    distance = CAMERA_MOVEMENT_SPEED * context.delta.delta
    camera = context.camera
    x, y = camera.position.x, camera.position.y
    if context.is_key_pressed(pygame.K_w):
        y += distance
    if context.is_key_pressed(pygame.K_s):
        y -= distance
    if context.is_key_pressed(pygame.K_d):
        x -= distance
    if context.is_key_pressed(pygame.K_a):
        x += distance
    camera.position = Vector2f(x, y)


def create_camera(context: Any, offset: Vector2f, size: Size2f) -> Camera:
    """Create a camera at the origin and register its movement handler."""
    camera = Camera(context=context, offset=offset, position=Vector2f(0.0, 0.0), size=size)
    context.handlers.register(
        HandlerInfo(
            EventPriority.NORMAL,
            EventType.PRE_UPDATE,
            Scene.GAME,
            True,
            camera_movement_handler,
        )
    )
    return camera