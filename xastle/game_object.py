"""World objects drawn as a textured quad of two triangles."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from xastle.config import Texture
from xastle.geometry import IntRect, Vec2

WHITE: Tuple[int, int, int, int] = (255, 255, 255, 255)

_DEFAULT_RECT = IntRect(0, 0, 64, 64)
_EMPTY_RECT = IntRect(0, 0, 0, 0)


@dataclass(frozen=True)
class Vertex:
    """One corner of the quad: where it sits, where it samples the texture, its tint."""

    position: Vec2 = Vec2()
    tex_coords: Vec2 = Vec2()
    color: Tuple[int, int, int, int] = WHITE


def _corners(origin: Vec2, size: Vec2) -> List[Vec2]:
    """The six corners of the two triangles covering a rectangle."""
    x0, y0 = origin.x, origin.y
    x1, y1 = origin.x + size.x, origin.y + size.y
    return [
        Vec2(x0, y0),
        Vec2(x1, y0),
        Vec2(x0, y1),
        Vec2(x0, y1),
        Vec2(x1, y0),
        Vec2(x1, y1),
    ]


class GameObject(ABC):
    """An object with a place in the game world.

    The first vertex of the quad is the object's world position minus its
    texture offset.
    """

    def __init__(
        self,
        texture: Optional[Texture] = None,
        rect: IntRect = _EMPTY_RECT,
        tex_offset: Vec2 = Vec2(),
        size: Vec2 = Vec2(),
        pos: Vec2 = Vec2(),
        texture_size: Optional[Tuple[int, int]] = None,
    ) -> None:
        self._quad: List[Vertex] = [Vertex() for _ in range(6)]
        self.velocity = Vec2()
        self.acceleration = Vec2()
        self.alive = True

        if texture is None:
            self.texture = Texture.INVARIANT
            self._tex_rect = _DEFAULT_RECT
            self._offset = Vec2()
            self._world_size = Vec2(64.0, 64.0)
            self._world_pos = Vec2()
            self._update_tex_coords()
            self._update_position()
            return

        if rect == _EMPTY_RECT:
            if texture_size is None:
                raise ValueError(
                    "an empty texture rectangle needs the texture's size to fill it in"
                )
            width, height = texture_size
            rect = IntRect(rect.left, rect.top, int(width), int(height))

        self.texture = texture
        self._tex_rect = rect
        self._offset = tex_offset
        self._world_pos = pos
        if size == Vec2():
            self._world_size = Vec2(float(rect.width), float(rect.height))
        else:
            self._world_size = size
        self.position = pos - tex_offset

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """The six vertices of the quad."""
        return tuple(self._quad)

    @property
    def position(self) -> Vec2:
        return self._world_pos

    @position.setter
    def position(self, pos: Vec2) -> None:
        self._world_pos = pos
        self._update_position()
        self._update_tex_coords()

    @property
    def world_size(self) -> Vec2:
        return self._world_size

    @world_size.setter
    def world_size(self, size: Vec2) -> None:
        self._world_size = size

    @property
    def offset(self) -> Vec2:
        return self._offset

    @property
    def tex_rect(self) -> IntRect:
        return self._tex_rect

    @tex_rect.setter
    def tex_rect(self, rect: IntRect) -> None:
        self._tex_rect = rect
        self._update_tex_coords()
        self._update_position()

    def move(self, amount: Vec2) -> None:
        """Shift the object by amount in world space."""
        self._world_pos = self._world_pos + amount
        self._update_position()
        self._update_tex_coords()

    def handle_input(self) -> None:
        """React to input; an object without controls drops any input-driven acceleration."""
        self.acceleration = Vec2()

    def execute_script(self) -> None:
        """Run scripted behaviour; by default a dead object stops moving."""
        if not self.alive:
            self.velocity = Vec2()
            self.acceleration = Vec2()

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the object's state by dt seconds."""

    @abstractmethod
    def finalize(self, dt: float) -> None:
        """Settle the object's state at the end of a frame."""

    def _update_tex_coords(self) -> None:
        rect = self._tex_rect
        corners = _corners(
            Vec2(float(rect.left), float(rect.top)),
            Vec2(float(rect.width), float(rect.height)),
        )
        self._quad = [
            dataclasses.replace(vertex, tex_coords=corner, color=WHITE)
            for vertex, corner in zip(self._quad, corners)
        ]

    def _update_position(self) -> None:
        rect = self._tex_rect
        corners = _corners(
            self._world_pos - self._offset,
            Vec2(float(rect.width), float(rect.height)),
        )
        self._quad = [
            dataclasses.replace(vertex, position=corner, color=WHITE)
            for vertex, corner in zip(self._quad, corners)
        ]


class InvariantObject(GameObject):
    """A game object that never changes on its own."""

    def update(self, dt: float) -> None:
        """Keep the object at rest: it has no velocity or acceleration of its own."""
        self.velocity = Vec2()
        self.acceleration = Vec2()

    def finalize(self, dt: float) -> None:
        """Bring the quad in line with the current position and texture rectangle."""
        self._update_position()
        self._update_tex_coords()