"""Scrolling, wrapping parallax background."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from xastle.config import Texture
from xastle.geometry import FloatRect, IntRect, Vec2

logger = logging.getLogger(__name__)

_SCROLL_SPEED = 15.0
_BACK_LAYER_Y = -1200.0
_HALF_VIEW_WIDTH = 400.0
_HALF_VIEW_HEIGHT = 300.0
_COVER_WIDTH = 805


@dataclass(frozen=True)
class BackgroundPiece:
    """A part of a background texture to draw at a place on screen."""

    texture: Texture
    tex_rect: IntRect
    position: Vec2


class Background:
    """A back layer that scrolls left and wraps with a copy of itself."""

    def __init__(self) -> None:
        self._positions: List[List[Vec2]] = []
        self._sizes: List[Vec2] = []
        self._textures: List[Texture] = []
        self._current_level = 0
        self._copy_behind = True

    @property
    def positions(self) -> List[List[Vec2]]:
        return [list(layer) for layer in self._positions]

    @property
    def sizes(self) -> List[Vec2]:
        return list(self._sizes)

    @property
    def textures(self) -> List[Texture]:
        return list(self._textures)

    @property
    def current_level(self) -> int:
        return self._current_level

    @property
    def copy_behind(self) -> bool:
        """Whether the first copy of the back layer is the one in front."""
        return self._copy_behind

    def set_params(self, pos: Vec2, size: Vec2, texture: Texture, layer: int, level: int) -> None:
        """Place a layer's texture and size, then lay out the level."""
        if layer < len(self._textures) - 1:
            row = self._positions[layer]
            old_width = self._sizes[layer].x
            if len(row) == 1:
                row[0] = pos
            else:
                row.append(pos)
            row.append(Vec2(pos.x + old_width, pos.y))
            self._sizes[layer] = size
            self._textures[layer] = texture
        else:
            self._positions.append([])
            self._positions[0] = [pos, pos]
            if len(self._sizes) == 1:
                self._sizes[0] = size
            else:
                self._sizes.append(size)
            if len(self._textures) == 1:
                self._textures[0] = texture
            else:
                self._textures.append(texture)
        self.set_level(level)

    def set_level(self, level: int) -> None:
        """Reset the layers to their starting places."""
        if self._positions:
            back = self._positions[0]
            back[0] = Vec2(0.0, _BACK_LAYER_Y)
            back[1] = Vec2(self._sizes[0].x, _BACK_LAYER_Y)
            self._copy_behind = True
        for row in self._positions[1:3]:
            if row:
                row[: min(2, len(row))] = [Vec2()] * min(2, len(row))

    def _back_layer(self) -> List[Vec2]:
        if not self._positions or len(self._positions[0]) < 2:
            raise ValueError("no background layer has been set")
        return self._positions[0]

    def update(self, dt: float) -> None:
        """Scroll the back layer left and keep its copy adjacent."""
        back = self._back_layer()
        width = self._sizes[self._current_level].x
        if self._copy_behind:
            lead = back[0]
            back[0] = Vec2(lead.x - _SCROLL_SPEED * dt, lead.y)
            back[1] = Vec2(back[0].x + width, back[0].y)
        else:
            lead = back[1]
            back[1] = Vec2(lead.x - _SCROLL_SPEED * dt, lead.y)
            back[0] = Vec2(back[1].x + width, back[1].y)

    def render(self, view_center: Vec2, view_bounds: FloatRect) -> List[BackgroundPiece]:
        """Wrap the back layer if needed and return the pieces covering the view."""
        back = self._back_layer()
        size = self._sizes[0]
        threshold = view_bounds.left - size.x
        if self._copy_behind:
            if back[0].x <= threshold:
                self._copy_behind = False
                back[0] = Vec2(back[1].x + size.x, back[0].y)
                logger.debug("copy now in front: %s, %s", back[0].x, back[1].x)
        elif back[1].x <= threshold:
            self._copy_behind = True
            back[1] = Vec2(back[0].x + size.x, back[1].y)
            logger.debug("copy now in back: %s, %s", back[0].x, back[1].x)

        if not self._textures:
            return []

        front, other = (back[0], back[1]) if self._copy_behind else (back[1], back[0])
        overlap = view_bounds.intersection(FloatRect(front.x, front.y, size.x, size.y))
        if overlap is None:
            return []

        height = overlap.to_int().height
        view_left = view_center.x - _HALF_VIEW_WIDTH
        view_right = view_center.x + _HALF_VIEW_WIDTH
        first_width = int(
            min(
                size.x - view_left - (size.x - view_right),
                size.x + front.x - view_left,
            )
        )
        first = BackgroundPiece(
            self._textures[0],
            IntRect(int(view_bounds.left) - int(front.x), int(abs(front.y)), first_width, height),
            Vec2(view_left, view_center.y - _HALF_VIEW_HEIGHT),
        )
        second = BackgroundPiece(
            self._textures[0],
            IntRect(
                int(max(abs(other.x) - size.x, 0.0)),
                int(abs(front.y)),
                _COVER_WIDTH - first_width,
                height,
            ),
            Vec2(view_left + first_width, first.position.y),
        )
        return [first, second]