"""Animation descriptions: frame rectangles, offsets and playback settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from xastle.config import Texture
from xastle.geometry import IntRect, Vec2


class AnimName(Enum):
    IDLE = "Idle"
    FLY = "Fly"
    IDLE_TO_RUN = "IdleToRun"
    RUNNING = "Running"
    RUN_TO_IDLE = "RunToIdle"
    INVARIANT = "Invariant"


class AnimState(Enum):
    PLAYING = "Playing"
    TRANSIENT = "Transient"
    LOOP_WAITING = "LoopWaiting"
    STOPPED = "Stopped"
    INVARIANT = "Invariant"


class AnimDir(Enum):
    LEFT = "Left"
    RIGHT = "Right"
    UNI = "Uni"
    INVARIANT = "Invariant"


class AnimSheetType(Enum):
    NORMAL = "Normal"
    PADDED = "Padded"
    BLOCKS = "Blocks"
    VERTICAL = "Vertical"


ANIM_NAMES: Mapping[str, AnimName] = MappingProxyType(
    {
        "Idle": AnimName.IDLE,
        "Invariant": AnimName.INVARIANT,
        "IdleToRun": AnimName.IDLE_TO_RUN,
        "RunToIdle": AnimName.RUN_TO_IDLE,
        "Running": AnimName.RUNNING,
        "Fly": AnimName.FLY,
    }
)

DIRECTIONS: Mapping[str, AnimDir] = MappingProxyType(
    {"Left": AnimDir.LEFT, "Right": AnimDir.RIGHT, "Uni": AnimDir.UNI}
)

TEXTURE_IDS: Mapping[str, Texture] = MappingProxyType(
    {
        "PlayerAtlas": Texture.MEGA_MAN_SHEET_1X48X48X1,
        "Intro": Texture.TILESET_INTRO,
    }
)

SHEET_TYPES: Mapping[str, AnimSheetType] = MappingProxyType(
    {
        "Blocks": AnimSheetType.BLOCKS,
        "Normal": AnimSheetType.NORMAL,
        "Padded": AnimSheetType.PADDED,
        "Vertical": AnimSheetType.VERTICAL,
    }
)


def _pick(items: list, index: int, what: str):
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range (have {len(items)})")
    return items[index]


@dataclass
class Animation:
    """Frames and offsets of one animation, per facing direction."""

    num_frames: int = 0
    left_frames: List[IntRect] = field(default_factory=list)
    right_frames: List[IntRect] = field(default_factory=list)
    uni_frames: List[IntRect] = field(default_factory=list)
    left_offsets: List[Vec2] = field(default_factory=list)
    right_offsets: List[Vec2] = field(default_factory=list)
    uni_offsets: List[Vec2] = field(default_factory=list)
    previous_state: AnimState = AnimState.INVARIANT
    transient_state: AnimState = AnimState.INVARIANT
    curr_state: AnimState = AnimState.INVARIANT
    name: AnimName = AnimName.INVARIANT
    texture: Texture = Texture.INVARIANT
    world_size: Vec2 = field(default_factory=Vec2)
    frame_delay: float = 0.0
    loop_wait_delay: float = 0.0
    loop_waits: bool = False
    loops: bool = True
    playing: bool = True

    def has_left_frames(self) -> bool:
        return bool(self.left_frames)

    def has_right_frames(self) -> bool:
        return bool(self.right_frames)

    def has_uni_frames(self) -> bool:
        return bool(self.uni_frames)

    def frame(self, direction: AnimDir, index: int) -> IntRect:
        """Return the frame rectangle; an empty rectangle for an invariant direction."""
        frames = {
            AnimDir.RIGHT: self.right_frames,
            AnimDir.LEFT: self.left_frames,
            AnimDir.UNI: self.uni_frames,
        }.get(direction)
        if frames is None:
            return IntRect(0, 0, 0, 0)
        return _pick(frames, index, "frame")

    def offset(self, direction: AnimDir, index: int) -> Vec2:
        """Return the frame offset; a zero vector for an invariant direction."""
        offsets = {
            AnimDir.RIGHT: self.right_offsets,
            AnimDir.LEFT: self.left_offsets,
            AnimDir.UNI: self.uni_offsets,
        }.get(direction)
        if offsets is None:
            return Vec2(0.0, 0.0)
        return _pick(offsets, index, "offset")