import pytest

from xastle.animation import (
    ANIM_NAMES,
    DIRECTIONS,
    SHEET_TYPES,
    TEXTURE_IDS,
    AnimDir,
    AnimName,
    AnimSheetType,
    AnimState,
    Animation,
)
from xastle.config import Texture
from xastle.geometry import IntRect, Vec2


@pytest.fixture
def anim():
    return Animation(
        num_frames=2,
        left_frames=[IntRect(0, 0, 10, 10), IntRect(10, 0, 10, 10)],
        right_frames=[IntRect(0, 10, 10, 10)],
        left_offsets=[Vec2(1, 2), Vec2(3, 4)],
        right_offsets=[Vec2(5, 6)],
    )


def test_defaults():
    a = Animation()
    assert a.name is AnimName.INVARIANT
    assert a.curr_state is AnimState.INVARIANT
    assert a.texture is Texture.INVARIANT
    assert a.loops is True
    assert a.loop_waits is False
    assert a.world_size == Vec2(0.0, 0.0)


def test_has_frames(anim):
    assert anim.has_left_frames() is True
    assert anim.has_right_frames() is True
    assert anim.has_uni_frames() is False


def test_frame_lookup(anim):
    assert anim.frame(AnimDir.LEFT, 1) == IntRect(10, 0, 10, 10)
    assert anim.frame(AnimDir.RIGHT, 0) == IntRect(0, 10, 10, 10)


def test_offset_lookup(anim):
    assert anim.offset(AnimDir.LEFT, 0) == Vec2(1, 2)
    assert anim.offset(AnimDir.RIGHT, 0) == Vec2(5, 6)


def test_invariant_direction_gives_empty(anim):
    assert anim.frame(AnimDir.INVARIANT, 0) == IntRect(0, 0, 0, 0)
    assert anim.offset(AnimDir.INVARIANT, 3) == Vec2(0.0, 0.0)


@pytest.mark.parametrize("index", [2, -1, 100])
def test_frame_out_of_range(anim, index):
    with pytest.raises(IndexError):
        anim.frame(AnimDir.LEFT, index)


def test_offset_out_of_range_on_empty(anim):
    with pytest.raises(IndexError):
        anim.offset(AnimDir.UNI, 0)


def test_lookup_tables():
    assert ANIM_NAMES["Running"] is AnimName("Running")
    assert ANIM_NAMES["IdleToRun"] is AnimName("IdleToRun")
    assert TEXTURE_IDS["PlayerAtlas"] is Texture(5)
    assert TEXTURE_IDS["Intro"] is Texture(6)
    assert DIRECTIONS["Uni"] is AnimDir.UNI
    assert SHEET_TYPES["Padded"] is AnimSheetType.PADDED


def test_lookup_used_for_frames(anim):
    direction = DIRECTIONS["Left"]
    assert anim.frame(direction, 0) == IntRect(0, 0, 10, 10)
    assert anim.offset(DIRECTIONS["Right"], 0) == Vec2(5, 6)


def test_name_table_round_trips_enum_values():
    for text, name in ANIM_NAMES.items():
        assert name.value == text