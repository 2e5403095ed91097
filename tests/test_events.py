import dataclasses

import pytest

from xastle.events import (
    MOVEMENT_EVENTS,
    PLAYER_EVENTS,
    Event,
    Hit,
    Landing,
    Moved,
    ShootSetupDone,
    StartedJumping,
    StoppedMoving,
)


def test_base_event_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Event()


def test_names_match_source():
    assert Hit().name == "Hit"
    assert Moved().name == "Moved"
    assert StartedJumping().name == "StartedJump"


def test_landing_carries_moving_flag():
    assert Landing(True).moving is True
    assert Landing(moving=False).moving is False
    assert Landing(True).name == "Landing"


def test_landing_requires_moving():
    with pytest.raises(TypeError):
        Landing()


def test_events_are_value_objects():
    assert Hit() == Hit()
    assert Landing(True) != Landing(False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        Landing(True).moving = False


def test_player_events_are_distinct_with_unique_names():
    events = [cls(True) if cls is Landing else cls() for cls in PLAYER_EVENTS]
    names = [event.name for event in events]
    assert len(events) == 17
    assert len(set(names)) == len(names)
    assert "none" not in names
    assert ShootSetupDone().name in names
    assert Landing(False).name in names


def test_movement_events():
    assert [cls().name for cls in MOVEMENT_EVENTS] == ["Moved", "StoppedMoving"]
    assert StoppedMoving().name == "StoppedMoving"
    assert StoppedMoving in PLAYER_EVENTS
    assert Moved not in PLAYER_EVENTS