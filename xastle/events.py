"""Events that drive the animation state machines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type


@dataclass(frozen=True)
class Event:
    """Base of all state-machine events; not instantiated itself."""

    name: ClassVar[str] = "none"

    def __post_init__(self) -> None:
        if type(self) is Event:
            raise TypeError("Event is abstract; instantiate a concrete event")


@dataclass(frozen=True)
class StartedShooting(Event):
    name: ClassVar[str] = "StartedShooting"


@dataclass(frozen=True)
class StartedMoving(Event):
    name: ClassVar[str] = "StartedMoving"


@dataclass(frozen=True)
class StoppedMoving(Event):
    name: ClassVar[str] = "StoppedMoving"


@dataclass(frozen=True)
class Fell(Event):
    name: ClassVar[str] = "Fell"


@dataclass(frozen=True)
class Hit(Event):
    name: ClassVar[str] = "Hit"


@dataclass(frozen=True)
class JumpStartFinished(Event):
    name: ClassVar[str] = "JumpStartFinished"


@dataclass(frozen=True)
class Landing2(Event):
    name: ClassVar[str] = "Landing2"


@dataclass(frozen=True)
class MoveStartFinished(Event):
    name: ClassVar[str] = "MoveStartFinished"


@dataclass(frozen=True)
class Recovered(Event):
    name: ClassVar[str] = "Recovered"


@dataclass(frozen=True)
class LifeDepleted(Event):
    name: ClassVar[str] = "LifeDepleted"


@dataclass(frozen=True)
class NearingTopOfJump(Event):
    name: ClassVar[str] = "NearingTopOfJump"


@dataclass(frozen=True)
class StoppedShooting(Event):
    name: ClassVar[str] = "StoppedShooting"


@dataclass(frozen=True)
class StartedJumping(Event):
    name: ClassVar[str] = "StartedJump"


@dataclass(frozen=True)
class Landing(Event):
    """Touching down; records whether the actor was moving."""

    moving: bool
    name: ClassVar[str] = "Landing"


@dataclass(frozen=True)
class ShootSetupDone(Event):
    name: ClassVar[str] = "ShootSetupDone"


@dataclass(frozen=True)
class ReachedJumpHeight(Event):
    name: ClassVar[str] = "ReachedJumpHeight"


@dataclass(frozen=True)
class DetectedTarget(Event):
    name: ClassVar[str] = "DetectedTarget"


@dataclass(frozen=True)
class Moved(Event):
    name: ClassVar[str] = "Moved"


PLAYER_EVENTS: Tuple[Type[Event], ...] = (
    StartedShooting,
    MoveStartFinished,
    DetectedTarget,
    StartedMoving,
    StoppedMoving,
    Fell,
    Hit,
    JumpStartFinished,
    Landing2,
    Recovered,
    LifeDepleted,
    NearingTopOfJump,
    StoppedShooting,
    StartedJumping,
    Landing,
    ShootSetupDone,
    ReachedJumpHeight,
)

MOVEMENT_EVENTS: Tuple[Type[Event], ...] = (Moved, StoppedMoving)