"""Table-driven state machine and the animation states it moves between."""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Hashable, Mapping, NamedTuple, Optional, Tuple, Type

from xastle.events import Event

logger = logging.getLogger(__name__)


class AnimStateKind(Enum):
    """Animation states of player and enemy characters."""

    IDLE = "Idle"
    STARTED_MOVING = "StartedMoving"
    JUMPING_AND_SHOOTING = "JumpingAndShooting"
    WARNING = "Warning"
    GUARDING = "Guarding"
    STARTED_MOVING_AND_SHOOTING = "StartedMovingAndShooting"
    SHOOTING = "Shooting"
    HIT = "Hit"
    DEAD = "Dead"
    MOVING = "Moving"
    STARTED_JUMP = "StartedJump"
    RISING = "Rising"
    FALLING = "Falling"
    LANDING = "Landing"
    MOVING_AND_SHOOTING = "MovingAndShooting"
    STARTED_JUMP_AND_SHOOTING = "StartedJumpAndShooting"
    RISING_AND_SHOOTING = "RisingAndShooting"
    AT_JUMP_TOP_AND_SHOOTING = "AtJumpTopAndShooting"
    AT_JUMP_TOP = "AtJumpTop"
    FALLING_AND_SHOOTING = "FallingAndShooting"
    LANDING_AND_SHOOTING = "LandingAndShooting"
    STARTED_SHOOTING = "StartedShooting"


# Display names; JUMPING_AND_SHOOTING has none and reports "None".
ANIM_STATE_NAMES: Mapping[AnimStateKind, str] = MappingProxyType(
    {
        kind: kind.value
        for kind in AnimStateKind
        if kind is not AnimStateKind.JUMPING_AND_SHOOTING
    }
)


class Transition(NamedTuple):
    """Target of a transition and the message announced when taking it."""

    target: Any
    message: Optional[str] = None


class StateMachine:
    """Moves between states by looking up (state, event type) in a table.

    Pairs absent from the table are ignored and leave the state unchanged.
    """

    initial_state: ClassVar[Hashable] = None
    transitions: ClassVar[Mapping[Tuple[Hashable, Type[Event]], Any]] = MappingProxyType({})
    state_names: ClassVar[Mapping[Hashable, str]] = MappingProxyType({})

    def __init__(self, state: Hashable = None) -> None:
        self.state = self.initial_state if state is None else state

    def dispatch(self, event: Event) -> Hashable:
        """Apply one event and return the resulting state."""
        rule = self.transitions.get((self.state, type(event)))
        if rule is None:
            return self.state
        if isinstance(rule, Transition):
            target, message = rule
        else:
            target, message = rule, None
        if message is None:
            message = self.state_names.get(target, "None")
        logger.info("%s", message)
        self.state = target
        return self.state

    def state_name(self) -> str:
        """Return the display name of the current state, or "None"."""
        return self.state_names.get(self.state, "None")


def dispatch(fsm: StateMachine, *args: Event) -> None:
    """Dispatch each event to fsm in order."""
    for event in args:
        fsm.dispatch(event)