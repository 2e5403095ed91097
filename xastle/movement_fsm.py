"""Two-state movement animation machine: idle and running."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from xastle import events as ev
from xastle.fsm import StateMachine


class MoveState(Enum):
    """States of the simple movement animation."""

    IDLE = "Idle"
    RUNNING = "Running"


_MOVEMENT_TRANSITIONS = {
    (MoveState.IDLE, ev.Moved): MoveState.RUNNING,
    (MoveState.RUNNING, ev.StoppedMoving): MoveState.IDLE,
}


class MovementFSM(StateMachine):
    """Switches between idle and running as the actor starts and stops moving."""

    initial_state = MoveState.IDLE
    transitions = MappingProxyType(_MOVEMENT_TRANSITIONS)
    state_names = MappingProxyType({kind: kind.value for kind in MoveState})