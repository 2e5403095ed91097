"""Animation state machine of the green guard enemy."""

from __future__ import annotations

from types import MappingProxyType

from xastle import events as ev
from xastle.fsm import ANIM_STATE_NAMES, AnimStateKind, StateMachine, Transition

S = AnimStateKind

_GREEN_GUY_TRANSITIONS = {
    (S.GUARDING, ev.Hit): S.HIT,
    (S.GUARDING, ev.LifeDepleted): S.DEAD,
    (S.GUARDING, ev.DetectedTarget): S.WARNING,
    (S.GUARDING, ev.StartedShooting): S.STARTED_SHOOTING,
    (S.IDLE, ev.Hit): S.HIT,
    (S.IDLE, ev.LifeDepleted): S.DEAD,
    (S.IDLE, ev.DetectedTarget): S.WARNING,
    (S.IDLE, ev.StartedShooting): S.STARTED_SHOOTING,
    (S.HIT, ev.Recovered): Transition(S.GUARDING, "Falling"),
    (S.HIT, ev.LifeDepleted): S.DEAD,
    (S.SHOOTING, ev.Hit): S.HIT,
    (S.SHOOTING, ev.LifeDepleted): S.DEAD,
    (S.SHOOTING, ev.StoppedShooting): S.GUARDING,
    (S.STARTED_SHOOTING, ev.Hit): S.HIT,
    (S.STARTED_SHOOTING, ev.LifeDepleted): S.DEAD,
    (S.STARTED_SHOOTING, ev.StartedShooting): S.SHOOTING,
    (S.RISING, ev.NearingTopOfJump): S.AT_JUMP_TOP,
    (S.RISING, ev.Hit): S.HIT,
    (S.RISING, ev.LifeDepleted): S.DEAD,
    (S.AT_JUMP_TOP, ev.ReachedJumpHeight): S.FALLING,
    (S.AT_JUMP_TOP, ev.Hit): S.HIT,
    (S.AT_JUMP_TOP, ev.LifeDepleted): S.DEAD,
    (S.FALLING, ev.Landing): S.GUARDING,
    (S.FALLING, ev.Hit): S.HIT,
    (S.FALLING, ev.LifeDepleted): S.DEAD,
    (S.WARNING, ev.StartedShooting): S.SHOOTING,
    (S.WARNING, ev.Hit): S.HIT,
    (S.WARNING, ev.LifeDepleted): S.DEAD,
}


class GreenGuyFSM(StateMachine):
    """Animation states of the green guard: guarding, warning, shooting, hit and dead."""

    initial_state = S.IDLE
    transitions = MappingProxyType(_GREEN_GUY_TRANSITIONS)
    state_names = ANIM_STATE_NAMES