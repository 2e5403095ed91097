"""Animation state machine of the player character."""

from __future__ import annotations

from types import MappingProxyType

from xastle import events as ev
from xastle.fsm import ANIM_STATE_NAMES, AnimStateKind, StateMachine, Transition

S = AnimStateKind

_PLAYER_TRANSITIONS = {
    (S.IDLE, ev.StartedMoving): S.STARTED_MOVING,
    (S.IDLE, ev.StartedShooting): S.STARTED_SHOOTING,
    (S.IDLE, ev.StartedJumping): S.STARTED_JUMP,
    (S.IDLE, ev.Fell): S.FALLING,
    (S.IDLE, ev.Hit): S.HIT,
    (S.HIT, ev.Recovered): S.IDLE,
    (S.HIT, ev.LifeDepleted): S.DEAD,
    (S.SHOOTING, ev.StoppedShooting): S.IDLE,
    (S.SHOOTING, ev.StartedMoving): S.MOVING_AND_SHOOTING,
    (S.SHOOTING, ev.StartedJumping): Transition(S.STARTED_JUMP_AND_SHOOTING, "RisingAndShooting"),
    (S.SHOOTING, ev.Hit): S.HIT,
    (S.SHOOTING, ev.Fell): S.FALLING,
    (S.MOVING, ev.StoppedMoving): S.IDLE,
    (S.MOVING, ev.StartedShooting): S.MOVING_AND_SHOOTING,
    (S.MOVING, ev.StartedJumping): S.STARTED_JUMP,
    (S.MOVING, ev.Fell): S.FALLING,
    (S.STARTED_JUMP, ev.StartedShooting): S.STARTED_JUMP_AND_SHOOTING,
    (S.STARTED_JUMP, ev.Hit): S.HIT,
    (S.STARTED_JUMP, ev.JumpStartFinished): S.RISING,
    (S.RISING, ev.StartedShooting): Transition(S.RISING_AND_SHOOTING, "RisingAndStartedShooting"),
    (S.RISING, ev.NearingTopOfJump): S.AT_JUMP_TOP,
    (S.RISING, ev.Hit): S.HIT,
    (S.RISING_AND_SHOOTING, ev.StoppedShooting): S.RISING,
    (S.RISING_AND_SHOOTING, ev.NearingTopOfJump): S.AT_JUMP_TOP_AND_SHOOTING,
    (S.RISING_AND_SHOOTING, ev.Hit): S.HIT,
    (S.AT_JUMP_TOP, ev.Fell): S.FALLING,
    (S.AT_JUMP_TOP, ev.ReachedJumpHeight): S.FALLING,
    (S.AT_JUMP_TOP, ev.Hit): S.HIT,
    (S.AT_JUMP_TOP, ev.StartedShooting): S.AT_JUMP_TOP_AND_SHOOTING,
    (S.FALLING, ev.StartedShooting): Transition(S.FALLING_AND_SHOOTING, "FallingAndStartedShooting"),
    (S.FALLING, ev.Landing): S.LANDING,
    (S.FALLING, ev.Hit): S.HIT,
    (S.FALLING, ev.LifeDepleted): S.DEAD,
    (S.LANDING, ev.StartedShooting): Transition(S.LANDING_AND_SHOOTING, "LandingAndStartedShooting"),
    (S.LANDING, ev.Landing2): S.IDLE,
    (S.LANDING, ev.Hit): S.HIT,
    (S.LANDING, ev.Fell): S.FALLING,
    (S.MOVING_AND_SHOOTING, ev.StartedJumping): S.RISING_AND_SHOOTING,
    (S.MOVING_AND_SHOOTING, ev.Fell): S.FALLING_AND_SHOOTING,
    (S.MOVING_AND_SHOOTING, ev.Hit): S.HIT,
    (S.MOVING_AND_SHOOTING, ev.StoppedShooting): S.MOVING,
    (S.MOVING_AND_SHOOTING, ev.StoppedMoving): S.SHOOTING,
    (S.STARTED_JUMP_AND_SHOOTING, ev.StoppedShooting): Transition(S.RISING, "StartedJump"),
    (S.STARTED_JUMP_AND_SHOOTING, ev.JumpStartFinished): S.RISING_AND_SHOOTING,
    (S.STARTED_JUMP_AND_SHOOTING, ev.Hit): S.HIT,
    (S.AT_JUMP_TOP_AND_SHOOTING, ev.StoppedShooting): Transition(S.AT_JUMP_TOP, " AtJumpTop"),
    (S.AT_JUMP_TOP_AND_SHOOTING, ev.ReachedJumpHeight): S.FALLING_AND_SHOOTING,
    (S.AT_JUMP_TOP_AND_SHOOTING, ev.Hit): S.HIT,
    (S.FALLING_AND_SHOOTING, ev.StoppedShooting): S.FALLING,
    (S.FALLING_AND_SHOOTING, ev.Landing): S.LANDING_AND_SHOOTING,
    (S.FALLING_AND_SHOOTING, ev.Hit): S.HIT,
    (S.FALLING_AND_SHOOTING, ev.LifeDepleted): S.DEAD,
    (S.LANDING_AND_SHOOTING, ev.StoppedShooting): S.LANDING,
    (S.LANDING_AND_SHOOTING, ev.Landing2): S.SHOOTING,
    (S.LANDING_AND_SHOOTING, ev.Hit): S.HIT,
    (S.LANDING_AND_SHOOTING, ev.Fell): S.FALLING_AND_SHOOTING,
    (S.STARTED_SHOOTING, ev.ShootSetupDone): S.SHOOTING,
    (S.STARTED_SHOOTING, ev.Hit): S.HIT,
    (S.STARTED_SHOOTING, ev.Fell): S.FALLING_AND_SHOOTING,
    (S.STARTED_SHOOTING, ev.StoppedShooting): S.IDLE,
    (S.STARTED_SHOOTING, ev.StartedMoving): S.STARTED_MOVING_AND_SHOOTING,
    (S.STARTED_SHOOTING, ev.StartedJumping): S.STARTED_JUMP_AND_SHOOTING,
    (S.STARTED_MOVING, ev.MoveStartFinished): S.MOVING,
    (S.STARTED_MOVING, ev.StartedJumping): S.STARTED_JUMP,
    (S.STARTED_MOVING, ev.StartedShooting): S.STARTED_MOVING_AND_SHOOTING,
    (S.STARTED_MOVING, ev.Fell): S.FALLING,
    (S.STARTED_MOVING, ev.Hit): S.HIT,
    (S.STARTED_MOVING, ev.StoppedMoving): S.IDLE,
    (S.STARTED_MOVING_AND_SHOOTING, ev.Hit): S.HIT,
    (S.STARTED_MOVING_AND_SHOOTING, ev.Fell): S.FALLING_AND_SHOOTING,
    (S.STARTED_MOVING_AND_SHOOTING, ev.StoppedMoving): S.SHOOTING,
    (S.STARTED_MOVING_AND_SHOOTING, ev.MoveStartFinished): S.MOVING_AND_SHOOTING,
    (S.STARTED_MOVING_AND_SHOOTING, ev.StoppedShooting): S.MOVING,
    (S.STARTED_MOVING_AND_SHOOTING, ev.StartedJumping): S.STARTED_JUMP_AND_SHOOTING,
}


class PlayerFSM(StateMachine):
    """Animation states of the player: running, jumping, shooting and their mixes."""

    initial_state = S.IDLE
    transitions = MappingProxyType(_PLAYER_TRANSITIONS)
    state_names = ANIM_STATE_NAMES