# xastle

The logic of a side-scrolling platformer, kept apart from any window,
renderer or audio backend. Everything here works on plain Python values and
can be driven and tested without a display.

## Modules

- `xastle.config`: window size (`WINDOW_WIDTH`, `WINDOW_HEIGHT`), screen
  tiles, `GRAVITY`, and the resource identifiers `Texture`, `Font`, `Music`,
  `Sound` and `PlayerInput`.
- `xastle.resources`: `ResourceManager`, a keyed container whose `load(key,
  *args)` calls a loader (by default it reads a file's bytes) and stores the
  result, with `get`, `unload`, `unload_all` and `clear`. `Assets` holds
  `textures`, `fonts`, `music` and `sounds` managers; `initialize()` loads
  the game's files from `TEXTURE_FILES`, `FONT_FILES` and `MUSIC_FILES`
  relative to a root directory, and `uninitialize()` drops the textures.
- `xastle.geometry`: frozen `Vec2`, `IntRect` and `FloatRect`;
  `FloatRect.intersection(other)` returns the overlap or `None`.
- `xastle.errors`: `CidError`, which records a line, a file and a message,
  and `check(result)`, which raises `CidError` at the caller's location
  unless `result == "OK"`.
- `xastle.events`: the `Event` base and its concrete events (`StartedMoving`,
  `Hit`, `Landing(moving)`, `Moved`, ...), each with a class-level `name`.
- `xastle.fsm`: `AnimStateKind`, a table-driven `StateMachine` with
  `dispatch(event)` and `state_name()`, and `dispatch(fsm, *events)` to send
  several events in order. A pair of state and event type missing from the
  table leaves the state unchanged. Each transition taken is logged at INFO
  level through the `logging` module.
- `xastle.player_fsm.PlayerFSM`, `xastle.green_guy_fsm.GreenGuyFSM`: the
  animation state machines of the player and of the green guard enemy, both
  starting in `AnimStateKind.IDLE`.
- `xastle.movement_fsm`: `MoveState` and `MovementFSM`, switching between
  idle and running on `Moved` and `StoppedMoving`.
- `xastle.animation`: `AnimName`, `AnimState`, `AnimDir`, `AnimSheetType`,
  the name lookup tables, and `Animation`, holding frames and offsets per
  direction (`frame(direction, index)`, `offset(direction, index)`).
- `xastle.input`: `Key`, `KeyEvent` and `InputState`, which keeps this
  frame's and the previous frame's key state. `update(pressed)` takes a
  predicate or a collection of held scancodes; `process_event`,
  `is_pressed`, `just_pressed`, `just_released` and `set_mapping` work on
  the mapped keys (by default `A`, `D`, `Space`, `J`).
- `xastle.game_object`: `Vertex`, the abstract `GameObject` (a textured quad
  of six vertices following its position, offset and texture rectangle) and
  `InvariantObject`, which stays at rest.
- `xastle.background`: `Background`, a back layer that scrolls left and
  wraps with a copy of itself; `render(view_center, view_bounds)` returns the
  `BackgroundPiece`s that cover the view.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from xastle.fsm import dispatch
from xastle.events import StartedMoving, MoveStartFinished
from xastle.player_fsm import PlayerFSM

fsm = PlayerFSM()
dispatch(fsm, StartedMoving(), MoveStartFinished())
print(fsm.state_name())  # "Moving"
```

## What it does not do

There is no game to run: the package has no command, no window, no game loop,
no title, splash or play screens, and no drawing or sound playback. Loaded
resources are whatever the loader returns (raw bytes by default), and
`Background.render` only describes the pieces to draw. Animation files are not
read from disk; `Animation` objects are built in code.