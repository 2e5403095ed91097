"""Game-wide constants and resource identifiers."""

from enum import IntEnum

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900

SCREEN_TILES_X = 16
SCREEN_TILES_Y = 12

GRAVITY = 1600.0


class Texture(IntEnum):
    """Identifiers of the texture resources."""

    SPLASH_BG = 0
    TITLE_BG = 1
    TITLE_TEXT = 2
    INVARIANT = 3
    PLAYER_ATLAS_132X150 = 4
    MEGA_MAN_SHEET_1X48X48X1 = 5
    TILESET_INTRO = 6
    BG_INTRO = 7
    INVALID = 8


class Font(IntEnum):
    """Identifiers of the font resources."""

    FONT1 = 0


class Music(IntEnum):
    """Identifiers of the streamed music resources."""

    TITLE_BG_MUSIC = 0


class Sound(IntEnum):
    """Identifiers of the sound-effect resources."""

    X_HURT = 0
    X_DIE = 1
    BUSTERSHOT_NORMAL = 2
    BUSTERSHOT_CHARGED = 3
    X_CHARGING = 4
    ENEMY_HURT1 = 5
    ENEMY_DIE1 = 6
    HELMET_HIT = 7
    X_JUMP = 8
    X_LAND = 9


class PlayerInput(IntEnum):
    """Inputs the player is able to use, keyboard first, then joystick."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    X = 5
    Y = 6
    B = 7
    START = 8
    SELECT = 9
    R1 = 10
    L1 = 11
    DPAD_X = 12
    DPAD_Y = 13
    AXIS_X = 14
    AXIS_Y = 15
    JOY_A = 16
    JOY_B = 17
    JOY_X = 18
    JOY_Y = 19
    JOY_R1 = 20
    JOY_L1 = 21
    JOY_START = 22
    JOY_SELECT = 23