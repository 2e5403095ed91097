import pytest

from xastle.config import (
    Font,
    Music,
    PlayerInput,
    Sound,
    Texture,
)


def test_texture_identifiers_are_consecutive():
    assert [Texture(i) for i in range(len(Texture))] == list(Texture)
    assert Texture(0) is Texture.SPLASH_BG
    assert Texture(len(Texture) - 1) is Texture.INVALID


def test_texture_order_matches_declaration():
    assert Texture(3) is Texture.INVARIANT
    assert Texture(5) is Texture.MEGA_MAN_SHEET_1X48X48X1
    assert Texture(6) is Texture.TILESET_INTRO
    assert Texture(7) is Texture.BG_INTRO


def test_unknown_texture_value_rejected():
    with pytest.raises(ValueError):
        Texture(len(Texture))


def test_single_font_and_music():
    assert Font(0) is Font.FONT1
    assert Music(0) is Music.TITLE_BG_MUSIC
    with pytest.raises(ValueError):
        Font(1)
    with pytest.raises(ValueError):
        Music(1)


def test_sound_identifiers_are_consecutive():
    assert [Sound(i) for i in range(len(Sound))] == list(Sound)
    assert Sound(0) is Sound.X_HURT
    assert Sound(9) is Sound.X_LAND


def test_player_inputs_keyboard_before_joystick():
    assert [PlayerInput(i) for i in range(len(PlayerInput))] == list(PlayerInput)
    assert PlayerInput(11) is PlayerInput.L1
    assert PlayerInput(12) is PlayerInput.DPAD_X
    assert PlayerInput(16) is PlayerInput.JOY_A
    assert PlayerInput(23) is PlayerInput.JOY_SELECT