from xastle.input import InputState, Key, KeyEvent


def test_nothing_pressed_initially():
    state = InputState()
    for key in Key:
        assert state.is_pressed(key) is False
        assert state.just_pressed(key) is False
        assert state.just_released(key) is False


def test_update_samples_default_mapping():
    state = InputState()
    state.update({"D", "Space"})
    assert state.is_pressed(Key.RIGHT) is True
    assert state.is_pressed(Key.JUMP) is True
    assert state.is_pressed(Key.LEFT) is False


def test_just_pressed_then_held():
    state = InputState()
    state.update({"J"})
    assert state.just_pressed(Key.SHOOT) is True
    state.update({"J"})
    assert state.just_pressed(Key.SHOOT) is False
    assert state.is_pressed(Key.SHOOT) is True


def test_just_released():
    state = InputState()
    state.update({"A"})
    state.update(set())
    assert state.just_released(Key.LEFT) is True
    assert state.is_pressed(Key.LEFT) is False
    state.update(set())
    assert state.just_released(Key.LEFT) is False


def test_update_accepts_predicate():
    state = InputState()
    state.update(lambda code: code == "A")
    assert state.is_pressed(Key.LEFT) is True
    assert state.is_pressed(Key.RIGHT) is False


def test_process_event_press_and_release():
    state = InputState()
    state.process_event(KeyEvent("Space", True))
    assert state.is_pressed(Key.JUMP) is True
    state.process_event(KeyEvent("Space", False))
    assert state.is_pressed(Key.JUMP) is False


def test_process_event_ignores_unmapped_and_other_events():
    state = InputState()
    state.process_event(KeyEvent("Q", True))
    state.process_event("closed")
    assert not any(state.is_pressed(key) for key in Key)


def test_set_mapping():
    state = InputState()
    state.set_mapping(Key.JUMP, "W")
    state.update({"Space"})
    assert state.is_pressed(Key.JUMP) is False
    state.update({"W"})
    assert state.is_pressed(Key.JUMP) is True
    assert state.just_pressed(Key.JUMP) is True