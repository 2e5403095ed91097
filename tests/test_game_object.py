import pytest

from xastle.config import Texture
from xastle.game_object import WHITE, GameObject, InvariantObject, Vertex
from xastle.geometry import IntRect, Vec2


def test_game_object_is_abstract():
    with pytest.raises(TypeError):
        GameObject()


def test_default_object_layout():
    obj = InvariantObject()
    assert obj.texture is Texture.INVARIANT
    assert obj.tex_rect == IntRect(0, 0, 64, 64)
    assert obj.position == Vec2(0.0, 0.0)
    assert obj.world_size == Vec2(64.0, 64.0)
    positions = [v.position for v in obj.vertices]
    assert positions == [
        Vec2(0, 0),
        Vec2(64, 0),
        Vec2(0, 64),
        Vec2(0, 64),
        Vec2(64, 0),
        Vec2(64, 64),
    ]
    assert [v.tex_coords for v in obj.vertices] == positions


def test_all_vertices_white():
    obj = InvariantObject(Texture.BG_INTRO, IntRect(1, 2, 3, 4))
    assert all(v.color == WHITE for v in obj.vertices)
    assert len(obj.vertices) == 6


def test_parameterised_object_position_is_pos_minus_offset():
    rect = IntRect(10, 20, 30, 40)
    off = Vec2(1.0, 2.0)
    pos = Vec2(100.0, 200.0)
    obj = InvariantObject(Texture.BG_INTRO, rect, off, Vec2(), pos)
    assert obj.position == pos - off
    assert obj.offset == off
    assert obj.world_size == Vec2(float(rect.width), float(rect.height))
    first = obj.vertices[0]
    assert first.position == obj.position - off
    assert obj.vertices[5].position == first.position + rect.size
    assert first.tex_coords == rect.position
    assert obj.vertices[5].tex_coords == rect.position + rect.size


def test_explicit_world_size_kept():
    size = Vec2(7.0, 9.0)
    obj = InvariantObject(Texture.BG_INTRO, IntRect(0, 0, 3, 4), Vec2(), size)
    assert obj.world_size == size


def test_empty_rect_takes_texture_size():
    obj = InvariantObject(Texture.BG_INTRO, texture_size=(1600, 900))
    assert obj.tex_rect == IntRect(0, 0, 1600, 900)
    assert obj.world_size == Vec2(1600.0, 900.0)


def test_empty_rect_without_texture_size_raises():
    with pytest.raises(ValueError):
        InvariantObject(Texture.BG_INTRO)


def test_move_shifts_every_vertex():
    obj = InvariantObject(Texture.BG_INTRO, IntRect(0, 0, 10, 10), Vec2(), Vec2(), Vec2(5, 5))
    before = obj.vertices
    start = obj.position
    amount = Vec2(3.0, -4.0)
    obj.move(amount)
    assert obj.position == start + amount
    for old, new in zip(before, obj.vertices):
        assert new.position == old.position + amount
        assert new.tex_coords == old.tex_coords


def test_set_position_and_tex_rect():
    obj = InvariantObject()
    obj.position = Vec2(50.0, 60.0)
    assert obj.vertices[0].position == Vec2(50.0, 60.0)
    rect = IntRect(5, 6, 20, 30)
    obj.tex_rect = rect
    assert obj.tex_rect == rect
    assert obj.vertices[0].tex_coords == rect.position
    assert obj.vertices[5].position == Vec2(50.0, 60.0) + rect.size


def test_world_size_setter():
    obj = InvariantObject()
    obj.world_size = Vec2(1.0, 2.0)
    assert obj.world_size == Vec2(1.0, 2.0)


def test_invariant_update_and_finalize_leave_state():
    obj = InvariantObject()
    before = obj.vertices
    obj.update(0.5)
    obj.finalize(0.5)
    obj.handle_input()
    obj.execute_script()
    assert obj.vertices == before
    assert obj.alive is True


def test_equality_is_identity():
    a = InvariantObject()
    b = InvariantObject()
    assert a == a
    assert not (a == b)


def test_vertex_defaults():
    v = Vertex()
    assert v.color == WHITE
    assert v.position == Vec2()