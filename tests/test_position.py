import pytest

from pokered.position import (
    Size2f,
    Vector2f,
    size2f,
    size_from_tuple,
    vector2f,
    vector_from_tuple,
)


def test_vector2f_holds_coordinates():
    vec = vector2f(1.5, -2)
    assert vec.x == 1.5
    assert vec.y == -2.0


def test_size2f_holds_dimensions():
    size = size2f(1920, 1080)
    assert size.width == 1920.0
    assert size.height == 1080.0


def test_vector_to_tuple():
    assert vector2f(3.25, 4.5).to_tuple() == (3.25, 4.5)


def test_size_to_tuple():
    assert size2f(10, 20).to_tuple() == (10.0, 20.0)


@pytest.mark.parametrize("pair", [(0.0, 0.0), (1.5, -7.25), (-100.0, 3.0)])
def test_vector_round_trip(pair):
    assert vector_from_tuple(pair).to_tuple() == pair
    assert vector_from_tuple(vector2f(*pair).to_tuple()) == vector2f(*pair)


@pytest.mark.parametrize("pair", [(0.0, 0.0), (1920.0, 1080.0), (2.5, 0.5)])
def test_size_round_trip(pair):
    assert size_from_tuple(pair).to_tuple() == pair
    assert size_from_tuple(size2f(*pair).to_tuple()) == size2f(*pair)


def test_from_tuple_converts_to_float():
    vec = vector_from_tuple([3, 4])
    assert vec == Vector2f(3.0, 4.0)
    assert isinstance(vec.x, float)
    size = size_from_tuple((5, 6))
    assert size == Size2f(5.0, 6.0)
    assert isinstance(size.height, float)


@pytest.mark.parametrize("bad", [(), (1.0,), (1.0, 2.0, 3.0)])
def test_vector_from_tuple_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        vector_from_tuple(bad)


@pytest.mark.parametrize("bad", [(), (1.0,), (1.0, 2.0, 3.0)])
def test_size_from_tuple_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        size_from_tuple(bad)


def test_vectors_are_immutable():
    vec = vector2f(1, 2)
    with pytest.raises(AttributeError):
        vec.x = 5.0
    assert vec.x == 1.0


def test_defaults_are_origin():
    assert Vector2f() == vector2f(0, 0)
    assert Size2f() == size2f(0, 0)