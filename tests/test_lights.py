"""Tests for the Lights row representation."""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from lights_solver.errors import (
    MAX_LIGHTS,
    IndexOutOfBoundsError,
    LightsError,
    NoLightError,
    TooManyLightsError,
)
from lights_solver.lights import Lights, parse_lights

light_strings = st.text(alphabet="01", min_size=1, max_size=MAX_LIGHTS)


def test_parse_drops_unknown_characters() -> None:
    assert str(Lights.from_string("1 0-1x\n")) == "101"
    assert parse_lights("0011") == Lights([False, False, True, True])


def test_parse_rejects_empty_input() -> None:
    with pytest.raises(NoLightError):
        Lights.from_string("")
    with pytest.raises(NoLightError):
        Lights.from_string("abc")


def test_parse_rejects_too_many_lights() -> None:
    assert len(Lights.from_string("1" * MAX_LIGHTS)) == MAX_LIGHTS
    with pytest.raises(TooManyLightsError) as info:
        Lights.from_string("1" * (MAX_LIGHTS + 1))
    assert str(info.value) == "too many lights to process (max is 25)"
    assert isinstance(info.value, LightsError)


def test_direct_construction_checks_length() -> None:
    with pytest.raises(NoLightError):
        Lights([])
    with pytest.raises(TooManyLightsError):
        Lights([True] * (MAX_LIGHTS + 1))


def test_flip_toggles_one_light() -> None:
    lights = Lights.from_string("0101")
    lights.flip(0)
    assert str(lights) == "1101"
    lights.flip(3)
    assert str(lights) == "1100"


@pytest.mark.parametrize("index", [4, 10, -1])
def test_flip_out_of_bounds(index: int) -> None:
    lights = Lights.from_string("0101")
    with pytest.raises(IndexOutOfBoundsError):
        lights.flip(index)
    assert str(lights) == "0101"


def test_copy_is_independent() -> None:
    lights = Lights.from_string("0101")
    clone = lights.copy()
    clone.flip(0)
    assert str(lights) == "0101"
    assert str(clone) == "1101"


def test_equality_and_rendering() -> None:
    assert Lights.from_string("010") == Lights.from_string("010")
    assert Lights.from_string("010") != Lights.from_string("011")
    assert Lights.from_string("01") != Lights.from_string("010")
    assert Lights.from_string("1") != "1"
    assert repr(Lights.from_string("10")) == "Lights('10')"
    assert Lights.from_string("10").to_list() == [True, False]


@pytest.mark.parametrize(
    "row, index, expected",
    [
        ("0100", 0, True),
        ("1101", 0, False),
        ("0000", 0, False),
        ("0010", 1, True),
        ("0011", 1, False),
        ("0001", 2, True),
        ("0000", 2, False),
        ("0000", 3, True),
    ],
)
def test_could_be_flipped(row: str, index: int, expected: bool) -> None:
    assert Lights.from_string(row).could_be_flipped(index) is expected


@given(light_strings)
def test_last_two_positions_eligibility(row: str) -> None:
    lights = Lights.from_string(row)
    n = len(lights)
    assert lights.could_be_flipped(n - 1)
    if n >= 2:
        assert lights.could_be_flipped(n - 2) == lights[n - 1]


@given(light_strings)
def test_round_trip_rendering(row: str) -> None:
    lights = Lights.from_string(row)
    assert str(lights) == row
    assert Lights.from_string(str(lights)) == lights


def test_get_first_different_index() -> None:
    a = Lights.from_string("1101")
    b = Lights.from_string("0100")
    assert a.get_first_different_index(b) == 0
    assert a.get_first_different_index(b, 1) == 3
    assert a.get_first_different_index(a.copy()) is None
    assert Lights.from_string("0110").get_first_different_index(Lights.from_string("0100"), 3) is None


@pytest.mark.parametrize(
    "row, index, expected",
    [
        ("0100", 0, None),
        ("1001", 0, 1),
        ("1101", 0, 3),
        ("0110", 0, 2),
        ("0000", 2, 3),
        ("1111", 3, None),
    ],
)
def test_need_light_to_flip(row: str, index: int, expected: int | None) -> None:
    assert Lights.from_string(row).need_light_to_flip(index) == expected


@given(light_strings, st.data())
def test_need_light_to_flip_points_right(row: str, data) -> None:
    """A prerequisite is always a valid position to the right of the light."""
    lights = Lights.from_string(row)
    index = data.draw(st.integers(min_value=0, max_value=len(lights) - 1))
    prerequisite = lights.need_light_to_flip(index)
    if lights.could_be_flipped(index):
        assert prerequisite is None
    else:
        assert prerequisite is not None
        assert index < prerequisite < len(lights)


def test_direct_construction_rejects_text() -> None:
    with pytest.raises(TypeError):
        Lights("0101")
    assert Lights([0, 1, 0, 1]) == Lights.from_string("0101")


@pytest.mark.parametrize(
    "method, index",
    [
        ("could_be_flipped", 4),
        ("could_be_flipped", -1),
        ("need_light_to_flip", 4),
        ("need_light_to_flip", -1),
    ],
)
def test_rule_queries_out_of_bounds(method: str, index: int) -> None:
    lights = Lights.from_string("0101")
    with pytest.raises(IndexOutOfBoundsError):
        getattr(lights, method)(index)


def test_get_first_different_index_rejects_negative_start() -> None:
    a = Lights.from_string("0001")
    b = Lights.from_string("0000")
    with pytest.raises(IndexOutOfBoundsError):
        a.get_first_different_index(b, -1)
    assert a.get_first_different_index(b, len(a)) is None
