"""
Light sequence representation for the flip solver.

A :class:`Lights` instance is a fixed-length row of switches stored as a 1-D
numpy boolean array. Besides plain bounds-checked flipping it knows the
positional rule deciding whether a switch may be flipped directly, and which
other switch has to move first when it may not.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

import numpy as np

from .errors import MAX_LIGHTS, IndexOutOfBoundsError, NoLightError, TooManyLightsError

# Type alias for clarity. A row of lights is a 1-D boolean array.
Array = np.ndarray

__all__ = [
    "Array",
    "Lights",
    "parse_lights",
    "to_array",
]

_LIGHT_CHARS = {"0": False, "1": True}


def to_array(values: Any) -> Array:
    """Convert an iterable of truthy values into a 1-D numpy bool array."""
    a = np.asarray(list(values), dtype=bool)
    assert a.ndim == 1, f"lights must be 1-D, got {a.ndim}D shape={a.shape}"
    return a


class Lights:
    """Fixed-length row of lights with the cascading flip rule."""

    __slots__ = ("_lights",)

    def __init__(self, values: Iterable[Any]) -> None:
        if isinstance(values, str):
            raise TypeError("Lights() takes booleans; use Lights.from_string to parse text")
        lights = to_array(values)
        if lights.size == 0:
            raise NoLightError()
        if lights.size > MAX_LIGHTS:
            raise TooManyLightsError(int(lights.size))
        self._lights = lights

    @classmethod
    def from_string(cls, text: str) -> "Lights":
        """Parse ``text`` keeping only ``0``/``1`` characters.

        Any other character is dropped before the length checks run, so
        ``"1 0-1"`` parses to ``101``.

        Raises
        ------
        NoLightError
            If no ``0``/``1`` character remains.
        TooManyLightsError
            If more than ``MAX_LIGHTS`` characters remain.
        """
        return cls(_LIGHT_CHARS[c] for c in text if c in _LIGHT_CHARS)

    def copy(self) -> "Lights":
        clone = Lights.__new__(Lights)
        clone._lights = self._lights.copy()
        return clone

    def to_list(self) -> List[bool]:
        return [bool(v) for v in self._lights]

    def __len__(self) -> int:
        return int(self._lights.size)

    def __getitem__(self, index: int) -> bool:
        self._check_index(index)
        return bool(self._lights[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Lights):
            return NotImplemented
        return self._lights.shape == other._lights.shape and np.array_equal(self._lights, other._lights)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "".join("1" if v else "0" for v in self._lights)

    def __repr__(self) -> str:
        return f"Lights({str(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._lights.size:
            raise IndexOutOfBoundsError(index, len(self))

    def flip(self, index: int) -> None:
        """Toggle the light at ``index``."""
        self._check_index(index)
        self._lights[index] = not self._lights[index]

    def could_be_flipped(self, index: int) -> bool:
        """Return ``True`` if the light at ``index`` may be flipped directly.

        The last light is always free. The one before it needs the last light
        lit. Any other light needs its right neighbour lit and everything past
        that neighbour unlit.
        """
        self._check_index(index)
        n = self._lights.size
        if index == n - 1:
            return True
        if index == n - 2:
            return bool(self._lights[n - 1])
        return bool(self._lights[index + 1]) and not self._lights[index + 2 :].any()

    def get_first_different_index(self, other: "Lights", from_index: int = 0) -> Optional[int]:
        """Return the first position at or after ``from_index`` where ``other`` differs.

        Only the common prefix of both rows is compared; callers are expected
        to pass rows of equal length.
        """
        if from_index < 0:
            raise IndexOutOfBoundsError(from_index, len(self))
        n = min(self._lights.size, other._lights.size)
        diff = np.flatnonzero(self._lights[from_index:n] != other._lights[from_index:n])
        if diff.size == 0:
            return None
        return from_index + int(diff[0])

    def need_light_to_flip(self, index: int) -> Optional[int]:
        """Return the light that must be flipped before ``index`` can be, if any."""
        if self.could_be_flipped(index):
            return None
        if not self._lights[index + 1]:
            return index + 1
        lit = np.flatnonzero(self._lights[index + 2 :])
        if lit.size == 0:
            # Unreachable while could_be_flipped holds its contract.
            return None
        return index + 2 + int(lit[0])


def parse_lights(text: str) -> Lights:
    """Parse a textual row of lights. See :meth:`Lights.from_string`."""
    return Lights.from_string(text)
