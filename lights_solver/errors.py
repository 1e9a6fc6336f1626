"""Error taxonomy for light sequences."""

from __future__ import annotations

MAX_LIGHTS = 25


class LightsError(Exception):
    """Base class for every failure raised by :mod:`lights_solver`."""


class IndexOutOfBoundsError(LightsError, IndexError):
    """An operation addressed a position outside ``[0, len(lights))``."""

    def __init__(self, index: int | None = None, length: int | None = None) -> None:
        super().__init__("index out of bounds")
        self.index = index
        self.length = length


class NoLightError(LightsError, ValueError):
    """A sequence was built from an empty (post-filter) input."""

    def __init__(self) -> None:
        super().__init__("not enough lights to process")


class TooManyLightsError(LightsError, ValueError):
    """A sequence was built from more than ``MAX_LIGHTS`` lights."""

    def __init__(self, count: int | None = None) -> None:
        super().__init__(f"too many lights to process (max is {MAX_LIGHTS})")
        self.count = count


__all__ = [
    "MAX_LIGHTS",
    "LightsError",
    "IndexOutOfBoundsError",
    "NoLightError",
    "TooManyLightsError",
]
