"""Lights flip solver package.

This package exposes the :class:`Lights` row of switches and the greedy
solver counting the flips needed to turn one row into another.
"""

from .errors import (
    MAX_LIGHTS,
    IndexOutOfBoundsError,
    LightsError,
    NoLightError,
    TooManyLightsError,
)
from .lights import Lights, parse_lights
from .solver import get_min_steps, solve
from .types import ABORTED, NO_SOLUTION, SOLVED, STEP_LIMIT, Limits, SolveResult
from .config import build_limits
from .explain import explain_result

__all__ = [
    "MAX_LIGHTS",
    "LightsError",
    "IndexOutOfBoundsError",
    "NoLightError",
    "TooManyLightsError",
    "Lights",
    "parse_lights",
    "solve",
    "get_min_steps",
    "SOLVED",
    "STEP_LIMIT",
    "ABORTED",
    "NO_SOLUTION",
    "Limits",
    "SolveResult",
    "build_limits",
    "explain_result",
]
