"""Default limits and environment overrides for the solver."""

from __future__ import annotations

import os
from typing import Dict, Optional

from .types import Limits

LIGHTS_DEFAULT_LIMITS: Dict[str, Optional[int]] = {
    "STEP_LIMIT": 1000,
}

_UNLIMITED = {"", "none", "off", "no", "unlimited"}


def parse_step_limit(value: Optional[object]) -> Optional[int]:
    """Return ``value`` as a non-negative step limit, or ``None`` for no limit."""

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"invalid step limit: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"step limit must be a whole number, got {value!r}")
    if isinstance(value, str):
        if value.strip().lower() in _UNLIMITED:
            return None
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError(f"invalid step limit: {value!r}") from None
    limit = int(value)
    if limit < 0:
        raise ValueError(f"step limit must be non-negative, got {limit}")
    return limit


def build_limits(overrides: Optional[Dict[str, Optional[int]]] = None) -> Limits:
    """Return :class:`Limits` from defaults, ``LIGHTS_STEP_LIMIT`` and ``overrides``.

    Later sources win: explicit overrides beat the environment, which beats
    the defaults.
    """

    params: Dict[str, object] = dict(LIGHTS_DEFAULT_LIMITS)
    env_limit = os.environ.get("LIGHTS_STEP_LIMIT")
    if env_limit is not None:
        params["STEP_LIMIT"] = env_limit
    if overrides:
        params.update(overrides)
    return Limits(step_limit=parse_step_limit(params["STEP_LIMIT"]))


__all__ = ["LIGHTS_DEFAULT_LIMITS", "build_limits", "parse_step_limit"]
