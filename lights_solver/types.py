"""Typed primitives shared by the solver, its configuration and explanations."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List, MutableMapping, Optional

logger = logging.getLogger("lights_solver.types")
logger.addHandler(logging.NullHandler())

SOLVED = "SOLVED"
STEP_LIMIT = "STEP_LIMIT"
ABORTED = "ABORTED"
NO_SOLUTION = "NO_SOLUTION"

STATUSES = (SOLVED, STEP_LIMIT, ABORTED, NO_SOLUTION)

TraceEvent = Dict[str, Any]


@dataclass
class Limits:
    """Tunable bounds for a solve."""

    step_limit: Optional[int] = None


@dataclass
class SolveResult:
    """Outcome of one solve.

    ``steps`` is ``None`` only when ``status`` is ``NO_SOLUTION``. A
    ``STEP_LIMIT`` or ``ABORTED`` result still carries the flips performed
    before the solver stopped.
    """

    status: str
    steps: Optional[int]
    final: Optional[str] = None
    history: List[TraceEvent] = field(default_factory=list)
    metrics: MutableMapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValueError(f"unknown solve status: {self.status!r}")

    @property
    def solved(self) -> bool:
        return self.status == SOLVED

    @property
    def partial(self) -> bool:
        """``True`` when a count was returned without reaching the target."""

        return self.status in {STEP_LIMIT, ABORTED}

    def record_event(self, event: TraceEvent) -> None:
        self.history.append(event)
        logger.debug("trace_event", extra={"event": event})

    def metric_inc(self, key: str, amount: int = 1) -> None:
        self.metrics[key] = self.metrics.get(key, 0) + amount


__all__ = [
    "SOLVED",
    "STEP_LIMIT",
    "ABORTED",
    "NO_SOLUTION",
    "STATUSES",
    "TraceEvent",
    "Limits",
    "SolveResult",
]
