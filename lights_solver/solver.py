"""Greedy prerequisite-chasing solver for light sequences."""

from __future__ import annotations

from collections import deque
import logging
from typing import Deque, Optional

from .errors import IndexOutOfBoundsError
from .lights import Lights
from .types import ABORTED, NO_SOLUTION, SOLVED, STEP_LIMIT, SolveResult

logger = logging.getLogger("lights_solver.solver")
logger.addHandler(logging.NullHandler())


def _resolve_candidate(working: Lights, pending: Deque[int], result: SolveResult) -> int:
    """Pop the next index and chase prerequisites until one is ready to flip.

    Every prerequisite found pushes the current candidate back onto
    ``pending`` so it is resumed once the prerequisite is flipped. A
    prerequisite that is already pending stops the chase and the current
    candidate is flipped as is.
    """

    candidate = pending.pop()
    while True:
        prerequisite = working.need_light_to_flip(candidate)
        if prerequisite is None:
            return candidate
        if prerequisite in pending:
            result.metric_inc("cycle_guard_hits")
            logger.debug(
                {
                    "phase": "solve",
                    "event": "cycle_guard",
                    "candidate": candidate,
                    "prerequisite": prerequisite,
                }
            )
            return candidate
        pending.append(candidate)
        result.metric_inc("prerequisites_pushed")
        candidate = prerequisite


def solve(start: Lights, target: Lights, limit: Optional[int] = None) -> SolveResult:
    """Flip a copy of ``start`` until it matches ``target``.

    Args:
        start: Initial row of lights. Left untouched.
        target: Row of lights to reach.
        limit: Optional cap on the number of flips. Checked once per outer
            iteration, so a prerequisite chain is never cut in half.

    Returns:
        A :class:`SolveResult` whose status is ``SOLVED``, ``STEP_LIMIT``
        (partial count), ``ABORTED`` (a flip failed, count so far) or
        ``NO_SOLUTION`` (the rows have different lengths).
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be non-negative")

    result = SolveResult(status=SOLVED, steps=0, final=str(start))
    if start == target:
        result.record_event({"phase": "solve", "step": 0, "status": "goal"})
        return result
    if len(start) != len(target):
        result.status = NO_SOLUTION
        result.steps = None
        result.final = None
        result.record_event(
            {
                "phase": "solve",
                "status": "length_mismatch",
                "start": len(start),
                "target": len(target),
            }
        )
        return result

    working = start.copy()
    steps = 0
    pending: Deque[int] = deque([working.get_first_different_index(target)])

    while pending:
        if limit is not None and steps >= limit:
            result.status = STEP_LIMIT
            limit_event = {"phase": "solve", "step": steps, "status": "limit", "limit": limit}
            result.record_event(limit_event)
            logger.warning("step limit reached", extra={"steps": steps, "limit": limit})
            break
        result.metric_inc("outer_iterations")

        try:
            candidate = _resolve_candidate(working, pending, result)
            working.flip(candidate)
        except IndexOutOfBoundsError as exc:
            result.status = ABORTED
            result.record_event(
                {"phase": "solve", "step": steps, "status": "aborted", "index": exc.index}
            )
            logger.error("flip failed at index %s: %s", exc.index, exc)
            break
        result.metric_inc("flips")

        if not pending:
            next_index = working.get_first_different_index(target)
            if next_index is not None:
                pending.append(next_index)
        steps += 1

        event = {"phase": "solve", "step": steps, "status": "flip", "index": candidate}
        result.record_event(event)
        logger.debug(event)

    result.steps = steps
    result.final = str(working)
    if result.status == SOLVED:
        result.record_event({"phase": "solve", "step": steps, "status": "goal"})
    return result


def get_min_steps(start: Lights, target: Lights, limit: Optional[int] = None) -> Optional[int]:
    """Return the number of flips turning ``start`` into ``target``.

    ``None`` means the rows have different lengths. Note that a count is
    returned even when ``limit`` stopped the solve early; use :func:`solve`
    to tell a partial count from a finished one.
    """
    return solve(start, target, limit).steps


__all__ = ["solve", "get_min_steps"]
