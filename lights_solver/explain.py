"""Human readable summaries of solver runs."""

from __future__ import annotations

from .types import SolveResult


def explain_result(result: SolveResult) -> str:
    """Return a multi-line explanation of ``result``."""

    lines = [f"Status: {result.status}"]
    if result.steps is None:
        lines.append("Steps: none (lengths differ)")
    else:
        lines.append(f"Steps: {result.steps}")
    if result.final is not None:
        lines.append(f"Final lights: {result.final}")
    if result.metrics:
        metric_summary = ", ".join(f"{k}={v}" for k, v in sorted(result.metrics.items()))
        lines.append(f"Metrics: {metric_summary}")
    if result.history:
        lines.append(f"Events recorded: {len(result.history)}")
    return "\n".join(lines)


__all__ = ["explain_result"]
