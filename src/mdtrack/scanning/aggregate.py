"""Reduce extracted values to a single number."""

from __future__ import annotations

from typing import Sequence

from mdtrack.core.types import AggregateMethod


def aggregate(values: Sequence[float], method: AggregateMethod | str) -> float:
    """Aggregate values with the given method.

    ``count`` counts strictly positive values, so rows or days recorded as
    zero are not "done". ``average`` divides by every value, zeros included.
    Unknown methods fall back to ``sum``.

    Args:
        values: Extracted values.
        method: Aggregation method or its name.

    Returns:
        Aggregated value, 0 for empty input.
    """
    if not values:
        return 0

    name = method.value if isinstance(method, AggregateMethod) else method

    if name == AggregateMethod.COUNT.value:
        return sum(1 for v in values if v > 0)
    if name == AggregateMethod.AVERAGE.value:
        return sum(values) / len(values)
    if name == AggregateMethod.MAX.value:
        return max(values)
    if name == AggregateMethod.MIN.value:
        return min(values)
    return sum(values)
