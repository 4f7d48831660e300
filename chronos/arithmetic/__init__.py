"""Instant arithmetic and comparison operations.

The functions in this module are the canonical implementations behind
the ``add_*``, ``sub_*`` and comparison methods of Instant.

Arithmetic Operations (from chronos.arithmetic.ops):
    - shift_datetime: Shift an aware datetime by a TimeUnit
    - add, subtract: Shift an Instant forward or backward

Comparison Operations (from chronos.arithmetic.comparisons):
    - diff, day_diff: Calendar difference between two instants
    - is_past, is_future: Direction relative to a reference point
    - is_same_day, is_weekday, is_weekend: Calendar predicates
    - age: Whole years elapsed
"""

from __future__ import annotations

from chronos.arithmetic.ops import (
    add,
    shift_datetime,
    subtract,
)
from chronos.arithmetic.comparisons import (
    age,
    day_diff,
    diff,
    is_future,
    is_past,
    is_same_day,
    is_weekday,
    is_weekend,
    reference_point,
)

__all__ = [
    # Arithmetic operations
    "shift_datetime",
    "add",
    "subtract",
    # Comparison operations
    "reference_point",
    "diff",
    "day_diff",
    "is_past",
    "is_future",
    "is_same_day",
    "is_weekday",
    "is_weekend",
    "age",
]
