"""Core value types.

This module provides:
    - Instant: Immutable, timezone-aware point in time
    - Delta: Calendar breakdown of the difference between two instants
"""

from __future__ import annotations

from chronos.core.delta import Delta, compute_delta
from chronos.core.instant import Instant

__all__: list[str] = [
    "Delta",
    "Instant",
    "compute_delta",
]
