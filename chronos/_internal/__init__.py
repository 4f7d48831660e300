"""Internal utilities for Chronos.

This module contains private implementation details:
    - Constants and defaults
    - Decorators (@deprecated, @compute_once)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronos._internal.decorators import compute_once, deprecated

__all__: list[str] = [
    "deprecated",
    "compute_once",
]
