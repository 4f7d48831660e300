"""Formatting and parsing.

This module provides strftime-style formatting and strict parsing.
Relative-time phrases live in :mod:`chronos.format.relative`, which
depends on Instant and is imported from there directly.
"""

from __future__ import annotations

from chronos.format.strftime import (
    iter_directives,
    strftime,
    strptime,
    validate_format,
)

__all__ = [
    "iter_directives",
    "validate_format",
    "strftime",
    "strptime",
]
