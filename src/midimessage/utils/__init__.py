"""Utility functions for midimessage.

This module provides numeric coercion and clamping helpers.
"""

from __future__ import annotations

from .coerce import clamp, coerce_int, is_numeric

__all__ = [
    "clamp",
    "coerce_int",
    "is_numeric",
]
