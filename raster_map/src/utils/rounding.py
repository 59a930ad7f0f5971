"""Rounding helpers shared by scaling, resizing and line drawing."""

from __future__ import annotations

import math

import numpy as np

__all__ = ["round_half_away", "round_half_away_array"]


def round_half_away(value: float) -> int:
    """Round ``value`` to the nearest integer, ties away from zero.

    ``2.5 -> 3`` and ``-2.5 -> -3``. Python's built-in :func:`round` rounds
    ties to even and is not used for cell arithmetic.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_half_away_array(values: np.ndarray) -> np.ndarray:
    """Vectorised :func:`round_half_away` returning a float array."""
    return np.sign(values) * np.floor(np.abs(values) + 0.5)
