"""Integer 2D coordinate used by the grid and the traversal engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """Immutable ``(x, y)`` cell coordinate with structural equality."""

    x: int
    y: int

    @classmethod
    def of(cls, other: Any) -> "Point":
        """Return a ``Point`` copied from any object exposing ``x`` and ``y``."""
        return cls(int(other.x), int(other.y))

    def distance(self, other: Optional["Point"]) -> float:
        """Return the Euclidean distance to ``other``.

        The distance to ``None`` is ``0.0`` rather than an error.
        """
        if other is None:
            return 0.0
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
