"""
Purpose: Data models for the routing capability.
What it does:
- Location (name, optional planar coordinates for display)
- RouteResult (path + total distance) returned by route queries

Rule: No graph search here. Models only.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

XY = Tuple[float, float]


@dataclass
class Location:
    """
    A named place on the city map.
    Coordinates are for display/verification only and never act as weights.
    """
    name: str
    coordinates: Optional[XY] = None


@dataclass(frozen=True)
class RouteResult:
    """
    Output of a route query.
    An empty path means the destination is unreachable; distance is then inf.
    """
    path: List[str] = field(default_factory=list)
    distance: float = math.inf

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    @property
    def hops(self) -> int:
        return max(len(self.path) - 1, 0)
