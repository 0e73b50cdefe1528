"""
Purpose: Weighted undirected graph of named locations.
What it does:
- Registers locations and bidirectional routes (adjacency lists, parallel edges kept)
- Shortest path (Dijkstra over a binary heap)
- Connectivity / traversal queries for diagnostics

Rule: No driver or request logic. Pure graph.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from common.errors import InvalidWeight, NotFound
from .models import Location, RouteResult, XY

logger = logging.getLogger(__name__)


class LocationGraph:
    """
    City map: location name -> list of (neighbour, distance).

    Edges are symmetric. Adding the same pair twice keeps both edges; the
    shortest path naturally uses the cheaper one.
    """

    def __init__(self):
        self._locations: Dict[str, Location] = {}
        self._adjacency: Dict[str, List[Tuple[str, float]]] = {}

    # --- Construction ---

    def add_location(self, name: str, coordinates: Optional[XY] = None) -> Location:
        """
        Register a location. Calling twice with the same name is fine,
        the last coordinates win.
        """
        location = self._locations.get(name)
        if location is None:
            location = Location(name=name, coordinates=coordinates)
            self._locations[name] = location
            self._adjacency[name] = []
        else:
            location.coordinates = coordinates
        return location

    def add_route(self, a: str, b: str, distance: float) -> None:
        """
        Add a bidirectional weighted edge. Unknown endpoints are registered
        implicitly (without coordinates).
        """
        if math.isnan(distance) or distance < 0:
            raise InvalidWeight(f"Route {a!r} <-> {b!r} has invalid distance {distance}")

        for name in (a, b):
            if name not in self._locations:
                self.add_location(name)

        self._adjacency[a].append((b, float(distance)))
        if a != b:
            self._adjacency[b].append((a, float(distance)))

        logger.debug("Added route %s <-> %s (%.3f)", a, b, distance)

    # --- Queries ---

    def has_location(self, name: str) -> bool:
        return name in self._locations

    def __contains__(self, name: str) -> bool:
        return self.has_location(name)

    def __len__(self) -> int:
        return len(self._locations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locations)

    def locations(self) -> List[Location]:
        return list(self._locations.values())

    def coordinates(self, name: str) -> Optional[XY]:
        location = self._locations.get(name)
        if location is None:
            raise NotFound(f"Unknown location {name!r}")
        return location.coordinates

    def neighbours(self, name: str) -> List[Tuple[str, float]]:
        if name not in self._adjacency:
            raise NotFound(f"Unknown location {name!r}")
        return list(self._adjacency[name])

    # --- Shortest path ---

    def shortest_path(self, start: str, end: str) -> List[str]:
        """
        Minimum total-weight path from start to end, both inclusive.

        Returns:
            [start] if start == end,
            [] if either endpoint is unknown or end is unreachable.

        Ties between equal-distance candidates are broken by location name,
        since heap entries are (distance, name).
        """
        if start not in self._adjacency or end not in self._adjacency:
            logger.debug("shortest_path: unknown endpoint %r or %r", start, end)
            return []

        if start == end:
            return [start]

        distances: Dict[str, float] = {start: 0.0}
        previous: Dict[str, str] = {}
        visited: Set[str] = set()
        heap: List[Tuple[float, str]] = [(0.0, start)]

        while heap:
            current_distance, current = heapq.heappop(heap)
            if current in visited:
                continue  # stale heap entry
            visited.add(current)

            if current == end:
                break

            for neighbour, weight in self._adjacency[current]:
                if neighbour in visited:
                    continue
                candidate = current_distance + weight
                if candidate < distances.get(neighbour, math.inf):
                    distances[neighbour] = candidate
                    previous[neighbour] = current
                    heapq.heappush(heap, (candidate, neighbour))

        if end not in visited:
            return []

        path = [end]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()
        return path

    def path_length(self, path: List[str]) -> float:
        """
        Summed edge weight along a path, using the cheapest of any parallel
        edges between consecutive stops. An empty or single-stop path is 0.
        """
        total = 0.0
        for a, b in zip(path, path[1:]):
            weights = [weight for neighbour, weight in self.neighbours(a) if neighbour == b]
            if not weights:
                raise NotFound(f"No route between {a!r} and {b!r}")
            total += min(weights)
        return total

    def route(self, start: str, end: str) -> RouteResult:
        path = self.shortest_path(start, end)
        if not path:
            return RouteResult(path=[], distance=math.inf)
        return RouteResult(path=path, distance=self.path_length(path))

    # --- Traversal ---

    def reachable_from(self, start: str) -> Set[str]:
        """
        Breadth-first connectivity query. Includes start itself.
        Unknown start gives an empty set.
        """
        if start not in self._adjacency:
            return set()

        seen: Set[str] = {start}
        frontier = deque([start])
        while frontier:
            current = frontier.popleft()
            for neighbour, _ in self._adjacency[current]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    frontier.append(neighbour)
        return seen

    def depth_first_order(self, start: str) -> List[str]:
        """
        Depth-first discovery order from start, using an explicit stack.
        Neighbours are explored in insertion order, so the result is the
        same as a recursive DFS over the same adjacency lists.
        """
        if start not in self._adjacency:
            return []

        order: List[str] = []
        visited: Set[str] = set()
        stack: List[str] = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            order.append(current)

            # push in reverse so the first-inserted neighbour is popped first
            for neighbour, _ in reversed(self._adjacency[current]):
                if neighbour not in visited:
                    stack.append(neighbour)

        return order
