"""
Purpose: In-memory registry of drivers, kept sorted by id.
What it does:
- register(driver) / lookup(driver_id) with binary search over sorted ids
- find_available() in directory order
- select_best() / rank() / rank_by_distance() for matching and reporting

Rule: Directory owns membership only. Availability and history are changed
on the Driver itself by the dispatch engine.
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import Dict, Iterable, Iterator, List, Optional

from common.errors import DuplicateId, NotFound
from .models import Driver
from .selection import RankKey, filter_available, rank_drivers, select_best

logger = logging.getLogger(__name__)


class DriverDirectory:
    """
    Sorted id list (bisect) + id -> Driver map.
    The id list is in ascending order after every insertion.
    """

    def __init__(self, drivers: Optional[Iterable[Driver]] = None):
        self._ids: List[int] = []
        self._drivers: Dict[int, Driver] = {}
        for driver in drivers or []:
            self.register(driver)

    def register(self, driver: Driver) -> Driver:
        """
        New drivers must be AVAILABLE: an ASSIGNED driver would have no
        active request to complete.
        """
        if not driver.is_available:
            raise ValueError(f"Driver {driver.id} must be available when registered, got {driver.status.value}")

        index = bisect.bisect_left(self._ids, driver.id)
        if index < len(self._ids) and self._ids[index] == driver.id:
            raise DuplicateId(f"Driver {driver.id} is already registered")

        self._ids.insert(index, driver.id)
        self._drivers[driver.id] = driver
        logger.debug("Registered driver %s (%s)", driver.id, driver.name)
        return driver

    def lookup(self, driver_id: int) -> Driver:
        index = bisect.bisect_left(self._ids, driver_id)
        if index == len(self._ids) or self._ids[index] != driver_id:
            raise NotFound(f"Driver {driver_id} not found")
        return self._drivers[self._ids[index]]

    def all(self) -> List[Driver]:
        return [self._drivers[driver_id] for driver_id in self._ids]

    def __iter__(self) -> Iterator[Driver]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, driver_id: int) -> bool:
        return driver_id in self._drivers

    # --- Matching / reporting ---

    def find_available(self) -> List[Driver]:
        return filter_available(self.all())

    def select_best(self, candidates: Optional[Iterable[Driver]] = None) -> Optional[Driver]:
        """
        Best candidate (highest rating, lowest id on ties).
        Defaults to the currently available drivers.
        """
        if candidates is None:
            candidates = self.find_available()
        return select_best(candidates)

    def rank(self, key: RankKey = "rating", reverse: Optional[bool] = None) -> List[Driver]:
        return rank_drivers(self.all(), key=key, reverse=reverse)

    def rank_by_distance(self, graph, target: str) -> List[Driver]:
        """
        Drivers nearest to `target` first, measured over the location graph.
        Drivers that cannot reach `target` go last.
        """
        def distance_to_target(driver: Driver) -> float:
            route = graph.route(driver.location, target)
            return route.distance if route.reachable else math.inf

        return self.rank(key=distance_to_target)
