"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the structure of a Driver, their status and the Ride records
that make up a driver's history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class DriverStatus(str, Enum):
    """
    Standardizes the state a driver can be in.
    """
    AVAILABLE = "available"
    ASSIGNED = "assigned"


@dataclass(frozen=True)
class Ride:
    """
    One entry of a driver's ride history. Immutable once recorded.
    """
    source: str
    destination: str
    distance: float
    fare: float
    timestamp: datetime = field(default_factory=datetime.now)

    # path actually planned for the ride (empty if unreachable)
    route: tuple = ()
    request_id: Optional[str] = None


@dataclass
class Driver:
    """
    A driver registered with the directory.
    `id` never changes; rating, location and status do. History only grows.
    """
    id: int
    name: str
    rating: float
    location: str
    status: DriverStatus = DriverStatus.AVAILABLE
    history: List[Ride] = field(default_factory=list)

    @property
    def is_available(self) -> bool:
        return self.status == DriverStatus.AVAILABLE

    def add_ride(self, ride: Ride) -> None:
        self.history.append(ride)

    @classmethod
    def new(
        cls,
        driver_id: int,
        name: str,
        rating: float,
        location: str,
        status: str | DriverStatus = DriverStatus.AVAILABLE,
    ) -> Driver:
        if isinstance(status, str):
            status = DriverStatus(status)

        return cls(
            id=int(driver_id),
            name=name,
            rating=float(rating),
            location=location,
            status=status,
        )
