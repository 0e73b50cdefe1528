"""
Purpose: Domain models for the ride requests capability.
What it does:
- Defines core data structures:
- Passenger (id, name, rating)
- RideRequest (id, passenger_id, pickup, drop, timestamps, assigned driver, status)

Defines enums/constants:
- RequestStatus = QUEUED | ASSIGNED | COMPLETED | UNASSIGNABLE

Rule: No graph search, no matching logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from datetime import datetime
import uuid


class RequestStatus(Enum):
    QUEUED = "QUEUED"
    ASSIGNED = "ASSIGNED"
    COMPLETED = "COMPLETED"
    UNASSIGNABLE = "UNASSIGNABLE"


@dataclass
class Passenger:
    id: int
    name: str
    rating: float = 5.0


@dataclass
class RideRequest:
    """
    A passenger's request to travel from pickup to drop.
    Gets a driver attached exactly once, at match time.
    """

    passenger_id: int
    pickup: str
    drop: str

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)

    assigned_driver_id: Optional[int] = None
    completed: bool = False

    status: RequestStatus = RequestStatus.QUEUED

    @staticmethod
    def new(passenger_id: int, pickup: str, drop: str, now: Optional[datetime] = None) -> RideRequest:
        return RideRequest(
            passenger_id=passenger_id,
            pickup=pickup,
            drop=drop,
            created_at=now or datetime.now(),
        )
