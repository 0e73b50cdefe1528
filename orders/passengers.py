from __future__ import annotations

from typing import Dict, List

from common.errors import DuplicateId, NotFound
from .models import Passenger


class PassengerRegistry:
    """
    Known passengers by id. Read-only from the engine's point of view once
    registered.
    """

    def __init__(self):
        self._passengers: Dict[int, Passenger] = {}

    def register(self, passenger: Passenger) -> Passenger:
        if passenger.id in self._passengers:
            raise DuplicateId(f"Passenger {passenger.id} is already registered")
        self._passengers[passenger.id] = passenger
        return passenger

    def lookup(self, passenger_id: int) -> Passenger:
        passenger = self._passengers.get(passenger_id)
        if passenger is None:
            raise NotFound(f"Passenger {passenger_id} not found")
        return passenger

    def all(self) -> List[Passenger]:
        return [self._passengers[pid] for pid in sorted(self._passengers)]

    def __contains__(self, passenger_id: int) -> bool:
        return passenger_id in self._passengers

    def __len__(self) -> int:
        return len(self._passengers)
