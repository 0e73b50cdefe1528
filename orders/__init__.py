"""
Ride requests domain package.

Public API:
- Domain models: Passenger, RideRequest, RequestStatus
- FIFO queue: RequestQueue
- Passenger registry: PassengerRegistry

"""
from .models import Passenger, RideRequest, RequestStatus
from .queue import RequestQueue, QueueStats
from .passengers import PassengerRegistry

__all__ = ["Passenger",
           "RideRequest",
             "RequestStatus",
               "RequestQueue",
               "QueueStats",
               "PassengerRegistry",
               ]
