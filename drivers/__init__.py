"""
Drivers domain package.

Public API:
- Domain models: Driver, DriverStatus, Ride
- Registry: DriverDirectory
"""
from .models import Driver, DriverStatus, Ride
from .directory import DriverDirectory

__all__ = ["Driver",
           "DriverStatus",
           "Ride",
           "DriverDirectory",
           ]
