#Shared building blocks used by every capability package.
#No business logic.

from .errors import (
    DispatchError,
    NotFound,
    DuplicateId,
    QueueEmpty,
    NoAvailableDrivers,
    InvalidWeight,
)

__all__ = [
    "DispatchError",
    "NotFound",
    "DuplicateId",
    "QueueEmpty",
    "NoAvailableDrivers",
    "InvalidWeight",
]
