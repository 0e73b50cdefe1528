from .driver_state import DriverStateException, handle_driver_assignment, handle_driver_release
from .request_state import (
    RequestStateException,
    check_request_assignable,
    transition_request_to_assigned,
    transition_request_to_completed,
    transition_request_to_unassignable,
)

__all__ = [
    "DriverStateException",
    "handle_driver_assignment",
    "handle_driver_release",
    "RequestStateException",
    "check_request_assignable",
    "transition_request_to_assigned",
    "transition_request_to_completed",
    "transition_request_to_unassignable",
]
