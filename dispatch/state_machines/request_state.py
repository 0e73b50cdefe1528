from orders.models import RideRequest, RequestStatus


class RequestStateException(Exception):
    """Raised when an invalid request transition is attempted."""
    pass


def check_request_assignable(request: RideRequest) -> RideRequest:
    """
    Raises unless the request is QUEUED with no driver yet.
    Run before any driver state is touched.
    """
    if request.status != RequestStatus.QUEUED:
        raise RequestStateException(f"Cannot assign request {request.id} from {request.status}")
    if request.assigned_driver_id is not None:
        raise RequestStateException(f"Request {request.id} already has driver {request.assigned_driver_id}")
    return request


def transition_request_to_assigned(request: RideRequest, driver_id: int) -> RideRequest:
    """
    Called once, when the engine matches a queued request to a driver.
    """
    check_request_assignable(request)

    request.assigned_driver_id = driver_id
    request.status = RequestStatus.ASSIGNED
    return request


def transition_request_to_unassignable(request: RideRequest) -> RideRequest:
    """
    No driver was free when the request reached the front of the queue.
    """
    if request.status != RequestStatus.QUEUED:
        raise RequestStateException(f"Cannot drop request {request.id} from {request.status}")

    request.status = RequestStatus.UNASSIGNABLE
    return request


def transition_request_to_completed(request: RideRequest) -> RideRequest:
    if request.status != RequestStatus.ASSIGNED:
        raise RequestStateException(f"Request {request.id} is not ASSIGNED. Current: {request.status}")

    request.status = RequestStatus.COMPLETED
    request.completed = True
    return request
