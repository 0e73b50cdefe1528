from drivers.models import Driver, DriverStatus


class DriverStateException(Exception):
    """Raised when an invalid driver transition is attempted."""
    pass


def handle_driver_assignment(driver: Driver) -> Driver:
    """
    Called when the engine hands a request to this driver.
    A driver holds at most one active request.
    """
    if driver.status != DriverStatus.AVAILABLE:
        raise DriverStateException(f"Driver {driver.id} is not available. Current: {driver.status.value}")

    driver.status = DriverStatus.ASSIGNED
    return driver


def handle_driver_release(driver: Driver, drop_location: str) -> Driver:
    """
    Ride finished: the driver is now at the drop-off and free again.
    """
    if driver.status != DriverStatus.ASSIGNED:
        raise DriverStateException(f"Driver {driver.id} has no active ride to finish")

    driver.location = drop_location
    driver.status = DriverStatus.AVAILABLE
    return driver
