import pytest

from dispatch.state_machines import (
    DriverStateException,
    RequestStateException,
    handle_driver_assignment,
    handle_driver_release,
    transition_request_to_assigned,
    transition_request_to_completed,
    transition_request_to_unassignable,
)
from drivers.models import Driver, DriverStatus
from orders.models import RequestStatus, RideRequest


@pytest.fixture
def request_():
    return RideRequest.new(1, "Main Gate", "North Gate")


@pytest.fixture
def driver():
    return Driver.new(101, "Ravi", 4.5, "Main Gate")


def test_request_lifecycle(request_):
    transition_request_to_assigned(request_, 102)
    assert request_.status == RequestStatus.ASSIGNED
    assert request_.assigned_driver_id == 102

    transition_request_to_completed(request_)
    assert request_.status == RequestStatus.COMPLETED
    assert request_.completed is True


def test_request_assigned_only_once(request_):
    transition_request_to_assigned(request_, 102)
    with pytest.raises(RequestStateException):
        transition_request_to_assigned(request_, 101)
    assert request_.assigned_driver_id == 102


def test_request_cannot_complete_while_queued(request_):
    with pytest.raises(RequestStateException):
        transition_request_to_completed(request_)


def test_unassignable_is_terminal(request_):
    transition_request_to_unassignable(request_)
    assert request_.status == RequestStatus.UNASSIGNABLE

    with pytest.raises(RequestStateException):
        transition_request_to_assigned(request_, 101)
    with pytest.raises(RequestStateException):
        transition_request_to_unassignable(request_)


def test_driver_assignment_and_release(driver):
    handle_driver_assignment(driver)
    assert driver.status == DriverStatus.ASSIGNED
    assert not driver.is_available

    handle_driver_release(driver, "North Gate")
    assert driver.is_available
    assert driver.location == "North Gate"


def test_driver_cannot_take_two_rides(driver):
    handle_driver_assignment(driver)
    with pytest.raises(DriverStateException):
        handle_driver_assignment(driver)


def test_driver_release_without_ride(driver):
    with pytest.raises(DriverStateException):
        handle_driver_release(driver, "North Gate")
    assert driver.location == "Main Gate"
