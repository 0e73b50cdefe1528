"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Pulls the oldest ride request off the queue, picks the best available
driver from the directory, plans the route over the location graph,
then updates driver state and ride history.

Per request: QUEUED -> ASSIGNED -> COMPLETED, or QUEUED -> UNASSIGNABLE.

The engine never prints. Callers get structured results (DispatchResult)
or one of the errors in common.errors, and render them however they like.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from common.errors import NoAvailableDrivers, NotFound
from drivers.directory import DriverDirectory
from drivers.models import Driver, Ride
from orders.models import Passenger, RideRequest
from orders.passengers import PassengerRegistry
from orders.queue import RequestQueue
from routing.graph import LocationGraph
from routing.models import Location, RouteResult, XY

from .policy import DispatchPolicy, default_dispatch_policy
from .pricing import ride_distance, ride_fare
from .state_machines import (
    check_request_assignable,
    handle_driver_assignment,
    handle_driver_release,
    transition_request_to_assigned,
    transition_request_to_completed,
    transition_request_to_unassignable,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """
    Outcome of one successful dispatch.
    An empty route means the drop-off could not be reached on the map.
    """
    request: RideRequest
    driver: Driver
    route: List[str]
    distance: float
    fare: float
    ride: Ride


class DispatchEngine:
    """
    Single-writer owner of the queue and of driver availability.
    The graph is only read once the map has been built.
    """

    def __init__(
        self,
        graph: Optional[LocationGraph] = None,
        directory: Optional[DriverDirectory] = None,
        queue: Optional[RequestQueue] = None,
        passengers: Optional[PassengerRegistry] = None,
        policy: Optional[DispatchPolicy] = None,
    ):
        self.graph = graph if graph is not None else LocationGraph()
        self.directory = directory if directory is not None else DriverDirectory()
        self.queue = queue if queue is not None else RequestQueue()
        self.passengers = passengers if passengers is not None else PassengerRegistry()
        self.policy = policy or default_dispatch_policy()
        self.policy.validate()

        self._active: Dict[str, RideRequest] = {}
        self._unassignable: List[RideRequest] = []

    # --- Construction surface ---

    def add_location(self, name: str, x: Optional[float] = None, y: Optional[float] = None) -> Location:
        coordinates: Optional[XY] = None
        if x is not None and y is not None:
            coordinates = (x, y)
        return self.graph.add_location(name, coordinates)

    def add_route(self, a: str, b: str, weight: float) -> None:
        self.graph.add_route(a, b, weight)

    def register_driver(self, driver_id: int, name: str, rating: float, location: str) -> Driver:
        return self.directory.register(Driver.new(driver_id, name, rating, location))

    def register_passenger(self, passenger_id: int, name: str, rating: float = 5.0) -> Passenger:
        return self.passengers.register(Passenger(id=passenger_id, name=name, rating=rating))

    # --- Requests ---

    def submit(self, passenger_id: int, pickup: str, drop: str, now: Optional[datetime] = None) -> RideRequest:
        """
        Queue a ride request. The request starts QUEUED with no driver.
        """
        if self.policy.require_registered_passenger:
            self.passengers.lookup(passenger_id)

        request = RideRequest.new(passenger_id, pickup, drop, now=now)
        self.queue.enqueue(request)
        logger.info("Ride queued for passenger %s (%s -> %s)", passenger_id, pickup, drop)
        return request

    def dispatch_next(self, now: Optional[datetime] = None) -> DispatchResult:
        """
        Match the oldest queued request.

        Raises:
            QueueEmpty: nothing pending; no state was touched.
            NoAvailableDrivers: every driver is busy. The request is dropped
                as UNASSIGNABLE, or put back at the tail of the queue when
                policy.requeue_when_no_drivers is set.
            RequestStateException: the dequeued request is not QUEUED. It is
                discarded and no driver is touched.
        """
        now = now or datetime.now()
        request = self.queue.dequeue()
        check_request_assignable(request)

        available = self.directory.find_available()
        if not available:
            if self.policy.requeue_when_no_drivers:
                self.queue.enqueue(request)
                logger.warning("No available drivers, request %s requeued", request.id)
            else:
                transition_request_to_unassignable(request)
                self._unassignable.append(request)
                logger.warning("No available drivers, request %s dropped", request.id)
            raise NoAvailableDrivers(request)

        driver = self.directory.select_best(available)
        handle_driver_assignment(driver)

        path = self.graph.shortest_path(request.pickup, request.drop)
        if not path:
            logger.warning("No route from %s to %s, dispatching with zero distance", request.pickup, request.drop)

        distance = ride_distance(path, self.graph, self.policy)
        fare = ride_fare(distance, self.policy)

        ride = Ride(
            source=request.pickup,
            destination=request.drop,
            distance=distance,
            fare=fare,
            timestamp=now,
            route=tuple(path),
            request_id=request.id,
        )
        driver.add_ride(ride)

        transition_request_to_assigned(request, driver.id)
        self._active[request.id] = request

        logger.info("Ride assigned to %s (ID: %s), %.2f units, fare %.2f", driver.name, driver.id, distance, fare)
        return DispatchResult(
            request=request,
            driver=driver,
            route=path,
            distance=distance,
            fare=fare,
            ride=ride,
        )

    def dispatch_all(self, now: Optional[datetime] = None) -> List[DispatchResult]:
        """
        Drain the queue. Requests that find no driver are skipped.
        In requeue mode the drain stops at the first such request, since no
        driver can free up mid-drain.
        """
        results: List[DispatchResult] = []

        while not self.queue.is_empty():
            try:
                results.append(self.dispatch_next(now=now))
            except NoAvailableDrivers as exc:
                logger.info("Skipping request %s: %s", exc.request.id, exc)
                if self.policy.requeue_when_no_drivers:
                    break

        return results

    def complete(self, request_id: str) -> RideRequest:
        """
        Finish an assigned ride: the request becomes COMPLETED and the driver
        is back to available at the drop-off location.
        """
        request = self._active.get(request_id)
        if request is None:
            raise NotFound(f"No active request {request_id}")

        driver = self.directory.lookup(request.assigned_driver_id)
        transition_request_to_completed(request)
        handle_driver_release(driver, request.drop)
        del self._active[request_id]

        logger.info("Ride %s completed by driver %s", request_id, driver.id)
        return request

    # --- Query surface ---

    def list_drivers(self) -> List[Driver]:
        return self.directory.all()

    def queue_depth(self) -> int:
        return self.queue.size()

    def pending_requests(self) -> List[RideRequest]:
        return self.queue.pending()

    def active_requests(self) -> List[RideRequest]:
        return list(self._active.values())

    def unassignable_requests(self) -> List[RideRequest]:
        return list(self._unassignable)

    def driver_history(self, driver_id: int) -> List[Ride]:
        return list(self.directory.lookup(driver_id).history)

    def compute_route(self, start: str, end: str) -> RouteResult:
        return self.graph.route(start, end)
