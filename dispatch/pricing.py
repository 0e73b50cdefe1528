#Purpose: Distance and fare for a dispatched ride.
#Turns a planned path into the numbers recorded in the driver's history.
#Pure functions, all knobs come from DispatchPolicy.

from typing import List

from routing.graph import LocationGraph
from .policy import DispatchPolicy


def ride_distance(path: List[str], graph: LocationGraph, policy: DispatchPolicy) -> float:
    """
    Distance of a planned ride.

    "hops" mode counts hops on the path and multiplies by per_hop_distance,
    so edge weights do not matter. "weighted" mode sums the edge weights.
    An empty (unreachable) path is 0.0 in both modes.
    """
    if not path:
        return 0.0

    if policy.distance_mode == "weighted":
        return graph.path_length(path)

    hops = len(path) - 1
    return hops * policy.per_hop_distance


def ride_fare(distance: float, policy: DispatchPolicy) -> float:
    return round(policy.base_fare + distance * policy.fare_per_unit, 2)
