import os
from typing import Optional

import numpy as np
import pandas as pd


def generate_mock_network(
    output_dir: str = "mock_network",
    num_locations: int = 12,
    num_drivers: int = 20,
    num_passengers: int = 30,
    num_requests: int = 50,
    extra_routes: int = 10,
    seed: Optional[int] = None,
) -> str:
    """
    Generates a random city map plus drivers, passengers and ride requests,
    in the same CSV layout as sampledata/, so run_dispatch_simulation can
    load it.

    Locations sit on a 10 x 10 plane. Consecutive locations are always
    connected, so the whole map is one component; `extra_routes` random
    shortcuts are added on top. Route distance is the straight-line distance.
    """
    rng = np.random.default_rng(seed)
    os.makedirs(output_dir, exist_ok=True)

    # 1. Locations with planar coordinates
    names = [f"Stop {index + 1}" for index in range(num_locations)]
    xy = np.round(rng.uniform(0, 10, size=(num_locations, 2)), 2)

    def straight_line(a: int, b: int) -> float:
        return float(np.round(np.linalg.norm(xy[a] - xy[b]), 2))

    routes = []
    for index in range(num_locations - 1):
        routes.append({"from": names[index], "to": names[index + 1], "distance": straight_line(index, index + 1)})

    for _ in range(extra_routes):
        a, b = rng.choice(num_locations, size=2, replace=False)
        routes.append({"from": names[a], "to": names[b], "distance": straight_line(a, b)})

    # 2. Drivers scattered over the map
    drivers = pd.DataFrame({
        "driver_id": np.arange(101, 101 + num_drivers),
        "name": [f"Driver {index + 1}" for index in range(num_drivers)],
        "rating": np.round(rng.uniform(3.5, 5.0, size=num_drivers), 1),
        "location": rng.choice(names, size=num_drivers),
    })

    passengers = pd.DataFrame({
        "passenger_id": np.arange(1, 1 + num_passengers),
        "name": [f"Passenger {index + 1}" for index in range(num_passengers)],
        "rating": np.round(rng.uniform(3.0, 5.0, size=num_passengers), 1),
    })

    # 3. Requests between two different stops
    pickups = rng.integers(0, num_locations, size=num_requests)
    offsets = rng.integers(1, num_locations, size=num_requests)
    drops = (pickups + offsets) % num_locations
    requests_df = pd.DataFrame({
        "passenger_id": rng.choice(passengers["passenger_id"].to_numpy(), size=num_requests),
        "pickup": [names[i] for i in pickups],
        "drop": [names[i] for i in drops],
    })

    # 4. Save to CSV
    pd.DataFrame({"name": names, "x": xy[:, 0], "y": xy[:, 1]}).to_csv(
        os.path.join(output_dir, "locations.csv"), index=False
    )
    pd.DataFrame(routes).to_csv(os.path.join(output_dir, "routes.csv"), index=False)
    drivers.to_csv(os.path.join(output_dir, "drivers.csv"), index=False)
    passengers.to_csv(os.path.join(output_dir, "passengers.csv"), index=False)
    requests_df.to_csv(os.path.join(output_dir, "requests.csv"), index=False)

    print(f"Generated {num_locations} locations, {len(routes)} routes, {num_drivers} drivers "
          f"and {num_requests} requests into '{output_dir}'")
    return output_dir


if __name__ == "__main__":
    generate_mock_network()
