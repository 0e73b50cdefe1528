import csv
import logging
import os
from typing import Optional

import pandas as pd

from dispatch import DispatchEngine, policy_from_env
from common.errors import NoAvailableDrivers

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def load_network(engine: DispatchEngine, data_dir: Optional[str] = None) -> None:
    """
    Seed locations, drivers, passengers and routes from CSV files.
    locations.csv is optional; routes register their endpoints anyway.
    """
    data_dir = data_dir or os.path.join(BASE_DIR, "sampledata")

    locations_path = os.path.join(data_dir, "locations.csv")
    if os.path.exists(locations_path):
        locations = pd.read_csv(locations_path)
        for _, row in locations.iterrows():
            engine.add_location(row["name"], float(row["x"]), float(row["y"]))

    drivers = pd.read_csv(os.path.join(data_dir, "drivers.csv"))
    for _, row in drivers.iterrows():
        engine.register_driver(int(row["driver_id"]), row["name"], float(row["rating"]), row["location"])

    passengers = pd.read_csv(os.path.join(data_dir, "passengers.csv"))
    for _, row in passengers.iterrows():
        engine.register_passenger(int(row["passenger_id"]), row["name"], float(row["rating"]))

    routes = pd.read_csv(os.path.join(data_dir, "routes.csv"))
    for _, row in routes.iterrows():
        engine.add_route(row["from"], row["to"], float(row["distance"]))


def load_requests(engine: DispatchEngine, data_dir: Optional[str] = None) -> int:
    data_dir = data_dir or os.path.join(BASE_DIR, "sampledata")

    requests_df = pd.read_csv(os.path.join(data_dir, "requests.csv"))
    for _, row in requests_df.iterrows():
        engine.submit(int(row["passenger_id"]), row["pickup"], row["drop"])
    return len(requests_df)


def run_simulation(output_path: Optional[str] = None, data_dir: Optional[str] = None) -> str:
    print("=== STARTING DISPATCH SIMULATION ===")

    # 1. Build the engine and the city map
    engine = DispatchEngine(policy=policy_from_env())
    load_network(engine, data_dir)
    submitted = load_requests(engine, data_dir)
    print(f"Loaded {len(engine.list_drivers())} Drivers, {len(engine.graph)} Locations and {submitted} Requests.\n")

    print("--- Drivers ---")
    for driver in engine.list_drivers():
        print(f"ID: {driver.id} | Name: {driver.name} | Rating: {driver.rating} | Loc: {driver.location}")

    print(f"\nPending rides: {engine.queue_depth()}\n")

    # 2. Dispatch every pending request, one at a time
    output_path = output_path or os.path.join(BASE_DIR, "dispatch_results.csv")
    successful_dispatches = 0

    with open(output_path, "w", newline='') as file:
        writer = csv.writer(file)
        writer.writerow(["request_id", "passenger_id", "pickup", "drop", "driver_id", "route", "distance", "fare"])

        while engine.queue_depth() > 0:
            try:
                result = engine.dispatch_next()
            except NoAvailableDrivers as exc:
                request = exc.request
                writer.writerow([request.id, request.passenger_id, request.pickup, request.drop, "FAILED", "", "", ""])
                print(f"[FAILED] Passenger {request.passenger_id} -> No available drivers.")
                if engine.policy.requeue_when_no_drivers:
                    break
                continue

            request = result.request
            successful_dispatches += 1
            writer.writerow([
                request.id,
                request.passenger_id,
                request.pickup,
                request.drop,
                result.driver.id,
                " > ".join(result.route),
                result.distance,
                result.fare,
            ])
            print(f"[SUCCESS] Passenger {request.passenger_id} -> Assigned to {result.driver.name} (ID: {result.driver.id})"
                  f" via {' > '.join(result.route) or 'NO ROUTE'}")

    # 3. Ride histories
    print("\n--- Ride Histories ---")
    for driver in engine.list_drivers():
        print(f"Ride history of {driver.name}:")
        for ride in engine.driver_history(driver.id):
            print(f"  From {ride.source} To {ride.destination} ({ride.distance} units, fare {ride.fare})")

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Rides Dispatched: {successful_dispatches} / {submitted}")
    print(f"Results written to '{output_path}'.")
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_simulation()
