import csv

import pytest

from scripts.generate_mock_network import generate_mock_network
from scripts.run_dispatch_simulation import load_network, load_requests, run_simulation
from dispatch.engine import DispatchEngine

ENV_VARS = [
    "DISPATCH_DISTANCE_MODE",
    "DISPATCH_PER_HOP_DISTANCE",
    "DISPATCH_BASE_FARE",
    "DISPATCH_FARE_PER_UNIT",
    "DISPATCH_REQUEUE_WHEN_NO_DRIVERS",
    "DISPATCH_REQUIRE_REGISTERED_PASSENGER",
]


@pytest.fixture
def no_dispatch_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_load_sample_network():
    engine = DispatchEngine()
    load_network(engine)

    assert [d.id for d in engine.list_drivers()] == [101, 102, 103]
    assert len(engine.passengers) == 2
    assert engine.compute_route("North Gate", "Reptile House").distance == pytest.approx(1.2)

    assert load_requests(engine) == 4
    assert engine.queue_depth() == 4


def test_run_simulation_writes_results(no_dispatch_env):
    output_path = run_simulation(str(no_dispatch_env / "results.csv"))

    with open(output_path, newline='') as file:
        rows = list(csv.DictReader(file))

    assert len(rows) == 4
    # Anita, Ravi, Karan in rating order, then everyone is busy
    assert [row["driver_id"] for row in rows] == ["102", "101", "103", "FAILED"]
    assert rows[0]["route"] == "Main Gate > North Gate"


def test_generated_network_is_connected_and_dispatchable(tmp_path):
    data_dir = generate_mock_network(
        output_dir=str(tmp_path / "network"),
        num_locations=8,
        num_drivers=5,
        num_passengers=4,
        num_requests=7,
        seed=42,
    )

    engine = DispatchEngine()
    load_network(engine, data_dir)
    assert load_requests(engine, data_dir) == 7

    # 1. Every stop is on one connected map
    assert len(engine.graph) == 8
    assert engine.graph.reachable_from("Stop 1") == set(engine.graph)

    # 2. Five drivers serve five requests, the other two are dropped
    results = engine.dispatch_all()
    assert len(results) == 5
    assert len(engine.unassignable_requests()) == 2
    assert all(result.route for result in results)
    assert all(result.route[0] != result.route[-1] for result in results)
