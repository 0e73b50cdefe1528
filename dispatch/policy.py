"""
Purpose: Central configuration for dispatch (single source of truth).
What it does:

Stores all tunable parameters for matching, distance and fare:

PER_HOP_DISTANCE = 1.0
FARE_PER_UNIT = 10.0
DISTANCE_MODE = "hops"

Values can be overridden from the environment / a .env file:
# DISPATCH_FARE_PER_UNIT=12.5
# DISPATCH_REQUEUE_WHEN_NO_DRIVERS=true

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DISTANCE_MODES = ("hops", "weighted")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DispatchPolicy:
    """
    Central configuration for the dispatch engine.
    """

    # --- Distance ---
    # "hops": number of hops on the planned path x per_hop_distance.
    #         Matches the legacy heuristic; ignores edge weights.
    # "weighted": sum of the edge weights along the path.
    distance_mode: str = "hops"
    per_hop_distance: float = 1.0

    # --- Fare ---
    # fare = base_fare + distance * fare_per_unit
    base_fare: float = 0.0
    fare_per_unit: float = 10.0

    # --- No driver free ---
    # False: the request is dropped as UNASSIGNABLE (legacy behaviour).
    # True: the request goes back to the tail of the queue.
    requeue_when_no_drivers: bool = False

    # --- Passenger checks ---
    # Reject submissions from passengers that were never registered.
    require_registered_passenger: bool = False

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.distance_mode not in DISTANCE_MODES:
            raise ValueError(f"distance_mode must be one of {DISTANCE_MODES}")

        if self.per_hop_distance < 0:
            raise ValueError("per_hop_distance must be >= 0")

        if self.base_fare < 0 or self.fare_per_unit < 0:
            raise ValueError("fares must be >= 0")


def default_dispatch_policy() -> DispatchPolicy:
    """
    Convenience factory for the default policy.
    """
    p = DispatchPolicy()
    p.validate()
    return p


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def policy_from_env(dotenv_path: Optional[str] = None) -> DispatchPolicy:
    """
    Build a policy from DISPATCH_* environment variables.
    A .env file is loaded first (given path, else the nearest one from the
    working directory up); variables already set in the process win.
    """
    load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    defaults = DispatchPolicy()
    p = DispatchPolicy(
        distance_mode=_env_str("DISPATCH_DISTANCE_MODE", defaults.distance_mode).lower(),
        per_hop_distance=_env_float("DISPATCH_PER_HOP_DISTANCE", defaults.per_hop_distance),
        base_fare=_env_float("DISPATCH_BASE_FARE", defaults.base_fare),
        fare_per_unit=_env_float("DISPATCH_FARE_PER_UNIT", defaults.fare_per_unit),
        requeue_when_no_drivers=_env_bool("DISPATCH_REQUEUE_WHEN_NO_DRIVERS", defaults.requeue_when_no_drivers),
        require_registered_passenger=_env_bool(
            "DISPATCH_REQUIRE_REGISTERED_PASSENGER", defaults.require_registered_passenger
        ),
    )
    p.validate()
    return p
