"""
Purpose: Business rules for choosing the best driver.
What it does:
Filters a pool of drivers down to the eligible ones and ranks them
(highest rating, or any caller-supplied key such as distance to a pickup).
"""

from typing import Callable, Iterable, List, Optional, Union

from .models import Driver

RankKey = Union[str, Callable[[Driver], float]]


def filter_available(drivers: Iterable[Driver]) -> List[Driver]:
    """
    Returns only drivers whose availability flag is set, keeping input order.
    """
    available = []

    for driver in drivers:
        if not driver.is_available:
            continue

        available.append(driver)

    return available


def select_best(candidates: Iterable[Driver]) -> Optional[Driver]:
    """
    Strictly highest rating wins. Equal ratings go to the lowest id,
    whatever order the candidates arrive in.
    """
    best: Optional[Driver] = None

    for driver in sorted(candidates, key=lambda d: d.id):
        if best is None or driver.rating > best.rating:
            best = driver

    return best


def rank_drivers(drivers: Iterable[Driver], key: RankKey = "rating", reverse: Optional[bool] = None) -> List[Driver]:
    """
    Stable sort of drivers by a criterion.

    key:
        "rating"  -> best rated first (descending unless reverse=False)
        "id"      -> ascending id
        callable  -> ascending by key(driver), e.g. distance to a location
    Ties keep their input order.
    """
    if key == "rating":
        sort_key = lambda d: d.rating
        default_reverse = True
    elif key == "id":
        sort_key = lambda d: d.id
        default_reverse = False
    elif callable(key):
        sort_key = key
        default_reverse = False
    else:
        raise ValueError(f"Unknown ranking criterion {key!r}")

    if reverse is None:
        reverse = default_reverse

    # sorted() is stable, and with reverse=True equal keys still keep input order
    return sorted(drivers, key=sort_key, reverse=reverse)
