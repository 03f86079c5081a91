import logging
import operator
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from garage_query.core.price import parse_price
from garage_query.core.traversal import (
    all_cars,
    all_wheels,
    bluetooth_of,
    cars_of,
    codecs_of,
    customers,
    radio_of,
    standards_of,
    wheels_of,
)
from garage_query.models import Car, Customer, Inventory, Wheel

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

CarPredicate = Callable[[Car], bool]
CustomerPredicate = Callable[[Customer], bool]

DEFAULT_CHEAP_THRESHOLD = 20_000


# ---------------------------------------------------------------------------
# Query shapes
# ---------------------------------------------------------------------------


def exists_match(inventory: Inventory | None, predicate: CarPredicate) -> bool:
    return any(predicate(car) for car in all_cars(inventory))


def count_matching(inventory: Inventory | None, predicate: CarPredicate) -> int:
    return sum(1 for car in all_cars(inventory) if predicate(car))


def group_and_aggregate(
    inventory: Inventory | None,
    key: Callable[[Any], K | None],
    value: Callable[[Any], Any],
    select: Callable[[Inventory | None], Iterable[Any]] = all_cars,
    aggregate: Callable[[Any, Any], Any] = operator.add,
    initial: Any = 0,
    absent_value: Any = None,
) -> dict[K, Any]:
    """Fold ``value`` per ``key`` over the entities produced by ``select``.

    Entities whose key is absent join no group. A present key always registers
    its group, seeded with ``initial``. Absent values are skipped unless
    ``absent_value`` is set, in which case that value is folded in instead.
    Groups keep first-seen order.
    """
    groups: dict[K, Any] = {}
    for entity in select(inventory):
        group_key = key(entity)
        if group_key is None:
            continue
        acc = groups.get(group_key, initial)
        contribution = value(entity)
        if contribution is None:
            contribution = absent_value
        if contribution is not None:
            acc = aggregate(acc, contribution)
        groups[group_key] = acc
    return groups


def distinct_projection(
    inventory: Inventory | None,
    predicate: CustomerPredicate,
    projection: Callable[[Customer], str | None],
) -> list[str]:
    """Project matching customers to text, dropping absent values and repeats."""
    seen: dict[str, None] = {}
    for customer in customers(inventory):
        if not predicate(customer):
            continue
        projected = projection(customer)
        if projected is not None:
            seen.setdefault(projected, None)
    return list(seen)


# ---------------------------------------------------------------------------
# Predicate building blocks
# ---------------------------------------------------------------------------


def cheap(threshold: int = DEFAULT_CHEAP_THRESHOLD) -> CarPredicate:
    return lambda car: parse_price(car.price) < threshold


def has_bluetooth_version(version: int) -> CarPredicate:
    return lambda car: any(bt.version == version for bt in bluetooth_of(car))


def has_ukw() -> CarPredicate:
    return lambda car: any(radio.ukw is True for radio in radio_of(car))


def has_codec(codec: str) -> CarPredicate:
    return lambda car: any(found == codec for found in codecs_of(car))


def all_of(*predicates: CarPredicate) -> CarPredicate:
    return lambda car: all(p(car) for p in predicates)


def any_car(predicate: CarPredicate) -> CustomerPredicate:
    return lambda customer: any(predicate(car) for car in cars_of(customer))


def has_at_least_cars(minimum: int) -> CustomerPredicate:
    return lambda customer: sum(1 for _ in cars_of(customer)) >= minimum


# ---------------------------------------------------------------------------
# Garage queries
# ---------------------------------------------------------------------------


def exists_cheap_car_with_bluetooth(
    inventory: Inventory | None, threshold: int = DEFAULT_CHEAP_THRESHOLD, version: int = 5
) -> bool:
    """Is any car priced below ``threshold`` and fitted with the given bluetooth version?"""
    found = exists_match(inventory, all_of(cheap(threshold), has_bluetooth_version(version)))
    logger.debug("cheap car (< %d) with bluetooth %d: %s", threshold, version, found)
    return found


def wheels_per_brand(inventory: Inventory | None) -> dict[str, int]:
    """Return total wheel amount per wheel brand; a missing amount counts as 0."""

    def _brand(wheel: Wheel) -> str | None:
        return wheel.brand

    def _amount(wheel: Wheel) -> int | None:
        return wheel.amount

    totals = group_and_aggregate(inventory, _brand, _amount, select=all_wheels, absent_value=0)
    logger.debug("wheel brands: %d", len(totals))
    return totals


def customer_names_with_codec(inventory: Inventory | None, codec: str = "Opus") -> list[str]:
    names = distinct_projection(inventory, any_car(has_codec(codec)), lambda c: c.name)
    logger.debug("customers with codec %s: %d", codec, len(names))
    return names


def customer_names_with_cars(inventory: Inventory | None, minimum: int = 2) -> list[str]:
    names = distinct_projection(inventory, has_at_least_cars(minimum), lambda c: c.name)
    logger.debug("customers with at least %d cars: %d", minimum, len(names))
    return names


def count_cars_with_ukw(inventory: Inventory | None) -> int:
    count = count_matching(inventory, has_ukw())
    logger.debug("cars with ukw radio: %d", count)
    return count


def inventory_statistics(inventory: Inventory | None) -> dict[str, int]:
    """Return element counts per level: customers, cars, wheels, standards."""
    cars = list(all_cars(inventory))
    return {
        "customers": sum(1 for _ in customers(inventory)),
        "cars": len(cars),
        "wheels": sum(1 for car in cars for _ in wheels_of(car)),
        "standards": sum(1 for car in cars for _ in standards_of(car)),
    }
