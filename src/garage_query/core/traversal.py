"""Null-absorbing descent through the inventory tree.

Each function yields zero elements when its input, or any hop on the way
down, is absent. An absent collection, an empty collection and a collection
holding only ``null`` entries all look the same to callers. The generators
are lazy; call the function again to restart.
"""

from collections.abc import Iterable, Iterator
from typing import TypeVar

from garage_query.models import Bluetooth, Car, Customer, Inventory, Radio, Standard, Wheel

T = TypeVar("T")


def sequence_of(collection: Iterable[T | None] | None) -> Iterator[T]:
    if collection is None:
        return
    for item in collection:
        if item is not None:
            yield item


def customers(inventory: Inventory | None) -> Iterator[Customer]:
    if inventory is None:
        return
    yield from sequence_of(inventory.products)


def cars_of(customer: Customer | None) -> Iterator[Car]:
    if customer is None:
        return
    yield from sequence_of(customer.cars)


def all_cars(inventory: Inventory | None) -> Iterator[Car]:
    for customer in customers(inventory):
        yield from cars_of(customer)


def wheels_of(car: Car | None) -> Iterator[Wheel]:
    if car is not None and car.wheel is not None:
        yield car.wheel


def radio_of(car: Car | None) -> Iterator[Radio]:
    if car is not None and car.radio is not None:
        yield car.radio


def bluetooth_of(car: Car | None) -> Iterator[Bluetooth]:
    for radio in radio_of(car):
        if radio.bluetooth is not None:
            yield radio.bluetooth


def standards_of(car: Car | None) -> Iterator[Standard]:
    for bluetooth in bluetooth_of(car):
        yield from sequence_of(bluetooth.standards)


def codecs_of(car: Car | None) -> Iterator[str]:
    for standard in standards_of(car):
        if standard.codec is not None:
            yield standard.codec


def all_wheels(inventory: Inventory | None) -> Iterator[Wheel]:
    for car in all_cars(inventory):
        yield from wheels_of(car)


def all_standards(inventory: Inventory | None) -> Iterator[Standard]:
    for car in all_cars(inventory):
        yield from standards_of(car)
