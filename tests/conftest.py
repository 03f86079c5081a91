"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from garage_query.core.loader import load_inventory
from garage_query.models import Bluetooth, Car, Customer, Inventory, Radio, Standard, Wheel

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def make_car(
    price: str | None = None,
    bluetooth_version: int | None = None,
    codecs: list[str | None] | None = None,
    ukw: bool | None = None,
    wheel: Wheel | None = None,
    brand: str | None = "VW",
) -> Car:
    """Build a car; radio and bluetooth are only created when something needs them."""
    bluetooth = None
    if bluetooth_version is not None or codecs is not None:
        standards = None if codecs is None else tuple(Standard(codec=c) for c in codecs)
        bluetooth = Bluetooth(version=bluetooth_version, standards=standards)
    radio = None
    if bluetooth is not None or ukw is not None:
        radio = Radio(ukw=ukw, bluetooth=bluetooth)
    return Car(brand=brand, price=price, wheel=wheel, radio=radio)


def make_inventory(*customers: Customer | None) -> Inventory:
    return Inventory(products=customers)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the JSON fixture documents."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def few_null_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "fewnull.json"


@pytest.fixture
def many_null_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "manynull.json"


@pytest.fixture
def few_null_inventory(few_null_path: Path) -> Inventory | None:
    return load_inventory(few_null_path)


@pytest.fixture
def many_null_inventory(many_null_path: Path) -> Inventory | None:
    return load_inventory(many_null_path)


@pytest.fixture
def empty_inventories() -> list[Inventory | None]:
    """Every way of having no customers at all."""
    return [None, Inventory(), Inventory(products=()), Inventory(products=(None, None))]
