"""Record tree of a dealership inventory.

Every field is optional: a document may omit any object or array at any
level, and array elements may be ``null``. Absent values stay ``None``; no
field carries a domain default. Collections are tuples so a loaded tree
cannot be mutated in place.
"""

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Standard(BaseModel):
    model_config = _RECORD_CONFIG

    codec: str | None = None
    partial: bool | None = None


class Bluetooth(BaseModel):
    model_config = _RECORD_CONFIG

    version: int | None = None
    standards: tuple[Standard | None, ...] | None = None


class Radio(BaseModel):
    model_config = _RECORD_CONFIG

    ukw: bool | None = None
    bluetooth: Bluetooth | None = None


class Wheel(BaseModel):
    model_config = _RECORD_CONFIG

    brand: str | None = None
    amount: int | None = None


class Car(BaseModel):
    model_config = _RECORD_CONFIG

    brand: str | None = None
    price: str | None = None
    wheel: Wheel | None = Field(default=None, alias="wheels")
    radio: Radio | None = None


class Customer(BaseModel):
    model_config = _RECORD_CONFIG

    id: str | None = None
    name: str | None = Field(default=None, alias="customer")
    email: str | None = None
    cars: tuple[Car | None, ...] | None = None


class Inventory(BaseModel):
    model_config = _RECORD_CONFIG

    products: tuple[Customer | None, ...] | None = None
