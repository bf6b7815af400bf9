"""Product records and the small payload types exchanged over the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

# JSON key, attribute name, expected type
_PRODUCT_FIELDS: tuple[tuple[str, str, type], ...] = (
    ("id", "id", int),
    ("productCode", "product_code", str),
    ("name", "name", str),
    ("price", "price", int),
    ("status", "status", str),
    ("inventory", "inventory", str),
)
_EXACT = {key: (attr, kind) for key, attr, kind in _PRODUCT_FIELDS}
_FOLDED = {key.lower(): spec for key, spec in _EXACT.items()}


class ProductFormatError(ValueError):
    """Raised when a JSON document does not describe a product."""


def _coerce(key: str, value: Any, kind: type) -> Any:
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ProductFormatError(f"field {key!r} must be an integer")
        if not _INT_MIN <= value <= _INT_MAX:
            raise ProductFormatError(f"field {key!r} is out of range")
        return value
    if not isinstance(value, str):
        raise ProductFormatError(f"field {key!r} must be a string")
    return value


@dataclass
class Product:
    """A product as stored in the products table."""

    id: int = 0
    product_code: str = ""
    name: str = ""
    price: int = 0
    status: str = ""
    inventory: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Product":
        """Build a product from decoded JSON.

        Keys match case-insensitively, unknown keys are ignored and null
        values leave the field at its zero value.
        """
        if not isinstance(data, Mapping):
            raise ProductFormatError("product must be a JSON object")
        values: dict[str, Any] = {}
        for key, value in data.items():
            spec = _EXACT.get(key) or _FOLDED.get(str(key).lower())
            if spec is None or value is None:
                continue
            attr, kind = spec
            values[attr] = _coerce(key, value, kind)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "productCode": self.product_code,
            "name": self.name,
            "price": self.price,
            "status": self.status,
            "inventory": self.inventory,
        }


@dataclass(frozen=True)
class CreateResponse:
    """What the API returns after a product has been created."""

    id: int
    product_code: str
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "productCode": self.product_code, "name": self.name}


@dataclass(frozen=True)
class ErrorResponse:
    """An error code with its message."""

    code: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}