"""Sales entry, form draft, and edit-state value types.

Python code uses snake_case attribute names; the backend speaks camelCase
with a Mongo-style ``_id``. The mapping between the two lives here and
nowhere else.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Optional

FIELD_NAMES: tuple[str, ...] = ("date", "order_code", "customer_name", "sale_amount")

WIRE_NAMES: dict[str, str] = {
    "date": "date",
    "order_code": "orderCode",
    "customer_name": "customerName",
    "sale_amount": "saleAmount",
}

ID_KEYS: tuple[str, ...] = ("_id", "id")

_BY_WIRE_NAME = {wire: name for name, wire in WIRE_NAMES.items()}


def canonical_field(name: str) -> str:
    """Resolve a Python or wire field name to the Python attribute name."""

    if name in FIELD_NAMES:
        return name
    if name in _BY_WIRE_NAME:
        return _BY_WIRE_NAME[name]
    raise ValueError(f"Unknown sales entry field: {name!r}")


def _text(value: Any) -> str:
    """Coerce wire values into the string form kept in state."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _identifier(data: Mapping[str, Any]) -> Optional[str]:
    for key in ID_KEYS:
        value = data.get(key)
        if value not in (None, ""):
            return str(value)
    return None


@dataclass(frozen=True, slots=True)
class SalesEntry:
    """One persisted sales record as mirrored from the backend."""

    id: Optional[str]
    date: str
    order_code: str
    customer_name: str
    sale_amount: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SalesEntry:
        """Build an entry from a backend JSON object; missing fields become ``""``."""

        return cls(
            id=_identifier(data),
            **{name: _text(data.get(wire)) for name, wire in WIRE_NAMES.items()},
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {WIRE_NAMES[name]: getattr(self, name) for name in FIELD_NAMES}
        if self.id is not None:
            payload["_id"] = self.id
        return payload


@dataclass(slots=True)
class SalesDraft:
    """Mutable working copy of an entry while the form is being filled in."""

    date: str = ""
    order_code: str = ""
    customer_name: str = ""
    sale_amount: str = ""
    id: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: SalesEntry) -> SalesDraft:
        """Copy an entry verbatim, identifier included."""

        return cls(
            date=entry.date,
            order_code=entry.order_code,
            customer_name=entry.customer_name,
            sale_amount=entry.sale_amount,
            id=entry.id,
        )

    def get(self, name: str) -> str:
        return getattr(self, canonical_field(name))

    def with_value(self, name: str, value: str) -> SalesDraft:
        """Return a copy with one field replaced."""

        return replace(self, **{canonical_field(name): value})

    def to_payload(self) -> dict[str, Any]:
        """Serialize the draft for a create/update request body."""

        payload: dict[str, Any] = {WIRE_NAMES[name]: getattr(self, name) for name in FIELD_NAMES}
        if self.id is not None:
            payload["_id"] = self.id
        return payload


@dataclass(frozen=True, slots=True)
class EditState:
    """Whether the form is editing an existing entry, and which one."""

    is_editing: bool = False
    edit_id: Optional[str] = None

    @classmethod
    def editing(cls, entry_id: str) -> EditState:
        return cls(is_editing=True, edit_id=entry_id)
