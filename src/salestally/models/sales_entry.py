"""SQLModel definition for stored sales entries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar
from uuid import uuid4

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SalesEntryRecord(SQLModel, table=True):
    """A sales entry as persisted by the reference backend."""

    __tablename__: ClassVar[str] = "sales_entry"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=32)
    date: str = Field(nullable=False, index=True, max_length=32)
    order_code: str = Field(nullable=False, max_length=128)
    customer_name: str = Field(nullable=False, max_length=255)
    sale_amount: str = Field(nullable=False, max_length=32, description="Digit-only amount")
    # Keeps GET /sales in insertion order.
    created_at: datetime = Field(default_factory=_utcnow, nullable=False, index=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the wire names the desktop client expects."""

        return {
            "_id": self.id,
            "date": self.date,
            "orderCode": self.order_code,
            "customerName": self.customer_name,
            "saleAmount": self.sale_amount,
        }
