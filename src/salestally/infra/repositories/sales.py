"""SQLModel implementation of the sales entry repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from sqlmodel import select

from ...models.sales_entry import SalesEntryRecord
from ..database import SessionFactory

EDITABLE_FIELDS = ("date", "order_code", "customer_name", "sale_amount")


class SQLModelSalesRepository:
    """SQLModel-based sales entry repository."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def get_by_id(self, entry_id: str) -> Optional[SalesEntryRecord]:
        with self.session_factory() as session:
            record = session.get(SalesEntryRecord, entry_id)
            if record:
                session.expunge(record)
            return record

    def list_all(self) -> list[SalesEntryRecord]:
        """List every entry, oldest first."""
        with self.session_factory() as session:
            statement = select(SalesEntryRecord).order_by(SalesEntryRecord.created_at)  # type: ignore[arg-type]
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, record: SalesEntryRecord) -> SalesEntryRecord:
        with self.session_factory() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
            return record

    def update(self, entry_id: str, changes: Mapping[str, str]) -> Optional[SalesEntryRecord]:
        """Apply field changes to an existing entry; None when the id is unknown."""
        with self.session_factory() as session:
            record = session.get(SalesEntryRecord, entry_id)
            if record is None:
                return None
            for name in EDITABLE_FIELDS:
                if name in changes:
                    setattr(record, name, changes[name])
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
            return record

    def delete(self, entry_id: str) -> bool:
        with self.session_factory() as session:
            record = session.get(SalesEntryRecord, entry_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True


__all__ = ["SQLModelSalesRepository"]
