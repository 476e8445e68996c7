"""Sales collection protocols."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Protocol

from ...models.sales_entry import SalesEntryRecord


class SalesGateway(Protocol):
    """Remote sales collection as seen by the desktop controller."""

    def list_entries(self) -> Any:
        """Return the raw list payload; callers check it is a sequence."""
        ...

    def create_entry(self, payload: dict[str, Any]) -> Any:
        """Create an entry from a draft payload without an identifier."""
        ...

    def update_entry(self, entry_id: str, payload: dict[str, Any]) -> Any:
        """Replace the entry identified by ``entry_id``."""
        ...

    def delete_entry(self, entry_id: str) -> None:
        """Delete the entry identified by ``entry_id``."""
        ...


class SalesEntryRepository(Protocol):
    """Persistence for the reference backend."""

    def get_by_id(self, entry_id: str) -> Optional[SalesEntryRecord]:
        ...

    def list_all(self) -> list[SalesEntryRecord]:
        ...

    def create(self, record: SalesEntryRecord) -> SalesEntryRecord:
        ...

    def update(self, entry_id: str, changes: Mapping[str, str]) -> Optional[SalesEntryRecord]:
        """Apply field changes; None when the id is unknown."""
        ...

    def delete(self, entry_id: str) -> bool:
        """Delete by id; returns False when nothing matched."""
        ...
