"""State holder mediating between the sales form/table and the remote collection.

The controller owns the form draft, the validation errors, and the edit state.
The entry list is a mirror of the backend that is only ever replaced
wholesale by :meth:`SalesEntryController.fetch_all`.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional

from ..domain.repositories import SalesGateway
from ..domain.sales import EditState, SalesDraft, SalesEntry, canonical_field
from ..infra.api_client import SalesApiError
from ..logging_config import get_logger
from ..services import sales_service

logger = get_logger(__name__)

BUSY_MESSAGE = "Another save or delete is still in progress"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a controller action, handed back to the view."""

    ok: bool
    errors: dict[str, str] = field(default_factory=dict)
    message: Optional[str] = None

    @classmethod
    def success(cls) -> OperationResult:
        return cls(ok=True)

    @classmethod
    def invalid(cls, errors: Mapping[str, str]) -> OperationResult:
        return cls(ok=False, errors=dict(errors))

    @classmethod
    def failed(cls, message: str) -> OperationResult:
        return cls(ok=False, message=message)

    @property
    def is_busy(self) -> bool:
        return self.message == BUSY_MESSAGE


class SalesEntryController:
    """View-model for the sales entry screen."""

    def __init__(
        self,
        gateway: SalesGateway,
        *,
        today: Callable[[], date] = date.today,
        commission_percent: float = sales_service.DEFAULT_COMMISSION_PERCENT,
    ):
        self._gateway = gateway
        self._today = today
        self.commission_percent = commission_percent
        self._draft = sales_service.default_draft(today())
        self._entries: list[SalesEntry] = []
        self._by_id: dict[str, SalesEntry] = {}
        self._errors: dict[str, str] = {}
        self._edit_state = EditState()
        self._mounted = False
        # Held for the duration of a create/update/delete call.
        self._in_flight = threading.Lock()

    @property
    def draft(self) -> SalesDraft:
        return self._draft

    @property
    def entries(self) -> tuple[SalesEntry, ...]:
        return tuple(self._entries)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def edit_state(self) -> EditState:
        return self._edit_state

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def get_entry(self, entry_id: str) -> Optional[SalesEntry]:
        return self._by_id.get(str(entry_id))

    def mount(self) -> Optional[OperationResult]:
        """Load the collection the first time the screen is shown."""

        if self._mounted:
            return None
        self._mounted = True
        return self.fetch_all()

    def on_field_change(self, name: str, raw_value: Any) -> None:
        """Store user input for one field and drop that field's error."""

        field_name = canonical_field(name)
        if field_name == "sale_amount":
            value = sales_service.strip_non_digits(raw_value)
        elif raw_value is None:
            value = ""
        else:
            value = raw_value if isinstance(raw_value, str) else str(raw_value)
        self._draft = self._draft.with_value(field_name, value)
        self._errors.pop(field_name, None)

    def validate(self) -> dict[str, str]:
        self._errors = sales_service.validate_draft(self._draft)
        return dict(self._errors)

    def submit(self) -> OperationResult:
        """Validate, then create or update the entry and reload the collection."""

        errors = self.validate()
        if errors:
            return OperationResult.invalid(errors)
        if not self._in_flight.acquire(blocking=False):
            logger.info("Submit ignored while another request is in flight")
            return OperationResult.failed(BUSY_MESSAGE)
        try:
            edit_state = self._edit_state
            payload = self._draft.to_payload()
            try:
                if edit_state.is_editing and edit_state.edit_id is not None:
                    self._gateway.update_entry(edit_state.edit_id, payload)
                else:
                    payload.pop("_id", None)
                    self._gateway.create_entry(payload)
            except SalesApiError as exc:
                logger.error(
                    "Error saving entry",
                    exc_info=True,
                    extra={"operation": exc.operation, "entry_id": edit_state.edit_id},
                )
                return OperationResult.failed(str(exc))

            if edit_state.is_editing:
                self._edit_state = EditState()
            refreshed = self.fetch_all()
            if not refreshed.ok:
                return refreshed
            self._draft = sales_service.default_draft(self._today())
            return OperationResult.success()
        finally:
            self._in_flight.release()

    def fetch_all(self) -> OperationResult:
        """Replace the cached collection with the backend's current list."""

        try:
            payload = self._gateway.list_entries()
        except SalesApiError as exc:
            logger.error("Error fetching sales entries", exc_info=True, extra={"operation": exc.operation})
            return OperationResult.failed(str(exc))

        if isinstance(payload, (list, tuple)):
            entries = [SalesEntry.from_mapping(item) for item in payload if isinstance(item, Mapping)]
            if len(entries) != len(payload):
                logger.warning(
                    "Skipped non-object items in sales list",
                    extra={"skipped": len(payload) - len(entries)},
                )
        else:
            logger.warning(
                "Sales list payload is not a list; clearing entries",
                extra={"payload_type": type(payload).__name__},
            )
            entries = []
        self._replace_entries(entries)
        return OperationResult.success()

    def delete(self, entry_id: str) -> OperationResult:
        """Delete an entry remotely, then reload the collection."""

        if not self._in_flight.acquire(blocking=False):
            logger.info("Delete ignored while another request is in flight")
            return OperationResult.failed(BUSY_MESSAGE)
        try:
            try:
                self._gateway.delete_entry(entry_id)
            except SalesApiError as exc:
                logger.error(
                    "Error deleting entry",
                    exc_info=True,
                    extra={"operation": exc.operation, "entry_id": entry_id},
                )
                return OperationResult.failed(str(exc))
            return self.fetch_all()
        finally:
            self._in_flight.release()

    def begin_edit(self, entry_id: str) -> bool:
        """Load an entry into the form; unknown ids leave all state untouched."""

        entry = self.get_entry(entry_id)
        if entry is None or entry.id is None:
            logger.debug("Edit requested for unknown entry", extra={"entry_id": entry_id})
            return False
        self._draft = SalesDraft.from_entry(entry)
        self._edit_state = EditState.editing(entry.id)
        return True

    def cancel_edit(self) -> None:
        self._edit_state = EditState()
        self._draft = sales_service.default_draft(self._today())
        self._errors = {}

    def monthly_total(self, reference: Optional[date] = None) -> float:
        return sales_service.monthly_total(self._entries, reference or self._today())

    def commission(self, reference: Optional[date] = None) -> float:
        return sales_service.commission(self.monthly_total(reference), self.commission_percent)

    def _replace_entries(self, entries: list[SalesEntry]) -> None:
        self._entries = entries
        self._by_id = {entry.id: entry for entry in entries if entry.id is not None}
