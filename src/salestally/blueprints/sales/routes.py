"""JSON routes for the sales collection: list, create, update, delete."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import jsonify, request

from ...domain.sales import FIELD_NAMES, SalesDraft, SalesEntry
from ...extensions import get_sales_repository
from ...logging_config import get_logger
from ...models.sales_entry import SalesEntryRecord
from ...services import sales_service
from . import bp

logger = get_logger(__name__)


def _read_entry_body(body: Any) -> tuple[dict[str, str], dict[str, str]]:
    """Normalize a request body into model fields plus validation errors."""

    if not isinstance(body, Mapping):
        return {}, {"body": "Expected a JSON object"}

    entry = SalesEntry.from_mapping(body)
    fields = {name: getattr(entry, name).strip() for name in FIELD_NAMES}
    errors = sales_service.validate_draft(SalesDraft(**fields))
    if "sale_amount" not in errors and not sales_service.is_valid_amount(fields["sale_amount"]):
        errors["sale_amount"] = sales_service.AMOUNT_FORMAT_MESSAGE
    return fields, errors


def _not_found(entry_id: str):
    return jsonify({"error": f"Sales entry {entry_id} not found"}), 404


@bp.get("")
def list_entries():
    """Return every stored entry in insertion order."""

    records = get_sales_repository().list_all()
    return jsonify([record.to_payload() for record in records])


@bp.post("")
def create_entry():
    fields, errors = _read_entry_body(request.get_json(silent=True))
    if errors:
        return jsonify({"errors": errors}), 400

    record = get_sales_repository().create(SalesEntryRecord(**fields))
    logger.info("Sales entry created", extra={"entry_id": record.id})
    return jsonify(record.to_payload()), 201


@bp.put("/<entry_id>")
def update_entry(entry_id: str):
    """Replace an entry's fields; any id in the body is ignored."""

    repo = get_sales_repository()
    if repo.get_by_id(entry_id) is None:
        return _not_found(entry_id)

    fields, errors = _read_entry_body(request.get_json(silent=True))
    if errors:
        return jsonify({"errors": errors}), 400

    record = repo.update(entry_id, fields)
    if record is None:
        return _not_found(entry_id)
    logger.info("Sales entry updated", extra={"entry_id": entry_id})
    return jsonify(record.to_payload())


@bp.delete("/<entry_id>")
def delete_entry(entry_id: str):
    if not get_sales_repository().delete(entry_id):
        return _not_found(entry_id)
    logger.info("Sales entry deleted", extra={"entry_id": entry_id})
    return jsonify({"deleted": entry_id})
