"""Unit tests for the SQLModel sales entry repository."""

from __future__ import annotations

import pytest

from salestally.infra.database import bootstrap_database
from salestally.infra.repositories import SQLModelSalesRepository
from salestally.models import SalesEntryRecord


@pytest.fixture
def repo(config):
    """Repository over a fresh SQLite file for each test."""
    engine, session_factory = bootstrap_database(config)
    yield SQLModelSalesRepository(session_factory)
    engine.dispose()


def _record(order_code: str = "A1", amount: str = "100") -> SalesEntryRecord:
    return SalesEntryRecord(
        date="2024-06-01",
        order_code=order_code,
        customer_name="An",
        sale_amount=amount,
    )


def test_create_assigns_id(repo):
    created = repo.create(_record())

    assert created.id
    assert repo.get_by_id(created.id).order_code == "A1"


def test_list_all_returns_detached_rows_in_insert_order(repo):
    first = repo.create(_record("A1"))
    second = repo.create(_record("B2"))

    rows = repo.list_all()

    assert [row.id for row in rows] == [first.id, second.id]
    # Detached rows stay readable outside the session scope.
    assert rows[1].to_payload()["orderCode"] == "B2"


def test_update_changes_only_editable_fields(repo):
    created = repo.create(_record())

    updated = repo.update(created.id, {"sale_amount": "2000", "id": "hijack"})

    assert updated.id == created.id
    assert updated.sale_amount == "2000"
    assert repo.get_by_id(created.id).sale_amount == "2000"
    assert repo.get_by_id("hijack") is None


def test_update_unknown_id_returns_none(repo):
    assert repo.update("missing", {"sale_amount": "1"}) is None


def test_delete(repo):
    created = repo.create(_record())

    assert repo.delete(created.id) is True
    assert repo.delete(created.id) is False
    assert repo.list_all() == []


def test_get_by_id_missing(repo):
    assert repo.get_by_id("nope") is None
