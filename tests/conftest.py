"""Pytest configuration and shared fixtures for SalesTally tests.

Provides an isolated configuration per test, the Flask reference backend, an
HTTP client wired to that backend in-process, a recording fake gateway for
controller tests, and a stand-in for ``flet.Page``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Optional

import flet as ft
import httpx
import pytest

from salestally import create_app
from salestally.config import TestingConfig
from salestally.desktop.sales_controller import SalesEntryController
from salestally.infra.api_client import SalesApiClient, SalesApiError
from salestally.logging_config import LOGGER_NAME

FIXED_TODAY = date(2024, 6, 20)

_ENV_VARS = (
    "SALESTALLY_API_TIMEOUT",
    "SALESTALLY_COMMISSION_PERCENT",
    "SALESTALLY_CURRENCY_SUFFIX",
    "SALESTALLY_GROUPING_SEPARATOR",
    "SALESTALLY_DEV_MODE",
    "SALESTALLY_SECRET_KEY",
    "SALESTALLY_ENV",
)


# =============================================================================
# Configuration / backend fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers added by setup_logging so log files in tmp dirs get closed."""

    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config(tmp_path, monkeypatch: pytest.MonkeyPatch) -> TestingConfig:
    """Testing config whose data directory and database live under ``tmp_path``."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SALESTALLY_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("SALESTALLY_DATABASE_URL", f"sqlite:///{tmp_path / 'sales.db'}")
    monkeypatch.setenv("SALESTALLY_API_URL", "http://testserver")
    return TestingConfig()


@pytest.fixture
def app(config):
    """Flask reference backend bound to the per-test database."""

    flask_app = create_app(config)
    yield flask_app
    flask_app.extensions["salestally"]["engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def api_client(app):
    """SalesApiClient talking to the Flask app in-process over WSGI."""

    with SalesApiClient("http://testserver", transport=httpx.WSGITransport(app=app)) as sales_api:
        yield sales_api


# =============================================================================
# Controller fixtures
# =============================================================================


class RecordingGateway:
    """In-memory stand-in for the remote collection that records every call."""

    def __init__(self, entries: Optional[list[dict[str, Any]]] = None):
        self.entries: list[dict[str, Any]] = [dict(e) for e in entries or []]
        self.calls: list[tuple[Any, ...]] = []
        self.fail_on: set[str] = set()
        self.list_payload: Any = None
        self.use_list_payload = False
        self.on_call: Optional[Callable[[str], None]] = None
        self._next_id = 1

    def _enter(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if self.on_call is not None:
            self.on_call(operation)
        if operation in self.fail_on:
            raise SalesApiError(f"{operation} failed", operation=operation, status_code=503)

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]

    def _find(self, entry_id: str) -> int:
        for index, entry in enumerate(self.entries):
            if entry.get("_id") == entry_id:
                return index
        raise SalesApiError("not found", operation="lookup", status_code=404)

    def list_entries(self) -> Any:
        self._enter("list")
        if self.use_list_payload:
            return self.list_payload
        return [dict(e) for e in self.entries]

    def create_entry(self, payload: dict[str, Any]) -> dict[str, Any]:
        self._enter("create", dict(payload))
        entry = {**payload, "_id": f"id-{self._next_id}"}
        self._next_id += 1
        self.entries.append(entry)
        return entry

    def update_entry(self, entry_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        self._enter("update", entry_id, dict(payload))
        index = self._find(entry_id)
        self.entries[index] = {**payload, "_id": entry_id}
        return self.entries[index]

    def delete_entry(self, entry_id: str) -> None:
        self._enter("delete", entry_id)
        del self.entries[self._find(entry_id)]


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def controller(gateway) -> SalesEntryController:
    return SalesEntryController(gateway, today=lambda: FIXED_TODAY)


@pytest.fixture
def june_entries() -> list[dict[str, Any]]:
    return [
        {"_id": "a", "date": "2024-06-01", "orderCode": "A1", "customerName": "An", "saleAmount": "100"},
        {"_id": "b", "date": "2024-06-15", "orderCode": "B2", "customerName": "Binh", "saleAmount": "200"},
        {"_id": "c", "date": "2024-05-30", "orderCode": "C3", "customerName": "Cuong", "saleAmount": "500"},
    ]


# =============================================================================
# Flet helpers
# =============================================================================


class DummyPage:
    """Minimal stand-in for flet.Page used by view builders."""

    def __init__(self):
        self.route = "/"
        self.views: list[ft.View] = []
        self.overlay: list[ft.Control] = []
        self.snack_bar = None
        self.updates = 0

    def go(self, route: str) -> None:
        self.route = route

    def update(self) -> None:
        self.updates += 1


@pytest.fixture
def dummy_page() -> DummyPage:
    return DummyPage()
