"""Database wiring for the Flask reference backend."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .domain.repositories import SalesEntryRepository
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelSalesRepository

EXTENSION_KEY = "salestally"


def init_db(app: Flask) -> None:
    """Create the engine, schema, and repository for this app instance."""

    config: BaseConfig = app.config["SALESTALLY_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    sales_repo: SalesEntryRepository = SQLModelSalesRepository(session_factory)
    app.extensions[EXTENSION_KEY] = {
        "engine": engine,
        "session_factory": session_factory,
        "sales_repo": sales_repo,
    }


def get_sales_repository() -> SalesEntryRepository:
    """Return the repository bound to the active app."""

    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - create_app always calls init_db
        raise RuntimeError("Database not initialized for this app")
    return state["sales_repo"]
