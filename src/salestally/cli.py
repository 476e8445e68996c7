"""Command-line entry points for SalesTally."""

from __future__ import annotations

from datetime import date
from urllib.parse import urlparse

import click
from flask import current_app

from .config import BaseConfig, DevConfig
from .domain.sales import SalesEntry
from .logging_config import setup_logging
from .services import sales_service

_DEMO_CUSTOMERS = ("Nguyen Van An", "Tran Thi Binh", "Le Hoang Cuong", "Pham Minh Duc")


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("salestally-seed")
    @click.option("--count", default=5, show_default=True, type=click.IntRange(min=1))
    def salestally_seed(count: int) -> None:
        """Insert demo entries dated this month."""

        from .extensions import get_sales_repository
        from .models.sales_entry import SalesEntryRecord

        repo = get_sales_repository()
        today = date.today()
        for index in range(count):
            repo.create(
                SalesEntryRecord(
                    date=today.replace(day=min(index + 1, 28)).isoformat(),
                    order_code=f"DEMO-{index + 1:03d}",
                    customer_name=_DEMO_CUSTOMERS[index % len(_DEMO_CUSTOMERS)],
                    sale_amount=str((index + 1) * 250_000),
                )
            )
        click.echo(f"Seeded {count} sales entries.")

    @app.cli.command("salestally-summary")
    def salestally_summary() -> None:
        """Print this month's sales total and commission."""

        from .extensions import get_sales_repository

        config: BaseConfig = current_app.config["SALESTALLY_CONFIG"]
        entries = [SalesEntry.from_mapping(r.to_payload()) for r in get_sales_repository().list_all()]
        total = sales_service.monthly_total(entries, date.today())
        owed = sales_service.commission(total, config.COMMISSION_PERCENT)
        sep = config.GROUPING_SEPARATOR
        suffix = config.CURRENCY_SUFFIX
        click.echo(f"Entries stored: {len(entries)}")
        click.echo(f"Total price sold this month: {sales_service.format_amount(total, sep) or '0'} {suffix}")
        click.echo(f"Total price commission this month: {sales_service.format_amount(owed, sep) or '0'} {suffix}")


@click.command("salestally-backend")
@click.option("--host", default=None, help="Bind address (defaults to the host in SALESTALLY_API_URL).")
@click.option("--port", default=None, type=int, help="Port (defaults to the port in SALESTALLY_API_URL).")
def serve_backend(host: str | None, port: int | None) -> None:
    """Serve the reference ``/sales`` backend with Flask's development server."""

    from . import create_app

    config = DevConfig()
    setup_logging(config)
    parsed = urlparse(config.API_URL)
    app = create_app(config)
    app.run(
        host=host or parsed.hostname or "127.0.0.1",
        port=port or parsed.port or 5000,
        debug=config.DEBUG,
        use_reloader=False,
    )
