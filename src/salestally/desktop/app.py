"""Main Flet desktop application entry point."""

from __future__ import annotations

import flet as ft

from ..logging_config import setup_logging
from .context import create_app_context
from .views.sales import build_sales_view


def main(page: ft.Page) -> None:
    """Main entry point for the Flet desktop app."""

    ctx = create_app_context()
    logger = setup_logging(ctx.config)
    logger.info("SalesTally desktop application starting", extra={"api_url": ctx.config.API_URL})

    def on_page_close(_):
        logger.info("Application closing, releasing HTTP client")
        ctx.close()

    page.on_close = on_page_close

    ctx.page = page
    page.title = "SalesTally (DEV)" if ctx.config.DEV_MODE else "SalesTally"
    page.theme_mode = ft.ThemeMode.LIGHT
    page.window.width = 1200
    page.window.height = 800

    page.views.clear()
    page.views.append(build_sales_view(ctx, page))
    page.update()


def run() -> None:
    """Console-script entry point."""

    ft.app(target=main)


if __name__ == "__main__":
    run()
