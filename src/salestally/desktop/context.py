"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

import flet as ft

from ..config import BaseConfig
from ..domain.repositories import SalesGateway
from ..infra.api_client import SalesApiClient
from .sales_controller import SalesEntryController


@dataclass
class AppContext:
    """Configuration, backend client, and the screen's controller."""

    config: BaseConfig
    gateway: SalesGateway
    sales_controller: SalesEntryController

    # Page reference (set after initialization)
    page: Optional[ft.Page] = None

    def close(self) -> None:
        """Release the HTTP client if this context created one."""

        closer = getattr(self.gateway, "close", None)
        if callable(closer):
            closer()


def create_app_context(
    config: Optional[BaseConfig] = None,
    *,
    gateway: Optional[SalesGateway] = None,
    today: Callable[[], date] = date.today,
) -> AppContext:
    """Create the context; ``gateway`` defaults to an HTTP client for ``API_URL``."""

    if config is None:
        config = BaseConfig()

    if gateway is None:
        gateway = SalesApiClient(config.API_URL, timeout=config.API_TIMEOUT)

    controller = SalesEntryController(
        gateway,
        today=today,
        commission_percent=config.COMMISSION_PERCENT,
    )
    return AppContext(config=config, gateway=gateway, sales_controller=controller)
