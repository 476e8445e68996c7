"""Service layer exports."""

from . import sales_service

__all__ = ["sales_service"]
