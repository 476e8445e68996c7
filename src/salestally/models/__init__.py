"""SQLModel table exports."""

from .sales_entry import SalesEntryRecord

__all__ = ["SalesEntryRecord"]
