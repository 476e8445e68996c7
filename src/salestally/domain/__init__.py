"""Domain types for sales entries."""

from .sales import FIELD_NAMES, EditState, SalesDraft, SalesEntry, canonical_field

__all__ = ["FIELD_NAMES", "EditState", "SalesDraft", "SalesEntry", "canonical_field"]
