"""Repository and gateway protocols."""

from .sales import SalesEntryRepository, SalesGateway

__all__ = ["SalesEntryRepository", "SalesGateway"]
