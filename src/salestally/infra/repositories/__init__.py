"""Concrete repository implementations using SQLModel."""

from .sales import SQLModelSalesRepository

__all__ = ["SQLModelSalesRepository"]
