"""Reusable UI components for the desktop app."""

from .widgets import build_card, build_total_line, show_snack

__all__ = ["build_card", "build_total_line", "show_snack"]
