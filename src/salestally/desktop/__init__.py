"""Flet desktop client for the sales entry screen."""
