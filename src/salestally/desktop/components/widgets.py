"""Reusable widget components for the desktop app."""

from __future__ import annotations

from typing import Optional

import flet as ft


def build_card(
    title: ft.Text | str,
    content: ft.Control,
    actions: Optional[list[ft.Control]] = None,
) -> ft.Card:
    """Build a titled card; ``title`` may be a live ``ft.Text`` the caller updates."""

    heading = title if isinstance(title, ft.Text) else ft.Text(title)
    heading.size = 20
    heading.weight = ft.FontWeight.W_600

    card_content = ft.Column(
        [
            ft.Container(
                content=heading,
                padding=ft.padding.only(left=16, right=16, top=16, bottom=8),
            ),
            ft.Container(content=content, padding=16),
        ],
        spacing=0,
    )

    if actions:
        card_content.controls.append(
            ft.Container(
                content=ft.Row(actions, alignment=ft.MainAxisAlignment.START),
                padding=ft.padding.only(left=16, right=16, bottom=16),
            )
        )

    return ft.Card(content=card_content, elevation=2)


def build_total_line(label: str, value: str) -> ft.Row:
    """Right-aligned ``label: value`` line used under the entries table."""

    return ft.Row(
        [
            ft.Text(f"{label}: ", size=16),
            ft.Text(value, size=16, color=ft.Colors.RED_400),
        ],
        alignment=ft.MainAxisAlignment.END,
    )


def show_snack(page: ft.Page, message: str) -> None:
    """Display a snack bar message."""

    snack = ft.SnackBar(content=ft.Text(message))
    opener = getattr(page, "open", None)
    if callable(opener):
        opener(snack)
        return
    page.snack_bar = snack
    snack.open = True
    page.update()
