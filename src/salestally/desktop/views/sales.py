"""Sales revenue screen: entry form, entries table, and monthly totals.

Everything shown is derived from the controller on each render; the view
keeps no state of its own beyond references to the flet controls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

import flet as ft

from ...domain.sales import EditState, SalesDraft, SalesEntry
from ...logging_config import get_logger
from ...services.sales_service import format_amount
from ..components import build_card, build_total_line, show_snack
from ..sales_controller import OperationResult, SalesEntryController

if TYPE_CHECKING:
    from ..context import AppContext

logger = get_logger(__name__)

# (field name, label, hint)
FORM_FIELDS: tuple[tuple[str, str, Optional[str]], ...] = (
    ("date", "Date", "YYYY-MM-DD"),
    ("order_code", "Order Code", None),
    ("customer_name", "Customer Name", None),
    ("sale_amount", "Sale Amount", None),
)

TABLE_COLUMNS = ("Date", "Order Code", "Customer Name", "Sale Amount", "Actions")
EMPTY_TABLE_MESSAGE = "No sales entries found"


def form_title(edit_state: EditState) -> str:
    return "Edit Sales Entry" if edit_state.is_editing else "Add New Sales Entry"


def submit_label(edit_state: EditState) -> str:
    return "Update Entry" if edit_state.is_editing else "Add Entry"


def field_display_value(draft: SalesDraft, name: str, separator: str) -> str:
    """Value shown in a form field; the amount is shown grouped."""

    if name == "sale_amount":
        return format_amount(draft.sale_amount, separator)
    return draft.get(name)


def entry_cells(entry: SalesEntry, separator: str, suffix: str) -> tuple[str, str, str, str]:
    return (
        entry.date,
        entry.order_code,
        entry.customer_name,
        f"{format_amount(entry.sale_amount, separator)} {suffix}",
    )


def total_lines(
    controller: SalesEntryController, separator: str, suffix: str
) -> list[tuple[str, str]]:
    """Monthly total and commission lines; none when there are no entries."""

    if not controller.entries:
        return []
    total = controller.monthly_total()
    return [
        ("Total price sold this month", f"{format_amount(total, separator)} {suffix}"),
        (
            "Total price commission this month",
            f"{format_amount(controller.commission(), separator)} {suffix}",
        ),
    ]


def build_sales_view(ctx: AppContext, page: ft.Page) -> ft.View:
    """Build the sales screen and load the collection once."""

    controller = ctx.sales_controller
    separator = ctx.config.GROUPING_SEPARATOR
    suffix = ctx.config.CURRENCY_SUFFIX

    title_text = ft.Text()
    inputs: dict[str, ft.TextField] = {}
    submit_button = ft.FilledButton(icon=ft.Icons.ADD)
    cancel_button = ft.TextButton("Cancel")
    table = ft.DataTable(
        columns=[ft.DataColumn(ft.Text(name)) for name in TABLE_COLUMNS],
        rows=[],
    )
    totals = ft.Column(spacing=4, horizontal_alignment=ft.CrossAxisAlignment.END)

    def _row_for(entry: SalesEntry) -> ft.DataRow:
        cells = [ft.DataCell(ft.Text(value)) for value in entry_cells(entry, separator, suffix)]
        cells.append(
            ft.DataCell(
                ft.Row(
                    [
                        ft.IconButton(
                            icon=ft.Icons.EDIT,
                            tooltip="Edit",
                            icon_color=ft.Colors.BLUE_600,
                            on_click=lambda _, entry_id=entry.id: _edit(entry_id),
                        ),
                        ft.IconButton(
                            icon=ft.Icons.DELETE_OUTLINE,
                            tooltip="Delete",
                            icon_color=ft.Colors.RED_600,
                            on_click=lambda _, entry_id=entry.id: _delete(entry_id),
                        ),
                    ],
                    spacing=4,
                )
            )
        )
        return ft.DataRow(cells=cells)

    def _render() -> None:
        edit_state = controller.edit_state
        errors = controller.errors
        title_text.value = form_title(edit_state)
        for name, field in inputs.items():
            field.value = field_display_value(controller.draft, name, separator)
            field.error_text = errors.get(name) or None
        submit_button.text = submit_label(edit_state)
        submit_button.disabled = controller.busy
        cancel_button.visible = edit_state.is_editing

        if controller.entries:
            table.rows = [_row_for(entry) for entry in controller.entries]
        else:
            table.rows = [
                ft.DataRow(
                    cells=[ft.DataCell(ft.Text(EMPTY_TABLE_MESSAGE))]
                    + [ft.DataCell(ft.Text("")) for _ in TABLE_COLUMNS[1:]]
                )
            ]
        totals.controls = [
            build_total_line(label, value) for label, value in total_lines(controller, separator, suffix)
        ]
        page.update()

    def _report(result: Optional[OperationResult]) -> None:
        if result is not None and not result.ok and result.message:
            show_snack(page, result.message)

    def _on_change(name: str) -> Callable[[ft.ControlEvent], None]:
        def handler(e: ft.ControlEvent) -> None:
            controller.on_field_change(name, e.control.value)
            _render()

        return handler

    def _hold_submit() -> None:
        # Shown before the blocking call; _render re-enables it afterwards.
        submit_button.disabled = True
        page.update()

    def _submit(_=None) -> None:
        _hold_submit()
        result = controller.submit()
        _report(result)
        _render()

    def _cancel(_=None) -> None:
        controller.cancel_edit()
        _render()

    def _edit(entry_id: Optional[str]) -> None:
        if entry_id is not None and controller.begin_edit(entry_id):
            _render()

    def _delete(entry_id: Optional[str]) -> None:
        if entry_id is None:
            return
        _hold_submit()
        result = controller.delete(entry_id)
        _report(result)
        _render()

    for name, label, hint in FORM_FIELDS:
        inputs[name] = ft.TextField(
            label=label,
            hint_text=hint,
            expand=True,
            keyboard_type=ft.KeyboardType.NUMBER if name == "sale_amount" else None,
            on_change=_on_change(name),
        )
    submit_button.on_click = _submit
    cancel_button.on_click = _cancel

    form = ft.Column(
        [
            ft.Row([inputs["date"], inputs["order_code"]], spacing=16),
            ft.Row([inputs["customer_name"], inputs["sale_amount"]], spacing=16),
        ],
        spacing=16,
    )

    _report(controller.mount())
    _render()

    return ft.View(
        route="/",
        scroll=ft.ScrollMode.AUTO,
        padding=24,
        controls=[
            ft.Text("Sales Revenue Management", size=28, weight=ft.FontWeight.BOLD),
            build_card(title_text, form, actions=[submit_button, cancel_button]),
            build_card(
                "Sales Entries",
                ft.Column([ft.Row([table], scroll=ft.ScrollMode.AUTO), totals], spacing=16),
            ),
        ],
    )
