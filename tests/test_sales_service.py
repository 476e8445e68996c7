"""Tests for sales validation, amount formatting, and monthly rollups."""

from __future__ import annotations

from datetime import date

import pytest

from salestally.domain.sales import SalesDraft, SalesEntry
from salestally.services import sales_service


def _entry(day: str, amount: str) -> SalesEntry:
    return SalesEntry(id=None, date=day, order_code="X", customer_name="Y", sale_amount=amount)


def test_validate_reports_every_missing_field():
    errors = sales_service.validate_draft(SalesDraft())

    assert errors == {
        "date": "Date is required",
        "customer_name": "Customer name is required",
        "sale_amount": "Sale amount is required",
        "order_code": "Order code is required",
    }


def test_validate_only_flags_empty_fields():
    draft = SalesDraft(date="2024-06-01", order_code="A1", customer_name="", sale_amount="10")

    assert sales_service.validate_draft(draft) == {"customer_name": "Customer name is required"}


def test_validate_complete_draft_is_clean():
    draft = SalesDraft(date="2024-06-01", order_code="A1", customer_name="An", sale_amount="10")

    assert sales_service.validate_draft(draft) == {}


def test_default_draft_is_dated_today():
    draft = sales_service.default_draft(date(2024, 6, 20))

    assert draft.date == "2024-06-20"
    assert draft.order_code == draft.customer_name == draft.sale_amount == ""
    assert draft.id is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("12a3b", "123"),
        ("1.234.567", "1234567"),
        ("abc", ""),
        ("", ""),
        (None, ""),
        (" 42 ", "42"),
        ("٣٤", ""),
    ],
)
def test_strip_non_digits(raw, expected):
    assert sales_service.strip_non_digits(raw) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1234567", "1.234.567"),
        ("1000", "1.000"),
        ("999", "999"),
        (2500000, "2.500.000"),
        ("", ""),
        (None, ""),
        (0, ""),
        ("not a number", ""),
        ("1" * 30, ".".join(["111"] * 10)),
        (1e30, "1" + ".000" * 10),
    ],
)
def test_format_amount(value, expected):
    assert sales_service.format_amount(value) == expected


def test_format_amount_rounds_half_up_and_accepts_separator():
    assert sales_service.format_amount(2.5) == "3"
    assert sales_service.format_amount(1234.4, separator=",") == "1,234"


def test_format_amount_output_strips_back_to_digits():
    formatted = sales_service.format_amount("9876543210")

    assert sales_service.strip_non_digits(formatted) == "9876543210"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("120", True), (0, True), (15, True), ("", False), ("1.5", False), (-3, False), (True, False), (None, False)],
)
def test_is_valid_amount(value, expected):
    assert sales_service.is_valid_amount(value) is expected


def test_parse_amount_treats_invalid_as_zero():
    assert sales_service.parse_amount("250") == 250.0
    assert sales_service.parse_amount("") == 0.0
    assert sales_service.parse_amount("abc") == 0.0
    assert sales_service.parse_amount(None) == 0.0


def test_parse_entry_date_accepts_dates_and_datetimes():
    assert sales_service.parse_entry_date("2024-06-15") == date(2024, 6, 15)
    assert sales_service.parse_entry_date("2024-06-15T23:10:00.000Z") == date(2024, 6, 15)
    assert sales_service.parse_entry_date("June 15") is None
    assert sales_service.parse_entry_date("") is None


def test_monthly_total_sums_only_reference_month():
    entries = [
        _entry("2024-06-01", "100"),
        _entry("2024-06-15", "200"),
        _entry("2024-05-30", "500"),
    ]

    assert sales_service.monthly_total(entries, date(2024, 6, 20)) == 300


def test_monthly_total_matches_year_as_well_as_month():
    entries = [_entry("2023-06-10", "700"), _entry("2024-06-10", "50")]

    assert sales_service.monthly_total(entries, date(2024, 6, 1)) == 50


def test_monthly_total_skips_bad_dates_and_counts_bad_amounts_as_zero():
    entries = [
        _entry("garbage", "1000"),
        _entry("2024-06-02", "oops"),
        _entry("2024-06-03", "40"),
    ]

    assert sales_service.monthly_total(entries, date(2024, 6, 30)) == 40


def test_monthly_total_of_nothing_is_zero():
    assert sales_service.monthly_total([], date(2024, 6, 1)) == 0


def test_commission_defaults_to_one_percent():
    assert sales_service.commission(300) == 3
    assert sales_service.commission(0) == 0


def test_commission_uses_configured_percent():
    assert sales_service.commission(1000, percent=2.5) == 25
