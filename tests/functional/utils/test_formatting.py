import pytest

from gas_report.utils import (
    commify,
    format_cost,
    format_gwei,
    format_percent,
    indent_text,
    is_below_precision,
    smallest_precision_value,
    start_case,
    styled,
)


@pytest.mark.parametrize(
    "value,expected",
    (
        (0, "0"),
        (999, "999"),
        (21000, "21,000"),
        (30_000_000, "30,000,000"),
        (1234567.0, "1,234,567"),
        (1234.5, "1,234.5"),
    ),
)
def test_commify(value, expected):
    assert commify(value) == expected


@pytest.mark.parametrize("precision,expected", ((0, 1), (2, 0.01), (3, 0.001)))
def test_smallest_precision_value(precision, expected):
    assert smallest_precision_value(precision) == pytest.approx(expected)


def test_is_below_precision():
    assert is_below_precision(0.009, 2)
    assert is_below_precision(0, 2)
    assert not is_below_precision(0.01, 2)
    assert not is_below_precision(0.009, 3)


def test_format_cost():
    assert format_cost(1.5, 2) == "1.50"
    assert format_cost(1234.5, 2) == "1,234.50"
    assert format_cost(0.004, 3) == "0.004"


def test_format_percent():
    assert format_percent(12.5) == "12.5 %"
    assert format_percent(3.0) == "3.0 %"
    assert format_percent(0.0) == "0.0 %"
    assert format_percent(1234.56) == "1,234.6 %"


@pytest.mark.parametrize(
    "value,expected", ((30, "30"), (1.5, "1.5"), (0.00123, "0.00123"), (0.000001, "0"))
)
def test_format_gwei(value, expected):
    assert format_gwei(value) == expected


def test_indent_text():
    assert indent_text("transfer") == "  transfer"


@pytest.mark.parametrize(
    "name,expected",
    (
        ("optimism", "Optimism"),
        ("arbitrum_nova", "Arbitrum Nova"),
        ("base-sepolia", "Base Sepolia"),
    ),
)
def test_start_case(name, expected):
    assert start_case(name) == expected


def test_styled():
    assert styled("x", "bold") == "[bold]x[/]"
    assert styled("", "bold") == ""
