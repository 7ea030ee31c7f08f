import re
from typing import Union

from gas_report.constants import DEFAULT_GAS_PRICE_PRECISION, PLACEHOLDER

Number = Union[int, float]

_WORD_SEPARATORS = re.compile(r"[\s_\-]+")


def commify(value: Number) -> str:
    """
    Format a number with thousands separators, e.g. ``21000`` -> ``"21,000"``.
    Whole floats drop their fractional part.
    """
    if isinstance(value, float) and value.is_integer():
        value = int(value)

    return f"{value:,}"


def smallest_precision_value(precision: int) -> float:
    """
    The smallest non-zero amount that can be shown with ``precision`` decimals.
    """
    return 10**-precision


def is_below_precision(value: Number, precision: int) -> bool:
    return value < smallest_precision_value(precision)


def format_cost(cost: Number, precision: int) -> str:
    return f"{cost:,.{precision}f}"


def format_percent(percent: Number) -> str:
    return f"{percent:,.1f} %"


def format_gwei(value: Number, precision: int = DEFAULT_GAS_PRICE_PRECISION) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    return text or PLACEHOLDER


def indent_text(text: str) -> str:
    return f"  {text}"


def start_case(name: str) -> str:
    """``"arbitrum_nova"`` -> ``"Arbitrum Nova"``"""
    return " ".join(w.capitalize() for w in _WORD_SEPARATORS.split(name) if w)


def styled(text: str, style: str) -> str:
    """
    Wrap already-escaped text in rich markup for ``style``.
    """
    if not text:
        return text

    return f"[{style}]{text}[/]"
