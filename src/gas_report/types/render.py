from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from gas_report.types.options import ReportOptions


class ReportStyles:
    """
    Styles (rich markup) to use when displaying a gas report.
    Each item in the class points to the part of the report it colors.
    """

    TITLE = "bold green"
    """Banner rows such as the title, "Methods" and "Deployments"."""

    CONFIG = "cyan"
    """Compiler and network summary cells."""

    RATE = "magenta"
    """The token exchange rate."""

    HEADER = "bold"
    """Column titles."""

    CONTRACTS = "bold"
    """Contract names, on light backgrounds."""

    CONTRACTS_DARK = "cyan"
    """Contract names when ``dark_mode`` is set."""

    DEPLOYMENTS = "bold"
    """Deployed contract names."""

    MIN = "cyan"
    MAX = "red"
    COST = "green"

    PLACEHOLDER = "bright_black"
    """The dash shown in place of a value that is missing or not worth showing."""

    GLYPH = "bold magenta"
    """Glyphs in the key block."""


class ColorLevel(IntEnum):
    NONE = 0
    BASIC = 1


_COLOR_SYSTEMS = {
    ColorLevel.NONE: None,
    ColorLevel.BASIC: "standard",
}


@dataclass(frozen=True)
class RenderContext:
    """
    How a single render call may style its output. Passed explicitly so
    reports with different color needs can be rendered side by side.
    """

    color_level: ColorLevel = ColorLevel.BASIC

    @classmethod
    def from_options(cls, options: ReportOptions) -> "RenderContext":
        return cls(ColorLevel.BASIC if options.use_colors else ColorLevel.NONE)

    @property
    def use_colors(self) -> bool:
        return self.color_level > ColorLevel.NONE

    @property
    def color_system(self) -> Optional[str]:
        return _COLOR_SYSTEMS[self.color_level]
