from dataclasses import dataclass, replace
from enum import Enum
from io import StringIO
from typing import Iterable, List, Optional, Sequence, Tuple

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from gas_report.exceptions import TableLayoutError
from gas_report.types.render import RenderContext

_DEFAULT_PADDING = 2


class Align(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Cell:
    """
    A single table cell. ``content`` is rich markup; placeholders and glyphs
    are decided before the cell is made.
    """

    content: str = ""
    col_span: int = 1
    align: Align = Align.LEFT

    @property
    def plain(self) -> str:
        return Text.from_markup(self.content, emoji=False).plain

    @property
    def width(self) -> int:
        return cell_len(self.plain)


Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class BorderChars:
    top: str = "·"
    top_mid: str = "|"
    top_left: str = "·"
    top_right: str = "·"
    bottom: str = "·"
    bottom_mid: str = "|"
    bottom_left: str = "·"
    bottom_right: str = "·"
    left: str = "|"
    left_mid: str = "·"
    mid: str = "·"
    mid_mid: str = "|"
    right: str = "│"
    right_mid: str = "·"
    middle: str = "·"

    def indented(self, pad: str) -> "BorderChars":
        """
        Prefix every left-edge glyph with ``pad``.
        """
        return replace(
            self,
            left=f"{pad}{self.left}",
            left_mid=f"{pad}{self.left_mid}",
            top_left=f"{pad}{self.top_left}",
            bottom_left=f"{pad}{self.bottom_left}",
        )


REPORT_BORDERS = BorderChars()


class Table:
    """
    A text table whose cells may span several columns.
    Every row must span exactly ``num_columns``.
    """

    def __init__(
        self,
        num_columns: int,
        borders: BorderChars = REPORT_BORDERS,
        padding: int = _DEFAULT_PADDING,
    ):
        self.num_columns = num_columns
        self.borders = borders
        self.padding = padding
        self.rows: List[Row] = []

    def __len__(self) -> int:
        return len(self.rows)

    def add_row(self, cells: Iterable[Cell]):
        row = tuple(cells)
        span = sum(c.col_span for c in row)
        if span != self.num_columns:
            raise TableLayoutError(self.num_columns, span)

        self.rows.append(row)

    def add_rows(self, rows: Iterable[Iterable[Cell]]):
        for row in rows:
            self.add_row(row)

    def column_widths(self) -> List[int]:
        widths = [0] * self.num_columns
        spanners: List[Tuple[int, Cell]] = []
        for row in self.rows:
            column = 0
            for cell in row:
                if cell.col_span > 1:
                    spanners.append((column, cell))
                else:
                    widths[column] = max(widths[column], self._desired_width(cell))

                column += cell.col_span

        # Widen spanned columns just enough, sharing the shortfall evenly.
        for column, cell in reversed(spanners):
            shortfall = self._desired_width(cell) - self._span_width(widths, column, cell.col_span)
            remaining = cell.col_span
            for index in range(column, column + cell.col_span):
                if shortfall <= 0:
                    break

                extra = -(-shortfall // remaining)
                widths[index] += extra
                shortfall -= extra
                remaining -= 1

        return widths

    def lines(self) -> List[str]:
        """
        The table as lines of rich markup.
        """
        if not self.rows:
            return []

        widths = self.column_widths()
        chars = self.borders
        lines = []
        for index, row in enumerate(self.rows):
            if index == 0:
                rule = (chars.top_left, chars.top, chars.top_mid, chars.top_right)
            else:
                rule = (chars.left_mid, chars.mid, chars.mid_mid, chars.right_mid)

            lines.append(self._rule(row, widths, *rule))
            lines.append(self._content(row, widths))

        bottom = (chars.bottom_left, chars.bottom, chars.bottom_mid, chars.bottom_right)
        lines.append(self._rule(self.rows[-1], widths, *bottom))
        return lines

    def render(self, context: Optional[RenderContext] = None) -> str:
        context = context or RenderContext()
        lines = self.lines()
        if not lines:
            return ""

        use_colors = context.use_colors
        console = Console(
            file=StringIO(),
            width=max(cell_len(Text.from_markup(li, emoji=False).plain) for li in lines) + 1,
            color_system=context.color_system,
            force_terminal=use_colors,
            force_jupyter=False,
            no_color=not use_colors,
            highlight=False,
            emoji=False,
            legacy_windows=False,
        )
        for line in lines:
            console.print(Text.from_markup(line, emoji=False), soft_wrap=True)

        return console.file.getvalue().rstrip("\n")

    def _desired_width(self, cell: Cell) -> int:
        return cell.width + 2 * self.padding

    @staticmethod
    def _span_width(widths: Sequence[int], column: int, span: int) -> int:
        # A spanning cell also absorbs the borders between its columns.
        return sum(widths[column : column + span]) + span - 1

    def _rule(
        self, row: Row, widths: Sequence[int], left: str, fill: str, junction: str, right: str
    ) -> str:
        parts = []
        column = 0
        for cell in row:
            parts.append(fill * self._span_width(widths, column, cell.col_span))
            column += cell.col_span

        return f"{left}{junction.join(parts)}{right}"

    def _content(self, row: Row, widths: Sequence[int]) -> str:
        parts = []
        column = 0
        for cell in row:
            inner = self._span_width(widths, column, cell.col_span) - 2 * self.padding
            parts.append(self._pad(cell, inner))
            column += cell.col_span

        chars = self.borders
        return f"{chars.left}{chars.middle.join(parts)}{chars.right}"

    def _pad(self, cell: Cell, inner: int) -> str:
        gap = max(inner - cell.width, 0)
        if cell.align == Align.RIGHT:
            before, after = gap, 0
        elif cell.align == Align.CENTER:
            before = gap // 2
            after = gap - before
        else:
            before, after = 0, gap

        edge = " " * self.padding
        return f"{edge}{' ' * before}{cell.content}{' ' * after}{edge}"
