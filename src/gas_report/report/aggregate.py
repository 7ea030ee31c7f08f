from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Set, Tuple

from rich.markup import escape

from gas_report.constants import PLACEHOLDER, UNICODE_TRIANGLE
from gas_report.logging import logger
from gas_report.report.layout import ColumnLayout
from gas_report.report.stats import (
    CalledStats,
    Stats,
    compute_deployment_stats,
    compute_stats,
)
from gas_report.types import DeploymentRecord, GasSnapshot, MethodRecord, ReportOptions
from gas_report.types import ReportStyles as styles
from gas_report.utils import (
    Align,
    Cell,
    commify,
    format_cost,
    format_percent,
    indent_text,
    is_below_precision,
    styled,
)

DASH = styled(PLACEHOLDER, styles.PLACEHOLDER)


class SectionKind(IntEnum):
    """A contract's header row sorts before any of its method rows."""

    HEADER = 0
    ROW = 1


def text_sort_key(value: str) -> Tuple[str, str]:
    """
    Alphabetical ordering that ignores case first and then puts lowercase
    before uppercase, e.g. ``["a", "A", "b", "B"]``.
    """
    return value.casefold(), value.swapcase()


@dataclass(frozen=True)
class Section:
    row: Tuple[Cell, ...]
    contract_name: str
    method_name: str = ""
    kind: SectionKind = SectionKind.ROW

    @property
    def sort_key(self):
        return (
            text_sort_key(self.contract_name),
            self.kind,
            text_sort_key(self.method_name),
        )


def aggregate_methods(
    snapshot: GasSnapshot, options: ReportOptions, layout: Optional[ColumnLayout] = None
) -> List[Section]:
    """
    Build the method rows of the report, each contract preceded by its
    header row, ordered by contract and then by displayed method name.
    """
    layout = layout or ColumnLayout.from_options(options)
    sections: List[Section] = []
    added_contracts: Set[str] = set()

    for record in snapshot.methods:
        if record is None:
            logger.debug("Skipping empty method record.")
            continue

        # A contract gets one header, at its first called method.
        if record.contract not in added_contracts and record.was_called:
            added_contracts.add(record.contract)
            sections.append(contract_header(record.contract, options, layout))

        if not options.show_uncalled_methods and record.number_of_calls == 0:
            logger.debug(f"Hiding uncalled method '{record.contract}.{record.method}'.")
            continue

        stats = compute_stats(record, options)
        name = record.display_name(options.show_method_sig)
        sections.append(
            Section(
                row=method_row(record, name, stats, options, layout),
                contract_name=record.contract,
                method_name=name,
            )
        )

    return sorted(sections, key=lambda s: s.sort_key)


def aggregate_deployments(
    snapshot: GasSnapshot, options: ReportOptions, layout: Optional[ColumnLayout] = None
) -> List[Section]:
    """
    Build the deployment rows of the report in alphabetical order of
    contract name. Contracts that were never deployed are left out.
    """
    layout = layout or ColumnLayout.from_options(options)
    sections = []
    for record in sorted(snapshot.deployments, key=lambda d: text_sort_key(d.name)):
        if not record.was_called:
            logger.debug(f"Skipping '{record.name}': no deployments recorded.")
            continue

        stats = compute_deployment_stats(record, options)
        sections.append(
            Section(row=deployment_row(record, stats, options, layout), contract_name=record.name)
        )

    return sections


def contract_header(name: str, options: ReportOptions, layout: ColumnLayout) -> Section:
    style = styles.CONTRACTS_DARK if options.dark_mode else styles.CONTRACTS
    row = (
        Cell(styled(escape(name), style), col_span=2),
        Cell("", col_span=layout.contract_spacer_width),
    )
    return Section(row=row, contract_name=name, kind=SectionKind.HEADER)


def method_row(
    record: MethodRecord,
    name: str,
    stats: Stats,
    options: ReportOptions,
    layout: ColumnLayout,
) -> Tuple[Cell, ...]:
    low, high = render_min_max(stats)
    cells = [
        Cell(indent_text(escape(name)), col_span=2),
        Cell(low, align=Align.RIGHT),
        Cell(high, align=Align.RIGHT),
        Cell(render_average(stats), align=Align.RIGHT),
    ]
    if layout.show_calldata:
        cells.append(Cell(render_calldata_average(stats), align=Align.RIGHT))

    cells.append(Cell(str(record.number_of_calls), align=Align.RIGHT))
    cells.append(Cell(render_cost(stats, options), align=Align.RIGHT))
    return tuple(cells)


def deployment_row(
    record: DeploymentRecord, stats: Stats, options: ReportOptions, layout: ColumnLayout
) -> Tuple[Cell, ...]:
    low, high = render_min_max(stats)
    cells = [
        Cell(styled(escape(record.name), styles.DEPLOYMENTS), col_span=2),
        Cell(low, align=Align.RIGHT),
        Cell(high, align=Align.RIGHT),
        Cell(render_average(stats), align=Align.RIGHT),
    ]
    if layout.show_calldata:
        cells.append(Cell(render_calldata_average(stats), align=Align.RIGHT))

    cells.append(Cell(render_percent(stats), align=Align.RIGHT))
    cells.append(Cell(render_cost(stats, options), align=Align.RIGHT))
    return tuple(cells)


def render_min_max(stats: Stats) -> Tuple[str, str]:
    if not isinstance(stats, CalledStats) or stats.min is None or stats.max is None:
        return "", ""
    elif stats.is_uniform:
        # A single repeated value says nothing as a range.
        return DASH, DASH

    return styled(commify(stats.min), styles.MIN), styled(commify(stats.max), styles.MAX)


def render_average(stats: Stats) -> str:
    if isinstance(stats, CalledStats):
        return commify(stats.average)

    return DASH


def render_calldata_average(stats: Stats) -> str:
    if isinstance(stats, CalledStats) and stats.calldata_average is not None:
        return commify(stats.calldata_average)

    return ""


def render_percent(stats: Stats) -> str:
    if isinstance(stats, CalledStats) and stats.percent is not None:
        return format_percent(stats.percent)

    return DASH


def render_cost(stats: Stats, options: ReportOptions) -> str:
    if not isinstance(stats, CalledStats) or stats.cost is None:
        text = DASH
    elif is_below_precision(stats.cost, options.currency_display_precision):
        text = UNICODE_TRIANGLE
    else:
        text = format_cost(stats.cost, options.currency_display_precision)

    return styled(text, styles.COST)
