"""
Gas statistics as a text table, formatted for a terminal or a file.
"""
from typing import List, Optional, Sequence, Union

from rich.markup import escape

from gas_report.constants import UNICODE_CIRCLE, UNICODE_TRIANGLE
from gas_report.logging import logger
from gas_report.report.aggregate import Section, aggregate_deployments, aggregate_methods
from gas_report.report.layout import ColumnLayout
from gas_report.report.summary import PriceSummary
from gas_report.types import CompilerInfo, GasSnapshot, RenderContext, ReportOptions
from gas_report.types import ReportStyles as styles
from gas_report.utils import REPORT_BORDERS, Align, Cell, Table, commify, styled

_RST_INDENT = "  "


def build_table(
    method_sections: Sequence[Section],
    deployment_sections: Sequence[Section],
    options: ReportOptions,
    compiler: Optional[CompilerInfo] = None,
    layout: Optional[ColumnLayout] = None,
    summary: Optional[PriceSummary] = None,
) -> Table:
    """
    Lay out the report: the configuration banner, the method rows, the
    deployment rows (if any) and the symbol key.
    """
    layout = layout or ColumnLayout.from_options(options)
    compiler = compiler or CompilerInfo()
    summary = summary or PriceSummary.from_options(options)

    borders = REPORT_BORDERS.indented(_RST_INDENT) if options.rst else REPORT_BORDERS
    table = Table(layout.num_columns, borders=borders)
    table.add_row(title_row(layout))
    table.add_row(compiler_row(compiler, options, layout))
    table.add_row(network_row(summary, options, layout))
    table.add_row(methods_header(options, layout))
    table.add_rows(s.row for s in method_sections)

    if deployment_sections:
        table.add_row(deployments_header(layout))
        table.add_rows(s.row for s in deployment_sections)

    table.add_rows(key_rows(summary, layout))
    return table


def render_report(
    snapshot: Union[GasSnapshot, dict],
    options: Union[ReportOptions, dict, None] = None,
    compiler: Optional[CompilerInfo] = None,
    context: Optional[RenderContext] = None,
) -> str:
    """
    Render a gas report table.

    Args:
        snapshot (:class:`~gas_report.types.GasSnapshot` | dict): The collected gas data.
        options (:class:`~gas_report.types.ReportOptions` | dict): The resolved configuration.
        compiler (Optional[:class:`~gas_report.types.CompilerInfo`]): The compiler that
          built the measured contracts.
        context (Optional[:class:`~gas_report.types.RenderContext`]): How to style the
          output. Defaults to what ``options`` allow.

    Returns:
        str: The rendered table.
    """
    snapshot = GasSnapshot.from_dict(snapshot)
    options = ReportOptions.from_dict(options)
    context = context or RenderContext.from_options(options)

    layout = ColumnLayout.from_options(options)
    logger.debug(f"Rendering gas report with {layout.num_columns} columns.")
    method_sections = aggregate_methods(snapshot, options, layout)
    deployment_sections = aggregate_deployments(snapshot, options, layout)
    table = build_table(method_sections, deployment_sections, options, compiler, layout)
    logger.debug(f"Gas report has {len(table)} rows.")
    return table.render(context)


def title_row(layout: ColumnLayout) -> List[Cell]:
    title = styled("Solidity and Network Configuration", styles.TITLE)
    return [Cell(title, col_span=layout.num_columns)]


def compiler_row(
    compiler: CompilerInfo, options: ReportOptions, layout: ColumnLayout
) -> List[Cell]:
    block_limit = f"Block limit: {commify(options.block_gas_limit)} gas"
    return [
        Cell(_config(f"Solidity: {compiler.version}"), col_span=2),
        Cell(_config(f"Optimizer: {compiler.optimizer}")),
        Cell(_config(f"viaIR: {str(compiler.via_ir).lower()}")),
        Cell(_config(f"Runs: {compiler.runs}")),
        Cell(_config(block_limit), col_span=layout.block_limit_width, align=Align.CENTER),
    ]


def network_row(
    summary: PriceSummary, options: ReportOptions, layout: ColumnLayout
) -> List[Cell]:
    if not options.has_prices:
        return [Cell(styled("Methods", styles.TITLE), col_span=layout.num_columns)]

    l1 = f"L1: {summary.l1gwei} gwei {summary.l1gwei_note}".rstrip()
    cells = [
        Cell(_config(f"Network: {summary.network}"), col_span=2),
        Cell(_config(l1), col_span=2),
    ]
    if options.use_l2:
        l2 = f"L2: {summary.l2gwei} gwei {summary.l2gwei_note}".rstrip()
        cells.append(Cell(_config(l2), col_span=2))
    else:
        cells.append(Cell(""))

    rate = f"{summary.rate} {summary.currency}/{summary.token}"
    cells.append(Cell(styled(escape(rate), styles.RATE), col_span=2, align=Align.CENTER))
    return cells


def methods_header(options: ReportOptions, layout: ColumnLayout) -> List[Cell]:
    cells = [
        Cell(styled("Contracts / Methods", styles.TITLE), col_span=2),
        _header("Min"),
        _header("Max"),
        _header(layout.execution_average_title),
    ]
    if layout.show_calldata:
        cells.append(_header(layout.calldata_average_title))

    cells.append(_header("# calls"))
    cells.append(_header(f"{options.currency.lower()} (avg)"))
    return cells


def deployments_header(layout: ColumnLayout) -> List[Cell]:
    return [
        Cell(styled("Deployments", styles.TITLE), col_span=3),
        Cell("", col_span=layout.deployments_spacer_width, align=Align.RIGHT),
        _header("% of limit"),
        Cell(""),
    ]


def key_rows(summary: PriceSummary, layout: ColumnLayout) -> List[List[Cell]]:
    span = layout.num_columns
    circle = styled(UNICODE_CIRCLE, styles.GLYPH)
    triangle = styled(UNICODE_TRIANGLE, styles.GLYPH)
    return [
        [Cell(styled("Key", styles.TITLE), col_span=span)],
        [Cell(f"{circle}  {escape(summary.intrinsic_message)}", col_span=span)],
        [Cell(f"{triangle}  {escape(summary.non_zero_message)}", col_span=span)],
    ]


def _config(text: str) -> str:
    return styled(escape(text), styles.CONFIG)


def _header(title: str) -> Cell:
    return Cell(styled(escape(title), styles.HEADER))
