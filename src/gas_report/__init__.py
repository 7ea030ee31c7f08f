from gas_report.report import (
    PriceSummary,
    aggregate_deployments,
    aggregate_methods,
    build_table,
    render_report,
)
from gas_report.types import (
    CompilerInfo,
    DeploymentRecord,
    GasSnapshot,
    MethodRecord,
    RenderContext,
    ReportOptions,
)

__all__ = [
    "aggregate_deployments",
    "aggregate_methods",
    "build_table",
    "CompilerInfo",
    "DeploymentRecord",
    "GasSnapshot",
    "MethodRecord",
    "PriceSummary",
    "RenderContext",
    "render_report",
    "ReportOptions",
]
