from .aggregate import Section, SectionKind, aggregate_deployments, aggregate_methods
from .layout import ColumnLayout
from .stats import CalledStats, Stats, UncalledStats, compute_deployment_stats, compute_stats
from .summary import PriceSummary
from .terminal import build_table, render_report

__all__ = [
    "aggregate_deployments",
    "aggregate_methods",
    "build_table",
    "CalledStats",
    "ColumnLayout",
    "compute_deployment_stats",
    "compute_stats",
    "PriceSummary",
    "render_report",
    "Section",
    "SectionKind",
    "Stats",
    "UncalledStats",
]
