from dataclasses import dataclass
from typing import Optional, Union, cast

from gas_report.types import DeploymentRecord, MethodRecord, ReportOptions
from gas_report.types.gas import _GasRecord

_GWEI = 1e-9


@dataclass(frozen=True)
class UncalledStats:
    """A method that was never called; there is nothing to measure."""


@dataclass(frozen=True)
class CalledStats:
    average: int
    min: Optional[int] = None
    max: Optional[int] = None
    calldata_average: Optional[int] = None
    cost: Optional[float] = None
    percent: Optional[float] = None

    @property
    def is_uniform(self) -> bool:
        return self.min is not None and self.min == self.max


Stats = Union[UncalledStats, CalledStats]


def derive_cost(record: _GasRecord, options: ReportOptions) -> Optional[float]:
    """
    The average cost of ``record`` in the configured currency: the collected
    cost when there is one, otherwise computed from the configured prices.
    """
    if record.cost is not None:
        return record.cost
    elif not options.has_prices or record.execution_gas_average is None:
        return None

    execution_price = options.gas_price or 0
    gwei_cost = record.execution_gas_average * execution_price
    if options.use_l2 and record.calldata_gas_average is not None:
        data_price = next(
            (p for p in (options.blob_base_fee, options.base_fee) if p is not None),
            execution_price,
        )
        gwei_cost += record.calldata_gas_average * data_price

    return gwei_cost * _GWEI * (options.token_price or 0)


def derive_percent(record: DeploymentRecord, block_gas_limit: int) -> Optional[float]:
    if record.percent is not None:
        return record.percent
    elif record.execution_gas_average is None:
        return None

    return round(record.execution_gas_average / block_gas_limit * 100, 1)


def compute_stats(record: MethodRecord, options: ReportOptions) -> Stats:
    if not record.was_called:
        return UncalledStats()

    return _called(record, options)


def compute_deployment_stats(record: DeploymentRecord, options: ReportOptions) -> Stats:
    if not record.was_called:
        return UncalledStats()

    return _called(record, options, percent=derive_percent(record, options.block_gas_limit))


def _called(
    record: _GasRecord, options: ReportOptions, percent: Optional[float] = None
) -> CalledStats:
    # Snapshot validation guarantees the average is set whenever calls exist.
    return CalledStats(
        average=cast(int, record.execution_gas_average),
        min=record.min,
        max=record.max,
        calldata_average=record.calldata_gas_average,
        cost=derive_cost(record, options),
        percent=percent,
    )
