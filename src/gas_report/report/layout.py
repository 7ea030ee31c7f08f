from dataclasses import dataclass

from gas_report.types import ReportOptions


@dataclass(frozen=True)
class ColumnLayout:
    """
    The column topology of a report, decided once per render. Every row
    is built from the same layout so all rows span the same columns.
    """

    num_columns: int = 7
    block_limit_width: int = 2
    deployments_spacer_width: int = 2
    contract_spacer_width: int = 5
    execution_average_title: str = "Avg"
    calldata_average_title: str = ""
    show_calldata: bool = False

    @classmethod
    def from_options(cls, options: ReportOptions) -> "ColumnLayout":
        if not options.use_l2:
            return cls()

        return cls(
            num_columns=8,
            block_limit_width=3,
            deployments_spacer_width=3,
            contract_spacer_width=6,
            execution_average_title="L2 Avg (Exec)",
            calldata_average_title="L1 Avg (Data)",
            show_calldata=True,
        )
