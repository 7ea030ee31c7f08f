from dataclasses import dataclass
from typing import Optional

from gas_report.constants import INTRINSIC_MESSAGE, NON_ZERO_MESSAGE, PLACEHOLDER
from gas_report.types import ReportOptions
from gas_report.utils import format_gwei, start_case


@dataclass(frozen=True)
class PriceSummary:
    """
    Display strings for the network/price row and the key block.
    Prices are taken as configured; nothing is looked up.
    """

    network: str
    l1gwei: str = PLACEHOLDER
    l2gwei: str = PLACEHOLDER
    l1gwei_note: str = ""
    l2gwei_note: str = ""
    rate: str = PLACEHOLDER
    currency: str = PLACEHOLDER
    token: str = PLACEHOLDER
    intrinsic_message: str = INTRINSIC_MESSAGE
    non_zero_message: str = NON_ZERO_MESSAGE

    @classmethod
    def from_options(cls, options: ReportOptions) -> "PriceSummary":
        network = start_case(options.l2 if options.use_l2 else options.l1)
        l1_price, l1_note = _l1_price(options)
        return cls(
            network=network,
            l1gwei=_gwei(l1_price),
            l2gwei=_gwei(options.gas_price if options.use_l2 else None),
            l1gwei_note=l1_note,
            rate=f"{options.token_price:.2f}" if options.token_price else PLACEHOLDER,
            currency=options.currency.lower(),
            token=options.token.lower(),
        )


def _l1_price(options: ReportOptions):
    if not options.use_l2:
        return options.gas_price, ""

    # On L2s, L1 costs are driven by the L1 data fees.
    elif options.blob_base_fee is not None:
        return options.blob_base_fee, "(blobBaseFee)"

    elif options.base_fee is not None:
        return options.base_fee, "(baseFee)"

    return options.gas_price, ""


def _gwei(value: Optional[float]) -> str:
    return PLACEHOLDER if value is None else format_gwei(value)
