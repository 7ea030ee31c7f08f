from gas_report.constants import INTRINSIC_MESSAGE, NON_ZERO_MESSAGE
from gas_report.report import PriceSummary
from gas_report.types import ReportOptions


def test_l1(priced_options):
    summary = PriceSummary.from_options(priced_options)
    assert summary.network == "Ethereum"
    assert summary.l1gwei == "20"
    assert summary.l1gwei_note == ""
    assert summary.l2gwei == "-"
    assert summary.rate == "3000.00"
    assert summary.currency == "usd"
    assert summary.token == "eth"


def test_l2_uses_base_fee_for_l1():
    options = ReportOptions(l2="optimism", gas_price=0.01, base_fee=12.5, token_price=3000)
    summary = PriceSummary.from_options(options)
    assert summary.network == "Optimism"
    assert summary.l1gwei == "12.5"
    assert summary.l1gwei_note == "(baseFee)"
    assert summary.l2gwei == "0.01"


def test_l2_uses_blob_base_fee_for_l1():
    options = ReportOptions(
        l2="optimism", gas_price=0.01, base_fee=12.5, blob_base_fee=1, token_price=3000
    )
    summary = PriceSummary.from_options(options)
    assert summary.l1gwei == "1"
    assert summary.l1gwei_note == "(blobBaseFee)"


def test_without_prices():
    summary = PriceSummary.from_options(ReportOptions(currency="EUR", token="POL"))
    assert summary.l1gwei == "-"
    assert summary.rate == "-"
    assert summary.currency == "eur"
    assert summary.token == "pol"
    assert summary.intrinsic_message == INTRINSIC_MESSAGE
    assert summary.non_zero_message == NON_ZERO_MESSAGE
