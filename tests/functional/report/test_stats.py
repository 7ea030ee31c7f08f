import pytest

from gas_report.report import CalledStats, UncalledStats, compute_deployment_stats, compute_stats
from gas_report.report.stats import derive_cost, derive_percent
from gas_report.types import DeploymentRecord, MethodRecord, ReportOptions


@pytest.fixture
def transfer():
    return MethodRecord(contract="Token", method="transfer", calls=[100000])


class TestComputeStats:
    def test_uncalled(self, options):
        stats = compute_stats(MethodRecord(contract="Token", method="burn"), options)
        assert isinstance(stats, UncalledStats)

    def test_called(self, options):
        record = MethodRecord(
            contract="Token", method="transfer", calls=[21000, 23000], calldata_gas_average=1600
        )
        stats = compute_stats(record, options)
        assert stats == CalledStats(
            average=22000, min=21000, max=23000, calldata_average=1600, cost=None
        )
        assert not stats.is_uniform

    def test_uniform(self, options):
        record = MethodRecord(contract="Token", method="approve", calls=[46000, 46000])
        assert compute_stats(record, options).is_uniform

    def test_deployment_percent(self, options):
        record = DeploymentRecord(name="Vault", calls=[1500000])
        stats = compute_deployment_stats(record, options)
        assert stats.percent == 5.0

    def test_deployment_without_calls(self, options):
        stats = compute_deployment_stats(DeploymentRecord(name="Unused"), options)
        assert isinstance(stats, UncalledStats)


class TestDeriveCost:
    def test_collected_cost_wins(self, priced_options):
        record = MethodRecord(contract="Token", method="transfer", calls=[100000], cost=0.5)
        assert derive_cost(record, priced_options) == 0.5

    def test_without_prices(self, transfer, options):
        assert derive_cost(transfer, options) is None

    def test_from_prices(self, transfer, priced_options):
        # 100,000 gas * 20 gwei = 0.002 eth at 3000 usd/eth
        assert derive_cost(transfer, priced_options) == pytest.approx(6.0)

    def test_l2_includes_data_fee(self):
        record = MethodRecord(
            contract="Token", method="transfer", calls=[100000], calldata_gas_average=1000
        )
        options = ReportOptions(l2="optimism", gas_price=20, base_fee=10, token_price=3000)
        # (100,000 * 20 + 1,000 * 10) gwei at 3000 usd/eth
        assert derive_cost(record, options) == pytest.approx(6.03)

    def test_l2_prefers_blob_base_fee(self):
        record = MethodRecord(
            contract="Token", method="transfer", calls=[100000], calldata_gas_average=1000
        )
        options = ReportOptions(
            l2="optimism", gas_price=20, base_fee=10, blob_base_fee=0, token_price=3000
        )
        assert derive_cost(record, options) == pytest.approx(6.0)

    def test_not_rounded_to_display_precision(self):
        record = MethodRecord(contract="Token", method="ping", calls=[1000])
        options = ReportOptions(gas_price=1, token_price=3000, currency_display_precision=2)
        # Below the precision floor, but still a real number for the △ check.
        assert derive_cost(record, options) == pytest.approx(0.003)


class TestDerivePercent:
    def test_collected_percent_wins(self):
        record = DeploymentRecord(name="Token", calls=[900000], percent=9.9)
        assert derive_percent(record, 30_000_000) == 9.9

    def test_share_of_block_limit(self):
        record = DeploymentRecord(name="Token", calls=[900000])
        assert derive_percent(record, 30_000_000) == 3.0
        assert derive_percent(record, 15_000_000) == 6.0

    def test_uncalled(self):
        assert derive_percent(DeploymentRecord(name="Token"), 30_000_000) is None
