import pytest

from gas_report.logging import LogLevel, logger
from gas_report.types import ColorLevel, CompilerInfo, GasSnapshot, RenderContext, ReportOptions


@pytest.fixture
def debug_logs():
    initial_level = logger.level
    logger.set_level(LogLevel.DEBUG.name)
    yield
    logger.set_level(initial_level)


@pytest.fixture
def options():
    return ReportOptions(no_colors=True)


@pytest.fixture
def l2_options():
    return ReportOptions(no_colors=True, l2="optimism")


@pytest.fixture
def priced_options():
    return ReportOptions(no_colors=True, gas_price=20, token_price=3000)


@pytest.fixture
def plain_context():
    return RenderContext(ColorLevel.NONE)


@pytest.fixture
def color_context():
    return RenderContext(ColorLevel.BASIC)


@pytest.fixture
def compiler():
    return CompilerInfo.from_settings(
        {"version": "0.8.24", "settings": {"optimizer": {"enabled": True, "runs": 200}}}
    )


@pytest.fixture
def token_snapshot():
    transfer = {
        "contract": "Token",
        "method": "transfer",
        "fnSig": "transfer(address,uint256)",
        "gasData": [21000, 23000],
        "numberOfCalls": 2,
    }
    return GasSnapshot.from_dict({"methods": [transfer], "deployments": []})


@pytest.fixture
def mixed_snapshot():
    return GasSnapshot.from_dict(
        {
            "methods": [
                {"contract": "Vault", "method": "withdraw", "gasData": [40000, 52000]},
                None,
                {"contract": "Token", "method": "transfer", "gasData": [21000, 23000]},
                {"contract": "Vault", "method": "deposit", "gasData": [61000]},
                {"contract": "Token", "method": "approve", "gasData": [46000, 46000]},
                {"contract": "Token", "method": "burn", "gasData": []},
            ],
            "deployments": [
                {"name": "Vault", "gasData": [1500000]},
                {"name": "Token", "gasData": [900000, 910000]},
                {"name": "Unused", "gasData": []},
            ],
        }
    )
