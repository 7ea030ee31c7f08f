DEFAULT_CURRENCY = "USD"
DEFAULT_CURRENCY_DISPLAY_PRECISION = 2
DEFAULT_GAS_PRICE_PRECISION = 5
DEFAULT_TOKEN = "ETH"
DEFAULT_L1_NETWORK = "ethereum"
DEFAULT_BLOCK_GAS_LIMIT = 30_000_000

UNICODE_CIRCLE = "◯"
UNICODE_TRIANGLE = "△"
PLACEHOLDER = "-"

INTRINSIC_MESSAGE = "Execution gas for this method does not include intrinsic gas overhead"
NON_ZERO_MESSAGE = (
    "Cost was non-zero but below the precision setting for the currency display (see options)"
)
