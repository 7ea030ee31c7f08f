from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from gas_report.constants import (
    DEFAULT_BLOCK_GAS_LIMIT,
    DEFAULT_CURRENCY,
    DEFAULT_CURRENCY_DISPLAY_PRECISION,
    DEFAULT_L1_NETWORK,
    DEFAULT_TOKEN,
)
from gas_report.exceptions import ConfigError


class ReportOptions(BaseModel):
    """
    The resolved reporter configuration. Keys may be given in
    ``snake_case`` or in the ``camelCase`` used by JavaScript-side configs.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    no_colors: bool = False
    output_file: Optional[str] = None
    """When set, the report is headed for a file and is rendered without colors."""

    dark_mode: bool = False

    l1: str = Field(DEFAULT_L1_NETWORK, alias="L1")
    l2: Optional[str] = Field(None, alias="L2")
    """The name of the L2 network. Enables the calldata (L1 data) column."""

    token: str = DEFAULT_TOKEN
    currency: str = DEFAULT_CURRENCY
    currency_display_precision: int = Field(DEFAULT_CURRENCY_DISPLAY_PRECISION, ge=0)

    gas_price: Optional[float] = None
    """Gas price in gwei. On L2 networks, the L2 execution gas price."""

    base_fee: Optional[float] = None
    blob_base_fee: Optional[float] = None
    token_price: Optional[float] = None

    show_method_sig: bool = False
    show_uncalled_methods: bool = False
    rst: bool = False
    block_gas_limit: int = Field(DEFAULT_BLOCK_GAS_LIMIT, gt=0)

    @property
    def use_l2(self) -> bool:
        return self.l2 is not None

    @property
    def use_colors(self) -> bool:
        return not self.no_colors and self.output_file is None

    @property
    def has_prices(self) -> bool:
        return bool(self.token_price) and bool(self.gas_price)

    @classmethod
    def from_dict(cls, data: Union[dict, "ReportOptions", None]) -> "ReportOptions":
        if isinstance(data, cls):
            return data

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise ConfigError("Invalid report options", base_error=err) from err
