from statistics import mean
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from gas_report.exceptions import SnapshotError


class _GasRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calls: List[int] = Field(default_factory=list, alias="gasData")
    """The gas used by each recorded call, in the order they were made."""

    number_of_calls: Optional[int] = Field(None, alias="numberOfCalls", ge=0)
    execution_gas_average: Optional[int] = Field(None, alias="executionGasAverage")
    calldata_gas_average: Optional[int] = Field(None, alias="calldataGasAverage")
    min: Optional[int] = None
    max: Optional[int] = None

    cost: Optional[float] = None
    """The average cost in the configured currency, when already known."""

    @model_validator(mode="after")
    def check_call_statistics(self):
        if self.number_of_calls is None:
            self.number_of_calls = len(self.calls)
        elif self.number_of_calls != len(self.calls):
            raise ValueError(
                f"numberOfCalls is {self.number_of_calls} "
                f"but {len(self.calls)} gas values were recorded"
            )

        if self.calls:
            # Fill in whatever the collector did not pre-compute.
            if self.min is None:
                self.min = min(self.calls)
            if self.max is None:
                self.max = max(self.calls)
            if self.execution_gas_average is None:
                self.execution_gas_average = round(mean(self.calls))

            return self

        given = [
            name
            for name in ("execution_gas_average", "calldata_gas_average", "min", "max")
            if getattr(self, name) is not None
        ]
        if given:
            raise ValueError(f"{', '.join(given)} must be unset when no calls were recorded")

        return self

    @property
    def was_called(self) -> bool:
        return len(self.calls) > 0


class MethodRecord(_GasRecord):
    """
    Gas data for a single contract method, keyed by contract and signature.
    """

    contract: str
    method: str
    signature: str = Field("", alias="fnSig")

    @model_validator(mode="after")
    def default_signature(self):
        if not self.signature:
            self.signature = f"{self.method}()"

        return self

    def display_name(self, show_signature: bool = False) -> str:
        return self.signature if show_signature else self.method


class DeploymentRecord(_GasRecord):
    """
    Gas data for the deployments of a single contract.
    """

    name: str

    percent: Optional[float] = None
    """The average deployment gas as a share of the block gas limit."""


class GasSnapshot(BaseModel):
    """
    All the gas data collected during a run. The reporter only reads it.
    """

    methods: List[Optional[MethodRecord]] = []
    deployments: List[DeploymentRecord] = []

    @field_validator("methods", mode="before")
    @classmethod
    def flatten_method_map(cls, value: Any) -> Any:
        # Collectors key methods by "<Contract>_<signature>"; only the values matter here.
        if isinstance(value, dict):
            return list(value.values())

        return value

    @classmethod
    def from_dict(cls, data: Union[dict, "GasSnapshot"]) -> "GasSnapshot":
        if isinstance(data, cls):
            return data

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise SnapshotError("Invalid gas snapshot", base_error=err) from err
