"""
Pydantic models for calculation requests and results.

Requests form a discriminated union keyed on ``operation``; each variant carries the
typed arguments of one calculation. Results are produced once per invocation and are
never stored.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

Operation = Literal["power_conversion", "path_loss", "link_range", "times_further"]
OPERATIONS: tuple[Operation, ...] = (
    "power_conversion",
    "path_loss",
    "link_range",
    "times_further",
)

ResultUnit = Literal["mW", "dBm", "dB", "m"]

# -----------------------------
# Request models
# -----------------------------


class PowerConversionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    operation: Literal["power_conversion"] = "power_conversion"
    value: str = Field(..., description="Power magnitude followed by its unit (mW or dBm).")


class PathLossRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    operation: Literal["path_loss"] = "path_loss"
    frequency_mhz: float
    distance_m: float


class LinkRangeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    operation: Literal["link_range"] = "link_range"
    transmitter_power_dbm: float
    receiver_sensitivity_dbm: float
    frequency_mhz: float


class TimesFurtherRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    operation: Literal["times_further"] = "times_further"
    current_distance_m: float
    new_distance_m: float


OperationRequest = Annotated[
    Union[PowerConversionRequest, PathLossRequest, LinkRangeRequest, TimesFurtherRequest],
    Field(discriminator="operation"),
]

# -----------------------------
# Result models
# -----------------------------

ResultStatus = Literal["success", "error"]
ErrorCode = Literal["invalid_unit", "parse_error"]


class ErrorInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")
    code: ErrorCode
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class OperationResult(BaseModel):
    model_config = ConfigDict(extra="forbid")
    operation: Operation
    status: ResultStatus
    value: float | None = None
    unit: ResultUnit | None = None
    error: ErrorInfo | None = None

    @model_validator(mode="after")
    def _check_status(self) -> OperationResult:
        if self.status == "success":
            if self.value is None:
                raise ValueError("value is required when status == 'success'")
            if self.error is not None:
                raise ValueError("error must be omitted when status == 'success'")
        else:
            if self.error is None:
                raise ValueError("error is required when status == 'error'")
            if self.value is not None:
                raise ValueError("value must be omitted when status == 'error'")
        return self

    @property
    def is_finite(self) -> bool:
        return self.value is not None and math.isfinite(self.value)


def get_operation_result_schema() -> dict[str, Any]:
    return OperationResult.model_json_schema()
