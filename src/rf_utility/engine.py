from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from rf_utility.conversions import (
    convert_reading,
    free_space_path_loss,
    parse_number,
    parse_power,
    rf_link_range,
    times_further,
)
from rf_utility.data_models.models import (
    OPERATIONS,
    ErrorInfo,
    LinkRangeRequest,
    Operation,
    OperationRequest,
    OperationResult,
    PathLossRequest,
    PowerConversionRequest,
    TimesFurtherRequest,
)
from rf_utility.errors import RFUtilityError

logger = logging.getLogger(__name__)

_REQUEST_ADAPTER: TypeAdapter[OperationRequest] = TypeAdapter(OperationRequest)

# Positional argument names per operation, in command-line order.
ARGUMENT_NAMES: dict[Operation, tuple[str, ...]] = {
    "power_conversion": ("value",),
    "path_loss": ("frequency", "distance"),
    "link_range": ("transmitter_power", "receiver_sensitivity", "frequency"),
    "times_further": ("current_distance", "new_distance"),
}


def _parse_numbers(operation: Operation, raw_args: Sequence[str]) -> list[float]:
    return [parse_number(text, name) for name, text in zip(ARGUMENT_NAMES[operation], raw_args)]


def build_request(operation: Operation, raw_args: Sequence[str]) -> OperationRequest:
    """Turn raw text arguments into a typed request for ``operation``."""
    if operation not in OPERATIONS:
        raise KeyError(f"unknown operation {operation!r}")
    expected = len(ARGUMENT_NAMES[operation])
    if len(raw_args) != expected:
        raise TypeError(f"{operation} takes {expected} argument(s), got {len(raw_args)}")

    if operation == "power_conversion":
        return PowerConversionRequest(value=raw_args[0])
    values = _parse_numbers(operation, raw_args)
    if operation == "path_loss":
        return PathLossRequest(frequency_mhz=values[0], distance_m=values[1])
    if operation == "link_range":
        return LinkRangeRequest(
            transmitter_power_dbm=values[0],
            receiver_sensitivity_dbm=values[1],
            frequency_mhz=values[2],
        )
    return TimesFurtherRequest(current_distance_m=values[0], new_distance_m=values[1])


def run_operation(request: OperationRequest | dict[str, Any]) -> OperationResult:
    """Invoke the calculation for ``request``; ``RFUtilityError`` propagates."""
    request = _REQUEST_ADAPTER.validate_python(request)
    logger.debug("running %s with %s", request.operation, request.model_dump())

    if isinstance(request, PowerConversionRequest):
        reading = parse_power(request.value)
        value = convert_reading(reading)
        return OperationResult(
            operation=request.operation,
            status="success",
            value=value,
            unit=reading.converted_unit,
        )
    if isinstance(request, PathLossRequest):
        value = free_space_path_loss(request.frequency_mhz, request.distance_m)
        return OperationResult(
            operation=request.operation, status="success", value=value, unit="dB"
        )
    if isinstance(request, LinkRangeRequest):
        value = rf_link_range(
            request.transmitter_power_dbm,
            request.receiver_sensitivity_dbm,
            request.frequency_mhz,
        )
        return OperationResult(
            operation=request.operation, status="success", value=value, unit="m"
        )
    value = times_further(request.current_distance_m, request.new_distance_m)
    return OperationResult(operation=request.operation, status="success", value=value)


def evaluate(operation: Operation, raw_args: Sequence[str]) -> OperationResult:
    """Build and run one calculation, reporting unit and parse failures as error results."""
    try:
        return run_operation(build_request(operation, raw_args))
    except RFUtilityError as exc:
        logger.info("%s failed: %s", operation, exc.message)
        return OperationResult(
            operation=operation,
            status="error",
            error=ErrorInfo(code=exc.code, message=exc.message, details=exc.details),
        )


def format_result(result: OperationResult) -> str:
    if result.error is not None:
        return result.error.message
    return str(result.value)
