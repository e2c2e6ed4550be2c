from rf_utility.conversions import (
    free_space_path_loss,
    rf_link_range,
    times_further,
    transmitter_power_conversion,
)
from rf_utility.data_models.models import OperationResult
from rf_utility.engine import evaluate
from rf_utility.errors import InvalidUnitError, ParseError, RFUtilityError

__all__ = [
    "InvalidUnitError",
    "OperationResult",
    "ParseError",
    "RFUtilityError",
    "evaluate",
    "free_space_path_loss",
    "rf_link_range",
    "times_further",
    "transmitter_power_conversion",
]
