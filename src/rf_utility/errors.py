from __future__ import annotations

from typing import Any

from rf_utility.constants import INVALID_UNIT_MESSAGE


class RFUtilityError(ValueError):
    """Base class for failures local to a single calculation."""

    code = "rf_utility_error"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidUnitError(RFUtilityError):
    code = "invalid_unit"

    def __init__(self, text: str) -> None:
        super().__init__(INVALID_UNIT_MESSAGE, input=text)


class ParseError(RFUtilityError):
    code = "parse_error"

    def __init__(self, name: str, text: str) -> None:
        super().__init__(
            f"Could not parse {name} {text!r} as a number.", argument=name, input=text
        )
