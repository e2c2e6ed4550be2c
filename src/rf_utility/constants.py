from __future__ import annotations

import math

TOOL_NAME = "RF Utility"
TOOL_VERSION = "1.0"
TOOL_ABOUT = "Provides various RF utilities"

C_M_S = 299_792_458.0
PI = math.pi
MHZ_TO_HZ = 1_000_000.0

INVALID_UNIT_MESSAGE = (
    "Invalid input. Please enter a valid value followed by its unit (mW or dBm)."
)
NO_SUBCOMMAND_MESSAGE = (
    "Invalid subcommand or no subcommand provided. Use --help for more information."
)
