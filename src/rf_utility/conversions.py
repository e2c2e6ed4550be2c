"""
Closed-form RF link-budget arithmetic.

Every function here is pure. Arithmetic runs on numpy float64 with floating-point
warnings silenced, so zero or negative inputs propagate ``-inf``/``inf``/``nan``
rather than raising. Callers that need to reject such inputs must do so themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

import numpy as np

from rf_utility.constants import C_M_S, MHZ_TO_HZ, PI
from rf_utility.errors import InvalidUnitError, ParseError

logger = logging.getLogger(__name__)

PowerUnit = Literal["mW", "dBm"]

# Checked in order; "mw" must win over "dbm" for inputs such as "10dbmw".
_UNIT_SUFFIXES: tuple[tuple[str, PowerUnit], ...] = (("mw", "mW"), ("dbm", "dBm"))


@dataclass(frozen=True)
class PowerReading:
    value: float
    unit: PowerUnit

    @property
    def converted_unit(self) -> PowerUnit:
        return "dBm" if self.unit == "mW" else "mW"


def _float64(value: float) -> np.float64:
    return np.float64(value)


def _checked(name: str, value: np.floating) -> float:
    result = float(value)
    if not np.isfinite(result):
        logger.warning("%s produced a non-finite result (%s)", name, result)
    return result


def parse_number(text: str, name: str = "value") -> float:
    """Parse a raw argument as a float, raising ``ParseError`` naming ``name``.

    Digit-group underscores and surrounding whitespace are rejected even though
    ``float()`` would accept them.
    """
    if not isinstance(text, str) or "_" in text or text != text.strip():
        raise ParseError(name, str(text))
    try:
        return float(text)
    except (TypeError, ValueError) as exc:
        raise ParseError(name, str(text)) from exc


def parse_power(text: str) -> PowerReading:
    """Split ``"<number>[ ]<unit>"`` into magnitude and unit, case-insensitively."""
    lowered = text.lower()
    for suffix, unit in _UNIT_SUFFIXES:
        if lowered.endswith(suffix):
            magnitude = lowered[: -len(suffix)].strip()
            return PowerReading(value=parse_number(magnitude, "power"), unit=unit)
    raise InvalidUnitError(text)


def mw_to_dbm(milliwatts: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return _checked("mw_to_dbm", 10.0 * np.log10(_float64(milliwatts)))


def dbm_to_mw(dbm: float) -> float:
    with np.errstate(over="ignore"):
        return _checked("dbm_to_mw", np.power(10.0, _float64(dbm) / 10.0))


def convert_reading(reading: PowerReading) -> float:
    logger.debug("converting %s %s to %s", reading.value, reading.unit, reading.converted_unit)
    if reading.unit == "mW":
        return mw_to_dbm(reading.value)
    return dbm_to_mw(reading.value)


def transmitter_power_conversion(text: str) -> float:
    """Convert ``"10mW"`` to dBm or ``"0dBm"`` to mW.

    Raises:
        InvalidUnitError: the suffix is neither ``mW`` nor ``dBm``.
        ParseError: the magnitude is not a number.
    """
    return convert_reading(parse_power(text))


def free_space_path_loss(frequency_mhz: float, distance_m: float) -> float:
    """Free-space path loss in dB for a frequency in MHz and a distance in meters."""
    frequency_hz = _float64(frequency_mhz) * MHZ_TO_HZ
    with np.errstate(divide="ignore", invalid="ignore"):
        fspl_db = (
            20.0 * np.log10(_float64(distance_m))
            + 20.0 * np.log10(frequency_hz)
            + 20.0 * np.log10(C_M_S / (4.0 * PI))
        )
    return _checked("free_space_path_loss", fspl_db)


def wavelength_m(frequency_mhz: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(C_M_S / (_float64(frequency_mhz) * MHZ_TO_HZ))


def rf_link_range(pt_dbm: float, pr_dbm: float, frequency_mhz: float) -> float:
    """Friis free-space equation solved for distance, in meters.

    No plausibility check is made on ``pr_dbm`` relative to ``pt_dbm``.
    """
    lambda_m = _float64(wavelength_m(frequency_mhz))
    exponent = (_float64(pr_dbm) - _float64(pt_dbm)) / 20.0
    with np.errstate(over="ignore", invalid="ignore"):
        range_m = (lambda_m / (4.0 * PI)) * np.power(10.0, exponent)
    return _checked("rf_link_range", range_m)


def times_further(current_distance_m: float, new_distance_m: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.divide(_float64(new_distance_m), _float64(current_distance_m))
    return _checked("times_further", ratio)
