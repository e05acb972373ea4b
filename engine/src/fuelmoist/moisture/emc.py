"""Equilibrium Moisture Content (EMC) estimator.

Three-band regression of dead fuel EMC on temperature and relative
humidity (Simard 1968, as used in NFDRS). Temperature is in Fahrenheit.

The result is non-increasing in temperature and non-decreasing in
humidity across band boundaries: a band never returns less than the band
below it gives at their shared edge. Above roughly 109F the published
mid band would otherwise dip below the low band at RH=10.
"""

from __future__ import annotations

from fuelmoist.moisture.constants import (
    EMC_CEILING,
    EMC_FLOOR,
    EMC_BANDS,
    EMC_HIGH,
    EMC_LOW,
    EMC_MID,
    RH_MAX,
    RH_MIN,
    EMCBand,
)
from fuelmoist.validation import clamp, require_finite, round1


def select_band(rh: float) -> EMCBand:
    """Pick the regression band for an already-clamped humidity."""
    if rh < EMC_LOW.rh_max:
        return EMC_LOW
    if rh <= EMC_MID.rh_max:
        return EMC_MID
    return EMC_HIGH


def compute_emc(temp_f: float, rh: float) -> float:
    """Compute equilibrium moisture content for dead fuels.

    Args:
        temp_f: Air temperature (Fahrenheit)
        rh: Relative humidity (%). Clamped into 0-100, never rejected
            for being out of range.

    Returns:
        EMC (%) clamped to [EMC_FLOOR, EMC_CEILING], one decimal place

    Raises:
        InvalidInputError: If either input is non-numeric or non-finite
    """
    t = require_finite("temp_f", temp_f)
    h = clamp(require_finite("rh", rh), RH_MIN, RH_MAX)

    band = select_band(h)
    emc = band.evaluate(t, h)
    for lower in EMC_BANDS[: EMC_BANDS.index(band)]:
        emc = max(emc, lower.evaluate(t, lower.rh_max))
    return round1(clamp(emc, EMC_FLOOR, EMC_CEILING))
