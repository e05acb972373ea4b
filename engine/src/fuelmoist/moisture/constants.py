"""Single source of truth for moisture model parameters.

EMC coefficients, clamp bounds, time-lag classes and the default policies
used by the forecast driver and trend predictor are defined here. Every
other module imports them from this file.

EMC regression from:
    Simard, A.J. (1968). The moisture content of forest fuels - I.
    Canadian Department of Forest and Rural Development,
    Information Report FF-X-14.
    As adopted by the U.S. National Fire Danger Rating System
    (Bradshaw et al. 1983, GTR-INT-169), temperature in Fahrenheit.
"""

from __future__ import annotations

from dataclasses import dataclass

from fuelmoist.errors import InvalidTimeLagError
from fuelmoist.types import TimeLagClass


@dataclass(frozen=True)
class EMCBand:
    """Coefficients for one relative-humidity band of the EMC regression.

    emc = intercept + rh_coef*RH + rh2_coef*RH^2 + t_coef*T + rh_t_coef*RH*T

    Attributes:
        name: Band identifier ("low", "mid", "high")
        rh_max: Upper RH bound of the band (inclusive for "mid")
    """

    name: str
    rh_max: float
    intercept: float
    rh_coef: float
    rh2_coef: float
    t_coef: float
    rh_t_coef: float

    def evaluate(self, temp_f: float, rh: float) -> float:
        return (
            self.intercept
            + self.rh_coef * rh
            + self.rh2_coef * rh * rh
            + self.t_coef * temp_f
            + self.rh_t_coef * rh * temp_f
        )


# RH < 10
EMC_LOW = EMCBand(
    name="low", rh_max=10.0,
    intercept=0.03229, rh_coef=0.281073, rh2_coef=0.0,
    t_coef=0.0, rh_t_coef=-0.000578,
)

# 10 <= RH <= 50
EMC_MID = EMCBand(
    name="mid", rh_max=50.0,
    intercept=2.22749, rh_coef=0.160107, rh2_coef=0.0,
    t_coef=-0.01478, rh_t_coef=0.0,
)

# RH > 50
EMC_HIGH = EMCBand(
    name="high", rh_max=100.0,
    intercept=21.0606, rh_coef=-0.483199, rh2_coef=0.005565,
    t_coef=0.0, rh_t_coef=-0.00035,
)

EMC_BANDS = (EMC_LOW, EMC_MID, EMC_HIGH)

EMC_FLOOR = 0.1  # percent; dead fuel never reaches 0
EMC_CEILING = 30.0  # percent; approximate fiber saturation

RH_MIN = 0.0
RH_MAX = 100.0

# Time-lag constant (hours) for each dead fuel class.
TIME_LAGS: dict[TimeLagClass, float] = {cls: float(cls.value) for cls in TimeLagClass}

DEFAULT_PERIOD_HOURS = 12.0
DEFAULT_CRITICAL_THRESHOLD = 6.0  # percent, 1-hr fuel fire danger indicator
DEFAULT_LABEL_PREFIX = "Day"

# Wind shortens the effective time-lag linearly up to WIND_CAP_MPH,
# where the reduction saturates at WIND_MAX_REDUCTION.
WIND_CAP_MPH = 30.0
WIND_MAX_REDUCTION = 0.2

# Classes tracked by the constant-condition drying simulation.
DRYING_CLASSES = (
    TimeLagClass.ONE_HOUR,
    TimeLagClass.TEN_HOUR,
    TimeLagClass.HUNDRED_HOUR,
)

# Upper bound on points produced by one drying simulation (a year hourly fits).
MAX_DRYING_POINTS = 10_000


def get_time_lag_class(value: TimeLagClass | int) -> TimeLagClass:
    """Look up a fuel class by enum member or hour value.

    Args:
        value: TimeLagClass or its integer hours (1, 10, 100, 1000)

    Returns:
        The matching TimeLagClass

    Raises:
        InvalidTimeLagError: If value is not a known class
    """
    if isinstance(value, TimeLagClass):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimeLagError(f"Unknown fuel time-lag class: {value!r}")
    try:
        return TimeLagClass(value)
    except ValueError:
        raise InvalidTimeLagError(f"Unknown fuel time-lag class: {value!r}") from None
