"""Gap filling for weather series.

Missing values are filled by linear interpolation on sample index, one
field at a time: the nearest valid temperature need not sit at the same
index as the nearest valid humidity.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from fuelmoist.errors import InvalidSeriesError
from fuelmoist.types import WeatherSample
from fuelmoist.validation import is_finite_number, is_number

INTERPOLATED_FIELDS = ("temperature", "relative_humidity")


def is_missing(value: Any) -> bool:
    """None, NaN and infinities count as missing."""
    return value is None or (is_number(value) and not math.isfinite(value))


def as_sample(item: WeatherSample | Mapping[str, Any], index: int) -> WeatherSample:
    """Normalize a series element to a WeatherSample."""
    if isinstance(item, WeatherSample):
        return item
    if isinstance(item, Mapping):
        return WeatherSample.from_mapping(item)
    raise InvalidSeriesError(
        f"Sample {index} must be a WeatherSample or mapping, got {type(item).__name__}"
    )


def fill_gaps(values: Sequence[float | None]) -> list[float | None]:
    """Fill missing entries of a single field.

    Leading gaps take the first valid value, trailing gaps the last valid
    value, and interior gaps are weighted by index distance to the
    valid neighbours. A field with no valid value is returned unchanged.

    >>> fill_gaps([70.0, None, 80.0])
    [70.0, 75.0, 80.0]
    """
    for i, v in enumerate(values):
        if not is_missing(v) and not is_finite_number(v):
            raise InvalidSeriesError(f"Sample {i} has a non-numeric value: {v!r}")
    valid = [i for i, v in enumerate(values) if not is_missing(v)]
    if not valid:
        return list(values)

    filled: list[float | None] = list(values)
    first, last = valid[0], valid[-1]
    for i in range(first):
        filled[i] = values[first]
    for i in range(last + 1, len(values)):
        filled[i] = values[last]

    for left, right in zip(valid, valid[1:]):
        span = right - left
        if span <= 1:
            continue
        lo, hi = values[left], values[right]
        for i in range(left + 1, right):
            filled[i] = lo + (hi - lo) * (i - left) / span
    return filled


def interpolate_series(
    samples: Sequence[WeatherSample | Mapping[str, Any]],
) -> list[WeatherSample]:
    """Fill missing temperature and humidity values in a series.

    Missing means None or a non-finite float. Wind is passed through as
    given: a sample without wind keeps wind=None. The input is not
    modified.

    Args:
        samples: WeatherSample records or {temp, rh, wind, label} mappings

    Returns:
        New list of WeatherSample (empty for empty input)

    Raises:
        InvalidSeriesError: If samples is not a sequence or an element is
            neither a WeatherSample nor a mapping
    """
    if isinstance(samples, (str, bytes)) or not isinstance(samples, Sequence):
        raise InvalidSeriesError(f"samples must be a sequence, got {type(samples).__name__}")
    series = [as_sample(item, i) for i, item in enumerate(samples)]
    if not series:
        return []

    columns = {
        name: fill_gaps([getattr(sample, name) for sample in series])
        for name in INTERPOLATED_FIELDS
    }
    return [
        replace(sample, **{name: columns[name][i] for name in INTERPOLATED_FIELDS})
        for i, sample in enumerate(series)
    ]
