"""Shared field types for request and response models."""

from __future__ import annotations

from typing import Annotated

from pydantic import AllowInfNan, Strict

# JSON numbers only: no string coercion, no NaN/Infinity.
Number = Annotated[float, Strict(), AllowInfNan(False)]

# Fuel moisture keyed by time-lag class hours, e.g. {"1": 10.0, "10": 12.0}.
MoistureByClass = dict[int, Number]
