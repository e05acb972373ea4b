"""Bridges API schemas and the fuelmoist engine.

Each function takes a validated request model, calls the engine, and
converts the engine's frozen dataclasses into response models. Engine
errors propagate to the app-level handler.
"""

from __future__ import annotations

from fuelmoist import (
    TrendOptions,
    analyze_drying_pattern,
    predict_drying_trend,
    run_model,
    simulate_drying,
)
from fuelmoist.moisture.constants import get_time_lag_class
from fuelmoist.types import (
    DryingPoint,
    ForecastPeriod,
    TimeLagClass,
    TrendPrediction,
    WeatherSample,
)

from fuelmoist_api.schemas.forecast import (
    AnalysisRequest,
    AnalysisResponse,
    CriticalPeriodOut,
    DryingPointIO,
    DryingRequest,
    DryingResponse,
    ForecastRequest,
    ForecastResponse,
    ForecastSummaryOut,
    PeriodOut,
    RateStatsOut,
)
from fuelmoist_api.schemas.trend import (
    TrendEntryOut,
    TrendMetadataOut,
    TrendRequest,
    TrendResponse,
    TrendSummaryOut,
    WeatherSampleIn,
)


def _by_hours(values: dict[TimeLagClass, float]) -> dict[int, float]:
    return {int(cls): value for cls, value in values.items()}


def run_forecast(request: ForecastRequest) -> ForecastResponse:
    """Run a multi-period forecast for the requested fuel classes."""
    periods = [
        ForecastPeriod(
            temperature=p.temp,
            relative_humidity=p.rh,
            hours=p.hours,
            wind=p.wind,
            label=p.label,
        )
        for p in request.periods
    ]
    result = run_model(
        request.initial_moisture,
        periods,
        default_hours=request.default_hours,
        critical_threshold=request.critical_threshold,
        label_prefix=request.label_prefix,
    )
    return ForecastResponse(
        initial_moisture=_by_hours(result.initial_moisture),
        critical_threshold=result.critical_threshold,
        periods=[
            PeriodOut(
                label=p.label,
                temp=p.temperature,
                rh=p.relative_humidity,
                hours=p.hours,
                emc=p.emc,
                moisture=_by_hours(p.moisture),
                wind=p.wind,
            )
            for p in result.periods
        ],
        summary=ForecastSummaryOut(
            first_critical={int(cls): label for cls, label in result.summary.first_critical.items()},
            final_moisture=_by_hours(result.summary.final_moisture),
        ),
    )


def _sample(item: WeatherSampleIn) -> WeatherSample:
    return WeatherSample(
        temperature=item.temp,
        relative_humidity=item.rh,
        wind=item.wind,
        label=item.label,
    )


def _trend_to_schema(prediction: TrendPrediction) -> TrendResponse:
    meta = prediction.metadata
    summary = prediction.summary
    return TrendResponse(
        metadata=TrendMetadataOut(
            initial_moisture=meta.initial_moisture,
            time_lag=meta.time_lag,
            resolution=meta.resolution.value,
            hours_per_sample=meta.hours_per_sample,
            critical_threshold=meta.critical_threshold,
            interpolate_missing=meta.interpolate_missing,
            historical_count=meta.historical_count,
            forecast_count=meta.forecast_count,
        ),
        trend=[
            TrendEntryOut(
                label=entry.label,
                type=entry.kind.value,
                temp=round(entry.temperature, 2),
                rh=round(entry.relative_humidity, 2),
                emc=entry.emc,
                moisture=entry.moisture,
                effective_time_lag=round(entry.effective_time_lag, 3),
                wind=entry.wind,
            )
            for entry in prediction.trend
        ],
        summary=TrendSummaryOut(
            starting_moisture=summary.starting_moisture,
            ending_moisture=summary.ending_moisture,
            moisture_change=summary.moisture_change,
            critical_time=summary.critical_time,
            below_critical=summary.below_critical,
            min_moisture=summary.min_moisture,
            max_moisture=summary.max_moisture,
        ),
    )


def predict_trend(request: TrendRequest) -> TrendResponse:
    """Predict a drying trend for one time-lag constant."""
    options = TrendOptions(
        resolution=request.resolution,
        interpolate_missing=request.interpolate_missing,
        critical_threshold=request.critical_threshold,
    )
    prediction = predict_drying_trend(
        request.current_moisture,
        [_sample(s) for s in request.historical],
        [_sample(s) for s in request.forecast],
        request.time_lag,
        options,
    )
    return _trend_to_schema(prediction)


def _point_to_schema(point: DryingPoint) -> DryingPointIO:
    return DryingPointIO(hour=point.hour, moisture=_by_hours(point.moisture), emc=point.emc)


def simulate(request: DryingRequest) -> DryingResponse:
    """Simulate drying under constant weather."""
    result = simulate_drying(
        request.initial_moisture,
        request.temp,
        request.rh,
        request.duration_hours,
        request.step_hours,
    )
    return DryingResponse(
        emc=result.emc,
        series=[_point_to_schema(p) for p in result.series],
        initial=_by_hours(result.initial),
        final=_by_hours(result.final),
    )


def analyze(request: AnalysisRequest) -> AnalysisResponse:
    """Analyze a moisture series for drying rates and critical periods."""
    points = [
        DryingPoint(
            hour=p.hour,
            moisture={get_time_lag_class(k): v for k, v in p.moisture.items()},
            emc=p.emc,
        )
        for p in request.points
    ]
    analysis = analyze_drying_pattern(points, request.critical_threshold)
    return AnalysisResponse(
        critical_threshold=analysis.critical_threshold,
        drying_rates={
            int(cls): RateStatsOut(avg=s.avg, max=s.max, min=s.min)
            for cls, s in analysis.drying_rates.items()
        },
        threshold_crossings={int(cls): hour for cls, hour in analysis.threshold_crossings.items()},
        critical_periods=[
            CriticalPeriodOut(start=c.start, end=c.end, duration=c.duration)
            for c in analysis.critical_periods
        ],
    )
