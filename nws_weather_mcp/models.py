from dataclasses import dataclass
from typing import Any


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_number(value: Any) -> int | float | None:
    # bool is an int subclass but never a temperature
    if isinstance(value, bool):
        return None
    return value if isinstance(value, (int, float)) else None


@dataclass(frozen=True)
class AlertFeature:
    """One entry of the `features` array returned by `/alerts`."""

    event: str | None = None
    area_desc: str | None = None
    severity: str | None = None
    status: str | None = None
    headline: str | None = None

    @classmethod
    def from_json(cls, feature: Any) -> "AlertFeature":
        props = _as_dict(_as_dict(feature).get("properties"))
        return cls(
            event=_as_str(props.get("event")),
            area_desc=_as_str(props.get("areaDesc")),
            severity=_as_str(props.get("severity")),
            status=_as_str(props.get("status")),
            headline=_as_str(props.get("headline")),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    """One entry of `properties.periods` from a gridpoint forecast."""

    name: str | None = None
    temperature: int | float | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    short_forecast: str | None = None

    @classmethod
    def from_json(cls, period: Any) -> "ForecastPeriod":
        period = _as_dict(period)
        return cls(
            name=_as_str(period.get("name")),
            temperature=_as_number(period.get("temperature")),
            temperature_unit=_as_str(period.get("temperatureUnit")),
            wind_speed=_as_str(period.get("windSpeed")),
            wind_direction=_as_str(period.get("windDirection")),
            short_forecast=_as_str(period.get("shortForecast")),
        )


@dataclass(frozen=True)
class PointsResponse:
    """The slice of `/points/{lat},{lon}` we use: the forecast URL."""

    forecast: str | None = None

    @classmethod
    def from_json(cls, payload: Any) -> "PointsResponse":
        props = _as_dict(_as_dict(payload).get("properties"))
        return cls(forecast=_as_str(props.get("forecast")) or None)


def alert_features_from_json(payload: Any) -> list[AlertFeature]:
    features = _as_dict(payload).get("features")
    if not isinstance(features, list):
        return []
    return [AlertFeature.from_json(f) for f in features]


def forecast_periods_from_json(payload: Any) -> list[ForecastPeriod]:
    periods = _as_dict(_as_dict(payload).get("properties")).get("periods")
    if not isinstance(periods, list):
        return []
    return [ForecastPeriod.from_json(p) for p in periods]
