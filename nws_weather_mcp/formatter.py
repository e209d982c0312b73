from .models import AlertFeature, ForecastPeriod

UNKNOWN = "Unknown"


def format_alert(alert: AlertFeature) -> str:
    """Format an alert into the fixed six-line block ending in `---`."""
    return "\n".join(
        [
            f"Event: {alert.event or UNKNOWN}",
            f"Area: {alert.area_desc or UNKNOWN}",
            f"Severity: {alert.severity or UNKNOWN}",
            f"Status: {alert.status or UNKNOWN}",
            f"Headline: {alert.headline or 'No headline'}",
            "---",
        ]
    )


def _describe_temperature(period: ForecastPeriod) -> str:
    temperature = UNKNOWN if period.temperature is None else period.temperature
    return f"{temperature}°{period.temperature_unit or 'F'}"


def format_period(period: ForecastPeriod) -> str:
    return "\n".join(
        [
            f"{period.name or UNKNOWN}:",
            f"Temperature: {_describe_temperature(period)}",
            f"Wind: {period.wind_speed or UNKNOWN} {period.wind_direction or ''}",
            period.short_forecast or "No forecast available",
            "---",
        ]
    )


def format_coordinate(value: float) -> str:
    """Render a coordinate as received, without a trailing `.0` on whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_alerts_reply(state: str, alerts: list[AlertFeature]) -> str:
    body = "\n".join(format_alert(alert) for alert in alerts)
    return f"Active alerts for {state}:\n\n{body}"


def format_forecast_reply(
    latitude: float, longitude: float, periods: list[ForecastPeriod]
) -> str:
    body = "\n".join(format_period(period) for period in periods)
    return (
        f"Forecast for {format_coordinate(latitude)}, {format_coordinate(longitude)}:"
        f"\n\n{body}"
    )


# Fixed replies for the failure paths of the two tools.
ALERTS_FAILED = "Failed to retrieve alerts data"
FORECAST_URL_MISSING = "Failed to get forecast URL from grid point data"
FORECAST_FAILED = "Failed to retrieve forecast data"
NO_FORECAST_PERIODS = "No forecast periods available"


def no_alerts(state: str) -> str:
    return f"No active alerts for {state}"


def grid_point_failed(latitude: float, longitude: float) -> str:
    return (
        "Failed to retrieve grid point data for coordinates: "
        f"{format_coordinate(latitude)}, {format_coordinate(longitude)}. "
        "This location may not be supported by the NWS API "
        "(only US locations are supported)."
    )
