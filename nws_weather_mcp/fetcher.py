import logging

from .client import NWS_API_BASE, make_nws_request
from .models import (
    PointsResponse,
    alert_features_from_json,
    forecast_periods_from_json,
)
from .results import Failure, MissingData, Result, Success

logger = logging.getLogger(__name__)


def alerts_url() -> str:
    return f"{NWS_API_BASE}/alerts"


def points_url(latitude: float, longitude: float) -> str:
    # the points endpoint expects at most four decimal places
    return f"{NWS_API_BASE}/points/{latitude:.4f},{longitude:.4f}"


def _missing(message: str) -> Failure:
    logger.info(message)
    return Failure(MissingData(message))


async def fetch_alerts(state: str) -> Result:
    """Fetch active alerts for an (already upper-cased) state code.

    Returns `Success(list[AlertFeature])`; an empty feature list is a
    `Failure(MissingData)`.
    """
    result = await make_nws_request(alerts_url(), params={"area": state})
    if isinstance(result, Failure):
        return result

    alerts = alert_features_from_json(result.value)
    if not alerts:
        return _missing(f"No active alerts for {state}")
    return Success(alerts)


# The forecast is a two-step pipeline: the points endpoint maps coordinates to
# a gridpoint forecast URL, which is then fetched. Each step returns a result
# so the caller can stop at the first failure.


async def fetch_grid_point(latitude: float, longitude: float) -> Result:
    result = await make_nws_request(points_url(latitude, longitude))
    if isinstance(result, Failure):
        return result
    return Success(PointsResponse.from_json(result.value))


def forecast_url_of(points: PointsResponse) -> Result:
    if not points.forecast:
        return _missing("Grid point response has no forecast URL")
    return Success(points.forecast)


async def fetch_forecast_periods(forecast_url: str) -> Result:
    result = await make_nws_request(forecast_url)
    if isinstance(result, Failure):
        return result

    periods = forecast_periods_from_json(result.value)
    if not periods:
        return _missing(f"No forecast periods at {forecast_url}")
    return Success(periods)
