import logging
import os

import httpx

from .results import Failure, NetworkFailure, Result, Success

logger = logging.getLogger(__name__)

# Base URL for the National Weather Service API
NWS_API_BASE = os.environ.get("WEATHER_NWS_BASE", "https://api.weather.gov").rstrip("/")
USER_AGENT = "weather-app/1.0"

NWS_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/geo+json",
}


def _timeout_from_env() -> float | None:
    raw = os.environ.get("WEATHER_HTTP_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric WEATHER_HTTP_TIMEOUT=%r", raw)
        return None


HTTP_TIMEOUT = _timeout_from_env()

# When set, every request is routed through this transport instead of the
# network (see `fake_nws` and the tests).
_transport: httpx.AsyncBaseTransport | None = None


def use_transport(transport: httpx.AsyncBaseTransport | None) -> None:
    """Route NWS requests through `transport`; pass None to restore the network."""
    global _transport
    _transport = transport


async def make_nws_request(url: str, params: dict | None = None) -> Result:
    """GET `url` from the NWS API and decode the JSON body.

    Returns `Success(body)` or `Failure(NetworkFailure)`. A `null` body counts
    as a failed fetch. Errors are logged here and never raised to the caller.
    """
    try:
        async with httpx.AsyncClient(
            headers=NWS_HEADERS, timeout=HTTP_TIMEOUT, transport=_transport
        ) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            body = response.json()
    except Exception as exc:
        logger.error("Error making NWS request to %s: %s", url, exc)
        return Failure(NetworkFailure(f"{url}: {exc}"))

    if body is None:
        logger.error("Empty JSON body from NWS request to %s", url)
        return Failure(NetworkFailure(f"{url}: empty body"))
    return Success(body)
