"""Canned NWS responses for running the server without network access.

`transport()` returns an `httpx.MockTransport` that answers the three
endpoints the tools use. Install it with `client.use_transport`.
"""

import httpx

FORECAST_URL = "https://api.weather.gov/gridpoints/MTR/85,105/forecast"

ALERTS = {
    "CA": [
        {
            "properties": {
                "event": "Heat Advisory",
                "areaDesc": "Sacramento Valley",
                "severity": "Moderate",
                "status": "Actual",
                "headline": "Heat Advisory issued for the Sacramento Valley",
            }
        },
        {
            "properties": {
                "event": "Wind Advisory",
                "areaDesc": "San Francisco Bay Shoreline",
                "severity": "Minor",
                "status": "Actual",
            }
        },
    ],
}

POINTS = {"properties": {"forecast": FORECAST_URL}}

FORECAST = {
    "properties": {
        "periods": [
            {
                "name": "Tonight",
                "temperature": 58,
                "temperatureUnit": "F",
                "windSpeed": "5 mph",
                "windDirection": "W",
                "shortForecast": "Partly Cloudy",
            },
            {
                "name": "Saturday",
                "temperature": 72,
                "temperatureUnit": "F",
                "windSpeed": "10 mph",
                "windDirection": "NW",
                "shortForecast": "Sunny",
            },
        ]
    }
}


def handle(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/alerts":
        area = request.url.params.get("area", "")
        return httpx.Response(200, json={"features": ALERTS.get(area, [])})
    if path.startswith("/points/"):
        return httpx.Response(200, json=POINTS)
    if path == httpx.URL(FORECAST_URL).path:
        return httpx.Response(200, json=FORECAST)
    return httpx.Response(404, json={"detail": f"Unknown path {path}"})


def transport() -> httpx.MockTransport:
    return httpx.MockTransport(handle)
