import logging
import os
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from . import client, fake_nws
from .fetcher import (
    fetch_alerts,
    fetch_forecast_periods,
    fetch_grid_point,
    forecast_url_of,
)
from .formatter import (
    ALERTS_FAILED,
    FORECAST_FAILED,
    FORECAST_URL_MISSING,
    NO_FORECAST_PERIODS,
    format_alerts_reply,
    format_forecast_reply,
    grid_point_failed,
    no_alerts,
)
from .results import Failure

logger = logging.getLogger(__name__)

# Initialize FastMCP server (kept at module level so tools register on import)
# Allow environment variables to configure host/port/mount path at import time
_m_host = os.environ.get("WEATHER_HOST", "127.0.0.1")
_m_port = int(os.environ.get("WEATHER_PORT", "8000"))
_m_mount = os.environ.get("WEATHER_MOUNT_PATH", "/mcp")
mcp = FastMCP(
    "weather",
    host=_m_host,
    port=_m_port,
    mount_path=_m_mount,
    streamable_http_path=_m_mount,
)


@mcp.tool(name="get-alerts", description="Get weather alerts for a state")
async def get_alerts(
    state: Annotated[
        str,
        Field(
            min_length=2,
            max_length=2,
            description="Two-letter state code (e.g. CA, NY)",
        ),
    ],
) -> str:
    """Get active NWS alerts for a US state.

    Every outcome, including upstream failures, is returned as reply text.
    """
    state_code = state.upper()
    result = await fetch_alerts(state_code)

    if isinstance(result, Failure):
        if result.is_missing_data:
            return no_alerts(state_code)
        return ALERTS_FAILED

    return format_alerts_reply(state_code, result.value)


@mcp.tool(name="get-forecast", description="Get weather forecast for a location")
async def get_forecast(
    latitude: Annotated[
        float, Field(ge=-90, le=90, description="Latitude of the location")
    ],
    longitude: Annotated[
        float, Field(ge=-180, le=180, description="Longitude of the location")
    ],
) -> str:
    """Get the NWS forecast for a location.

    First resolves the coordinates to a grid point, then fetches the
    forecast URL that grid point advertises. Stops at the first step that
    fails and returns a message describing it.
    """
    grid_point = await fetch_grid_point(latitude, longitude)
    if isinstance(grid_point, Failure):
        return grid_point_failed(latitude, longitude)

    forecast_url = forecast_url_of(grid_point.value)
    if isinstance(forecast_url, Failure):
        return FORECAST_URL_MISSING

    periods = await fetch_forecast_periods(forecast_url.value)
    if isinstance(periods, Failure):
        if periods.is_missing_data:
            return NO_FORECAST_PERIODS
        return FORECAST_FAILED

    return format_forecast_reply(latitude, longitude, periods.value)


def main(argv=None):
    """Entry point for running the weather MCP server.

    Accepts an optional argv list (for console scripts or tests). Supported options:
      --version    Print package version and exit
      run (default) Start the MCP server
    """
    import argparse

    parser = argparse.ArgumentParser(prog="nws-weather-mcp")
    parser.add_argument("command", nargs="?", choices=["run"], default="run")
    parser.add_argument(
        "--version", action="store_true", help="Print package version and exit"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http", "sse"],
        default=os.environ.get("WEATHER_TRANSPORT", "stdio"),
        help="Transport to use (default: stdio)",
    )
    parser.add_argument(
        "--mount-path",
        default=os.environ.get("WEATHER_MOUNT_PATH", "/mcp"),
        help="Mount path for HTTP transports (default: /mcp)",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("WEATHER_HOST", "127.0.0.1"),
        help="Host to bind the HTTP server to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("WEATHER_PORT", "8000")),
        help="Port to bind the HTTP server to",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("WEATHER_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--use-fake",
        action="store_true",
        help="Serve canned NWS responses instead of calling the API (for testing)",
    )
    args = parser.parse_args(argv)

    if args.version:
        try:
            from importlib.metadata import version

            print(version("nws-weather-mcp"))
        except Exception:
            print("version unknown")
        return

    # stdout belongs to the stdio transport
    logging.basicConfig(
        level=args.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.use_fake:
        logger.info("Serving canned NWS responses")
        client.use_transport(fake_nws.transport())

    mcp.settings.host = args.host
    mcp.settings.port = args.port
    mcp.settings.mount_path = args.mount_path
    mcp.settings.streamable_http_path = args.mount_path

    logger.info("Weather MCP Server running on %s", args.transport)
    try:
        mcp.run(transport=args.transport, mount_path=args.mount_path)
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
