import asyncio
import os
import socket
import subprocess
import sys
import time

import pytest

from mcp import ClientSession
from mcp.client.streamable_http import streamable_http_client


@pytest.mark.asyncio
async def test_streamable_http_server_with_fake(tmp_path):
    """Start the server with --use-fake on a random port and call both tools via streamable HTTP."""
    # Find a free port
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()

    mount_path = "/mcp"
    server_uri = f"http://127.0.0.1:{port}{mount_path}"

    # Invoke the package entrypoint directly so it works without installing the console script
    pycmd = "import sys; from nws_weather_mcp import retrieve_weather as r; r.main(sys.argv[1:])"
    cmd = [
        sys.executable,
        "-c",
        pycmd,
        "--transport",
        "streamable-http",
        "--host",
        "127.0.0.1",
        "--port",
        str(port),
        "--mount-path",
        mount_path,
        "--use-fake",
    ]
    env = os.environ.copy()
    env["WEATHER_HOST"] = "127.0.0.1"
    env["WEATHER_PORT"] = str(port)
    env["WEATHER_MOUNT_PATH"] = mount_path

    proc = subprocess.Popen(
        cmd, cwd=os.path.abspath(os.path.join(os.path.dirname(__file__), "..")), env=env
    )

    try:
        # Wait for the server to be reachable
        deadline = time.time() + 10
        while time.time() < deadline:
            try:
                with socket.create_connection(("127.0.0.1", port), timeout=1):
                    break
            except OSError:
                await asyncio.sleep(0.1)
        else:
            pytest.skip("Server did not become reachable in time")

        async with streamable_http_client(server_uri) as ctx:
            # ctx may be (read, write, get_session_id)
            read, write = ctx[0], ctx[1]

            async with ClientSession(read, write) as session:
                await session.initialize()

                resp = await session.list_tools()
                tools = {t.name for t in resp.tools}
                assert {"get-alerts", "get-forecast"} <= tools

                result = await session.call_tool(
                    "get-forecast", {"latitude": 37.7749, "longitude": -122.4194}
                )
                assert not result.isError
                text = "".join(getattr(c, "text", "") for c in result.content)
                assert text.startswith("Forecast for 37.7749, -122.4194:")
                assert "Temperature: 72°F" in text
                assert "Wind: 10 mph NW" in text

                result = await session.call_tool("get-alerts", {"state": "ca"})
                text = "".join(getattr(c, "text", "") for c in result.content)
                assert text.startswith("Active alerts for CA:")
                assert "Event: Heat Advisory" in text

                result = await session.call_tool("get-alerts", {"state": "ny"})
                text = "".join(getattr(c, "text", "") for c in result.content)
                assert text == "No active alerts for NY"

    finally:
        proc.terminate()
        try:
            proc.wait(timeout=2)
        except Exception:
            proc.kill()
