"""Entry point for the Numbers API server.

This script launches the FastAPI application under Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the session secret, idle timeout and log level
is read from environment variables; see ``numbers_api.app.core.config``
for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from numbers_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from environment variables `API_HOST` and
    `API_PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutting down")


if __name__ == "__main__":
    main()
