"""Entry point for the Art Exhibition API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the environment variables ``API_HOST``
and ``API_PORT``; all other configuration is described in
``exhibition_api.app.core.config``.

Usage:
    python run.py
"""
import logging
import os

from uvicorn import Config, Server

from exhibition_api.app.main import app


def main() -> None:
    """Start the API server.  Defaults are ``0.0.0.0`` and ``8000``."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%s", host, port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
