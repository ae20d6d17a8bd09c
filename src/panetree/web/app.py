"""FastAPI application setup"""

import asyncio

import uvicorn

from .. import config
from ..adapters import create_adapter
from ..commands import ReconcileCommand
from ..engine import PanetreeEngine
from ..errors import PanetreeError
from ..telemetry import get_logger, setup_logging
from .server import WebServer

logger = get_logger(__name__)


def create_app(engine: PanetreeEngine) -> WebServer:
    """Create the web application"""
    return WebServer(engine)


async def start_server(
    adapter_type: str | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Start the daemon: build the engine, reconcile once, serve HTTP."""
    engine = PanetreeEngine(create_adapter(adapter_type))
    server = create_app(engine)

    try:
        result = await engine.dispatch(ReconcileCommand())
        logger.info(f"[Server] {result.message}")
    except PanetreeError as e:
        logger.warning(f"[Server] initial reconcile failed: {e}")

    host = host or config.SERVER_HOST
    port = port or config.SERVER_PORT
    uvicorn_config = uvicorn.Config(server.app, host=host, port=port, log_level="info")
    uvicorn_server = uvicorn.Server(uvicorn_config)

    logger.info(f"[Server] panetree ({engine.adapter.name}) listening on http://{host}:{port}")
    await uvicorn_server.serve()


def main(adapter_type: str | None = None, host: str | None = None, port: int | None = None):
    """Entry point"""
    setup_logging()
    try:
        asyncio.run(start_server(adapter_type, host, port))
    except KeyboardInterrupt:
        print("\nServer stopped")
