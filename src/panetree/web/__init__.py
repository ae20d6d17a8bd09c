"""Web module - HTTP daemon"""

from .app import create_app, main, start_server
from .server import WebServer

__all__ = ["WebServer", "create_app", "main", "start_server"]
