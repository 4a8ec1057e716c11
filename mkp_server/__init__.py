"""MKP cognitive enhancement MCP server."""

from mkp_server.config import MKPConfig

__version__ = MKPConfig.SERVER_VERSION
