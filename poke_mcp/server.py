import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP

from .log import setup_logging
from .tools import auto_register_tools


SERVER_NAME = "send-to-poke-mcp"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP) -> AsyncIterator[None]:
	# Entered once the stdio session is up
	logger.info("%s running on stdio", SERVER_NAME)
	yield


def create_server() -> FastMCP:
	mcp = FastMCP(SERVER_NAME, lifespan=_lifespan)
	# FastMCP takes no version argument; set it on the low-level server reported at initialize
	mcp._mcp_server.version = SERVER_VERSION
	auto_register_tools(mcp)
	return mcp


def main() -> None:
	try:
		setup_logging(os.getenv("POKE_LOG_LEVEL", "INFO").upper())
		mcp = create_server()
		mcp.run()
	except Exception:
		logger.exception("Fatal error")
		sys.exit(1)


if __name__ == "__main__":
	main()
