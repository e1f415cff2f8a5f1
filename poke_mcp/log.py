import logging
import sys


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
	# stdout carries the MCP stream; diagnostics must go to stderr
	logger = logging.getLogger("poke_mcp")
	logger.setLevel(level)
	if not logger.handlers:
		sh = logging.StreamHandler(sys.stderr)
		sh.setFormatter(logging.Formatter(LOG_FORMAT))
		logger.addHandler(sh)
	logger.propagate = False
	return logger
