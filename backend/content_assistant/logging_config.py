"""
Application-wide logging configuration.

Console logging with a uniform `timestamp | level | logger | message` format.
Call `configure_logging` once when the app is created; modules then use
`logging.getLogger(__name__)`.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
	"""
	Configure root logging settings.

	Parameters:
		level (str): "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"

	Unknown level names fall back to INFO.
	"""
	logging.basicConfig(
		level=getattr(logging, level.upper(), logging.INFO),
		format=LOG_FORMAT,
	)
	logging.getLogger(__name__).info("Logging initialized with level %s", level)
