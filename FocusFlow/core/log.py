import logging
from FocusFlow.core import settings

# Single process-wide logging configuration
logging.basicConfig(
	level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
	format="%(asctime)s %(levelname)s %(name)s:%(lineno)d %(message)s",
)

def get_logger(name: str, level=None) -> logging.Logger:
	"""Return the named logger, optionally overriding its level."""
	logger = logging.getLogger(name)
	if level:
		logger.setLevel(level)
	return logger
