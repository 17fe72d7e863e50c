# api/utils/logging.py
import logging
import sys
import time

from api.utils.config import Config


class TimezoneFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        # Use local time for log timestamps
        return time.strftime(datefmt or self.default_time_format,
                             time.localtime(record.created))


def setup_logger(name):
    """Set up a logger with proper formatting and handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if Config.is_production() else logging.DEBUG)

    # Root handlers belong to the solver logging setup
    logger.propagate = False

    # One stream handler per logger
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(TimezoneFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(handler)

    return logger
