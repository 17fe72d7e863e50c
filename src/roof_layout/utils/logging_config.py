"""
Logging configuration for the roof layout calculator.

This module provides the logging setup shared by both solvers, including a custom
TRACE level used for candidate-by-candidate search diagnostics.
It supports file and console output with different formats.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class RoofLayoutLogger:
    """
    Configures logging for the roof layout calculator.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for rejected search candidates
    - File and console output with different formats and levels
    """

    # Define custom TRACE level (between DEBUG and NOTSET)
    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """
                Log a message with level TRACE.

                Used for every rejected tile count, course count and split point.
                """
                if self.isEnabledFor(RoofLayoutLogger.TRACE_LEVEL):
                    self._log(RoofLayoutLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(debug_mode: bool = False, log_dir: Optional[str] = "logs") -> Optional[str]:
        """
        Configure the logging system for the entire application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files, or None for console only

        Returns:
            Path to the created log file, or None when logging to console only
        """
        RoofLayoutLogger._add_trace_method()

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"roof_layout_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
            root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a configured logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A configured logger
        """
        RoofLayoutLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


# For direct import convenience
def get_logger(name: str, level: Optional[int] = None):
    """
    Get a configured logger for a specific module.

    Convenience function that delegates to RoofLayoutLogger.get_logger.
    """
    return RoofLayoutLogger.get_logger(name, level)
