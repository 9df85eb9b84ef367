"""
Logging configuration for the application
"""
import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Console handler installed by configure_logging
_console_handler = None


def configure_logging(level=logging.INFO):
    """
    Configure application-wide logging.

    Calling it again only changes the level.

    Args:
        level (int): Logging level (e.g., logging.INFO, logging.DEBUG)
    """
    global _console_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Only one console handler, even when called repeatedly
    if _console_handler is None or _console_handler not in root_logger.handlers:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(_console_handler)

    # Create logger for our app
    app_logger = logging.getLogger('searchcrawler')
    app_logger.setLevel(level)

    return app_logger
