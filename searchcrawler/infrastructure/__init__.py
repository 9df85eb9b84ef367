"""
Infrastructure layer for the search crawler application.

This package contains configuration and logging setup that the core
and presentation layers build on.
"""

from .config import config, load_config, AppConfig, OutputConfig
from .logging_config import configure_logging

__all__ = [
    'config', 'load_config', 'AppConfig', 'OutputConfig',
    'configure_logging'
]
