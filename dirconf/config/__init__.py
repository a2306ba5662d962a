"""
Settings records for dirconf providers and logging.
"""

from .provider_config import FileConfig
from .logging_config import (
    LoggingConfig, get_default_logging_config, get_debug_logging_config
)

__all__ = [
    'FileConfig',
    'LoggingConfig',
    'get_default_logging_config',
    'get_debug_logging_config'
]
