"""
Logging configuration for the dirconf package.
"""

from dataclasses import dataclass

from dirconf.core.exceptions import ConfigurationError


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Settings consumed by :func:`dirconf.logger.init_logger`."""
    level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        if not isinstance(self.level, str) or self.level.upper() not in _LEVELS:
            raise ConfigurationError("level", self.level, f"must be one of {', '.join(_LEVELS)}")
        self.level = self.level.upper()


def get_default_logging_config() -> LoggingConfig:
    """Console output at INFO level."""
    return LoggingConfig()


def get_debug_logging_config() -> LoggingConfig:
    """Console output at DEBUG level, which includes watcher shutdown records."""
    return LoggingConfig(level="DEBUG")
