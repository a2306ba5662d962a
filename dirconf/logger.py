import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


PACKAGE_LOGGER = "dirconf"


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Route structlog and stdlib records through one root handler."""
    
    # Leave an application's own structlog setup alone
    if structlog.is_configured():
        return
    
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and 
            isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return
    
    timestamper = structlog.processors.TimeStamper(fmt="iso")

    # Also applied to stdlib records, e.g. those emitted by watchdog
    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]

    if json_logs:
        # ConsoleRenderer prints tracebacks itself
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


def get_logger(component: str = None, **initial_values: Any):
    """
    Return the package logger, optionally bound to a component name.
    
    Args:
        component: Name of the component emitting the records
        **initial_values: Extra key-value pairs bound to every record
    """
    logger = structlog.stdlib.get_logger(PACKAGE_LOGGER)
    if component:
        initial_values["component"] = component
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def init_logger(config):
    """
    Initialize the structured logger for the dirconf package.
    
    Args:
        config: LoggingConfig with the level and renderer settings
        
    Returns:
        Configured structlog logger for the package
    """
    setup_logging(json_logs=config.json_logs, log_level=config.level)
    return get_logger()
