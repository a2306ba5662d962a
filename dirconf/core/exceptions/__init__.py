"""
Core exceptions for the dirconf package.

This module provides all exception classes used throughout dirconf,
with a single root so callers can catch everything at once.
"""

# Base exceptions
from .base import (
    DirconfError,
    ConfigurationError
)

# Provider exceptions
from .provider import (
    ProviderError,
    DecodeError,
    UnsupportedFileTypeError,
    MergeError,
    WalkError,
    WatchSetupError,
    AlreadyWatchingError,
    ProviderClosedError
)

__all__ = [
    # Base exceptions
    'DirconfError',
    'ConfigurationError',
    
    # Provider exceptions
    'ProviderError',
    'DecodeError',
    'UnsupportedFileTypeError',
    'MergeError',
    'WalkError',
    'WatchSetupError',
    'AlreadyWatchingError',
    'ProviderClosedError'
]
