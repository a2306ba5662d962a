"""
Core enums for the dirconf package.
"""

from .provider import (
    ProviderType,
    WatchState,
    FileOperation
)

__all__ = [
    'ProviderType',
    'WatchState',
    'FileOperation'
]
