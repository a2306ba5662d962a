"""
Provider-related enums for the dirconf package.
"""

from enum import Enum, Flag


class ProviderType(Enum):
    """Source a configuration snapshot was produced by."""
    FILE = "file"

    def __str__(self):
        return self.value


class WatchState(Enum):
    """Lifecycle states of a provider's watch loop."""
    IDLE = "idle"
    WATCHING = "watching"
    CLOSED = "closed"


class FileOperation(Flag):
    """Filesystem operations reported by the watch handle."""
    NONE = 0
    CREATE = 1
    WRITE = 2
    REMOVE = 4
    RENAME = 8
    CHMOD = 16

    # Operations that trigger a reload
    TRIGGERS = CREATE | WRITE | REMOVE | RENAME
