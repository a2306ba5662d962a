from .enums import ProviderType, WatchState, FileOperation
from .exceptions import (
    DirconfError, ConfigurationError, ProviderError, DecodeError,
    UnsupportedFileTypeError, MergeError, WalkError, WatchSetupError,
    AlreadyWatchingError, ProviderClosedError
)
