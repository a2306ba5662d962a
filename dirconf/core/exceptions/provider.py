"""
Exceptions raised while loading and watching configuration directories.
"""

from .base import DirconfError


class ProviderError(DirconfError):
    """Base exception for configuration provider errors."""
    pass


class DecodeError(ProviderError):
    """A configuration file could not be read or parsed."""
    
    def __init__(self, path: str, reason: str = None):
        self.path = str(path)
        self.reason = reason
        message = f"could not read {self.path}"
        if reason:
            message += f"; {reason}"
        super().__init__(message)


class UnsupportedFileTypeError(DecodeError):
    """A configuration file has an extension with no known decoder."""
    
    def __init__(self, path: str):
        super().__init__(path, "unsupported file type")


class MergeError(ProviderError):
    """A decoded file could not be merged into the accumulated configuration."""
    
    def __init__(self, path: str = None, reason: str = None):
        self.path = str(path) if path is not None else None
        self.reason = reason
        message = "could not merge configuration"
        if self.path:
            message += f" from {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class WalkError(ProviderError):
    """The configuration directory could not be traversed."""
    
    def __init__(self, path: str, reason: str = None):
        self.path = str(path)
        self.reason = reason
        message = f"could not walk {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class WatchSetupError(ProviderError):
    """The filesystem monitor could not be created or registered."""
    
    def __init__(self, directory: str, reason: str = None):
        self.directory = str(directory)
        self.reason = reason
        message = f"could not watch {self.directory}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class AlreadyWatchingError(ProviderError):
    """A second watch was attempted while one is installed."""
    
    def __init__(self, directory: str):
        self.directory = str(directory)
        super().__init__(f"already watching {self.directory}")


class ProviderClosedError(ProviderError):
    """A watch was attempted on a provider that has been closed."""
    
    def __init__(self, directory: str):
        self.directory = str(directory)
        super().__init__(f"provider for {self.directory} is closed")
