"""
Settings records for configuration providers.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from dirconf.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class FileConfig:
    """
    Settings of a directory-backed provider.
    
    Attributes:
        directory: Path of the directory holding the configuration files
        watch: Keep monitoring the directory after the first load
    """
    directory: str
    watch: bool = False

    def __post_init__(self):
        if not self.directory:
            raise ConfigurationError("directory", reason="a directory is required")
        if not isinstance(self.watch, bool):
            raise ConfigurationError("watch", self.watch, "must be a boolean")
        # Accept os.PathLike values but always store a plain string
        object.__setattr__(self, "directory", str(self.directory))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileConfig":
        """Build settings from a decoded mapping with ``directory`` and ``watch`` keys."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(reason=f"expected a mapping, got {type(data).__name__}")
        if "directory" not in data:
            raise ConfigurationError("directory", reason="missing required field")
        return cls(directory=data["directory"], watch=data.get("watch", False))
