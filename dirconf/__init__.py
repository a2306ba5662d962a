from dirconf.config import FileConfig, LoggingConfig
from dirconf.core.enums import ProviderType, WatchState, FileOperation
from dirconf.core.exceptions import (
    DirconfError, ConfigurationError, ProviderError, DecodeError,
    UnsupportedFileTypeError, MergeError, WalkError, WatchSetupError,
    AlreadyWatchingError, ProviderClosedError
)
from dirconf.logger import get_logger, init_logger, setup_logging
from dirconf.provider import (
    ConfigProvider, Data, DirectoryConfigProvider, FileEvent, WatchHandle,
    read_config_file, deep_merge
)

__version__ = "0.1.0"
