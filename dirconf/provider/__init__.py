"""
Configuration providers.

- ConfigProvider: abstract contract shared by all configuration sources
- DirectoryConfigProvider: merges and watches a directory of JSON/YAML files
- read_config_file / deep_merge: the decode and merge steps, usable on their own
"""

from .base import ConfigProvider, Data
from .decoder import read_config_file
from .merge import deep_merge
from .watcher import FileEvent, WatchHandle
from .directory import DirectoryConfigProvider

__all__ = [
    'ConfigProvider',
    'Data',
    'DirectoryConfigProvider',
    'FileEvent',
    'WatchHandle',
    'read_config_file',
    'deep_merge'
]
