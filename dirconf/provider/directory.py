"""
Directory-backed configuration provider.

Every file below a directory is decoded and merged into a single snapshot;
optionally the directory is watched and a fresh snapshot is published on
each relevant change.
"""

import os
import threading
from queue import Queue
from typing import Any, Callable, Dict, Iterator, List, Optional

from dirconf.config import FileConfig
from dirconf.core.enums import FileOperation, ProviderType, WatchState
from dirconf.core.exceptions import (
    AlreadyWatchingError,
    DecodeError,
    MergeError,
    ProviderClosedError,
    ProviderError,
    WalkError,
    WatchSetupError,
)
from dirconf.logger import get_logger

from .base import ConfigProvider, Data
from .decoder import read_config_file
from .merge import deep_merge
from .watcher import FileEvent, WatchHandle


class DirectoryConfigProvider(ConfigProvider):
    """
    Load and optionally watch a directory of JSON and YAML files.
    
    Files are visited depth-first in lexical order and deep-merged, so a
    lexically later file overrides keys set by an earlier one. When
    ``config.watch`` is set, ``provide`` starts a background thread that
    reloads the directory on every create, write, remove or rename and puts
    the new snapshot onto the caller's queue. The put blocks, so a slow
    consumer throttles the watcher instead of letting snapshots pile up.
    """

    provider_type = ProviderType.FILE

    def __init__(
        self,
        config: FileConfig,
        logger=None,
        watcher_factory: Callable[[], WatchHandle] = WatchHandle
    ):
        """
        Parameters
        ----------
        config : FileConfig
            Directory to read and whether to keep watching it
        logger : optional
            structlog-style logger, defaults to the package logger
        watcher_factory : callable
            Builds the watch handle; replaced in tests
        """
        self.config = config
        self.logger = logger or get_logger("DirectoryConfigProvider")
        self._watcher_factory = watcher_factory

        # Watch handle slot, installed at most once
        self._slot_lock = threading.Lock()
        self._handle: Optional[WatchHandle] = None
        self._closed = False
        self._state = WatchState.IDLE

        self._threads: List[threading.Thread] = []

    @property
    def directory(self) -> str:
        return self.config.directory

    @property
    def state(self) -> WatchState:
        return self._state

    @property
    def is_watching(self) -> bool:
        handle = self._handle
        return (
            self._state is WatchState.WATCHING
            and handle is not None
            and not handle.closed
        )

    def provide(self, data_queue: "Queue[Data]") -> Data:
        """
        Load the directory once and, when watching, start the watch loop.
        
        Returns
        -------
        Data
            The initial snapshot. In watch mode a failed initial load is
            logged and an empty snapshot is returned instead.
            
        Raises
        ------
        ProviderError
            If the initial load fails and watching is disabled
        """
        try:
            data = self.load()
        except ProviderError as e:
            if not self.config.watch:
                raise
            self.logger.error("initial load failed, waiting for changes",
                              error=str(e),
                              dir=self.directory)
            data = Data.empty(self.provider_type)

        if self.config.watch:
            thread = threading.Thread(
                target=self._watch_in_background,
                args=(data_queue,),
                name=f"DirectoryConfigProvider-{os.path.basename(self.directory)}",
                daemon=True
            )
            self._threads.append(thread)
            thread.start()

        return data

    def _watch_in_background(self, data_queue: "Queue[Data]"):
        try:
            self.watch(data_queue)
        except Exception as e:
            self.logger.error("failed while watching provider",
                              error=str(e),
                              provider=str(self.provider_type))

    def watch(self, data_queue: "Queue[Data]") -> None:
        """
        Block, publishing a new snapshot after every relevant change.
        
        Returns once the watch handle is closed.
        
        Raises
        ------
        AlreadyWatchingError
            If a watch handle is already installed on this provider
        ProviderClosedError
            If the provider has been closed
        WatchSetupError
            If the monitor cannot be created or the directory registered
        """
        handle = self._install_handle()
        try:
            try:
                handle.add(self.directory)
            except Exception as e:
                raise WatchSetupError(self.directory, str(e)) from e

            self._state = WatchState.WATCHING
            self.logger.debug("watching directory", dir=self.directory)

            while True:
                item = handle.events.get()

                # Events still queued when the handle closed are dropped
                if item is None or handle.closed:
                    self.logger.debug("closing file watcher",
                                      cause="watcher event queue closed",
                                      dir=self.directory)
                    return

                if isinstance(item, BaseException):
                    self.logger.error("error while watching directory",
                                      error=str(item),
                                      dir=self.directory)
                    continue

                if not self._is_trigger(item):
                    continue

                try:
                    data = self.load()
                except ProviderError:
                    # Files may be unreadable halfway through a save
                    continue

                if handle.closed:
                    self.logger.debug("closing file watcher",
                                      cause="watch handle closed during reload",
                                      dir=self.directory)
                    return
                data_queue.put(data)
        finally:
            handle.close()
            self._state = WatchState.CLOSED

    @staticmethod
    def _is_trigger(event: FileEvent) -> bool:
        return bool(event.op & FileOperation.TRIGGERS)

    def _install_handle(self) -> WatchHandle:
        with self._slot_lock:
            if self._closed or self._state is WatchState.CLOSED:
                raise ProviderClosedError(self.directory)
            if self._handle is not None:
                raise AlreadyWatchingError(self.directory)
            try:
                self._handle = self._watcher_factory()
            except Exception as e:
                raise WatchSetupError(self.directory, str(e)) from e
            return self._handle

    def close(self) -> None:
        """
        Release the watch handle if one is installed.
        
        Safe to call on a provider that never started watching and safe to
        call more than once. Closing is terminal: later watch attempts fail.
        """
        with self._slot_lock:
            self._closed = True
            handle = self._handle

        if handle is None:
            return
        handle.close()

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the background watch threads to exit.

        Returns True when no watch thread is running any more.
        """
        for thread in self._threads:
            thread.join(timeout)
        return not any(thread.is_alive() for thread in self._threads)

    def load(self) -> Data:
        """
        Read and merge every file below the directory.
        
        Raises
        ------
        WalkError
            If the directory cannot be traversed
        DecodeError
            If any file cannot be read or decoded
        MergeError
            If a decoded file cannot be merged
        """
        accumulator: Dict[str, Any] = {}

        for path in self._walk(self.directory):
            try:
                deep_merge(accumulator, read_config_file(path))
            except DecodeError as e:
                self.logger.error("failed to read config",
                                  error=str(e),
                                  configPath=path)
                raise
            except MergeError as e:
                raise MergeError(path, e.reason) from e

        return Data(type=self.provider_type, config=accumulator)

    def _walk(self, directory: str) -> Iterator[str]:
        """Yield file paths depth-first, entries sorted by name."""
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise WalkError(directory, e.strerror or str(e)) from e

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                raise WalkError(entry.path, e.strerror or str(e)) from e

            if is_dir:
                # Symlinked directories are neither read nor descended
                if not entry.is_symlink():
                    yield from self._walk(entry.path)
                continue

            yield entry.path
