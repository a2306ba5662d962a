"""
Filesystem watch handle built on watchdog.

The handle turns watchdog callbacks into items on a single queue so one
worker thread can block on it:

- a :class:`FileEvent` for every filesystem change,
- an exception instance for every error raised while dispatching, and
  when a watched root directory is removed,
- ``None`` once the handle has been closed.
"""

import errno
import os
import threading
from dataclasses import dataclass
from queue import Queue
from typing import Optional, Union

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from dirconf.core.enums import FileOperation


@dataclass(frozen=True)
class FileEvent:
    """A filesystem change observed under a watched directory."""
    path: str
    op: FileOperation
    dest_path: Optional[str] = None


WatchItem = Union[FileEvent, BaseException, None]


_OPERATIONS = {
    EVENT_TYPE_CREATED: FileOperation.CREATE,
    EVENT_TYPE_MODIFIED: FileOperation.WRITE,
    EVENT_TYPE_DELETED: FileOperation.REMOVE,
    EVENT_TYPE_MOVED: FileOperation.RENAME,
}


def to_file_event(event: FileSystemEvent) -> FileEvent:
    """Translate a watchdog event into a :class:`FileEvent`."""
    if event.is_directory and event.event_type == EVENT_TYPE_MODIFIED:
        # Metadata echo of a child change; the child reports its own event
        op = FileOperation.CHMOD
    else:
        # open/close notifications carry no content change
        op = _OPERATIONS.get(event.event_type, FileOperation.CHMOD)

    dest_path = getattr(event, "dest_path", None) or None
    return FileEvent(
        path=os.fsdecode(event.src_path),
        op=op,
        dest_path=os.fsdecode(dest_path) if dest_path else None,
    )


class _QueueingHandler(FileSystemEventHandler):
    """Push every watchdog event, or the error it raised, onto a queue."""

    def __init__(self, handle: "WatchHandle"):
        super().__init__()
        self._handle = handle
        self.roots = set()

    def dispatch(self, event: FileSystemEvent) -> None:
        try:
            item = to_file_event(event)
        except Exception as e:
            self._handle.report_error(e)
            return
        self._handle.events.put(item)

        # The emitter for a removed root stops delivering events
        removed = item.op & (FileOperation.REMOVE | FileOperation.RENAME)
        if removed and os.path.abspath(item.path) in self.roots:
            self._handle.report_error(FileNotFoundError(
                errno.ENOENT, "watched directory was removed", item.path
            ))


class WatchHandle:
    """
    A live filesystem subscription.
    
    ``events`` is fed by the watchdog observer thread; once ``close`` has run
    it receives a final ``None``.
    """

    def __init__(self, observer_factory=Observer):
        self.events: "Queue[WatchItem]" = Queue()
        self._observer = observer_factory()
        self._handler = _QueueingHandler(self)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, path, recursive: bool = True) -> None:
        """Register ``path`` and start delivering its events."""
        with self._lock:
            if self._closed:
                return
            path = os.fspath(path)
            self._handler.roots.add(os.path.abspath(path))
            self._observer.schedule(self._handler, path, recursive=recursive)
            if not self._observer.is_alive():
                self._observer.start()

    def report_error(self, error: BaseException) -> None:
        """Queue an error for the worker; it is logged and watching goes on."""
        self.events.put(error)

    def close(self) -> None:
        """Stop the observer and signal the end of the event stream. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            if self._observer.is_alive():
                self._observer.stop()
                self._observer.join()
        self.events.put(None)
