"""
Shared pytest configuration and fixtures for the dirconf tests.
"""

import json
import threading
from pathlib import Path
from queue import Queue

import pytest
import yaml

from dirconf.provider.watcher import FileEvent


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without real filesystem monitoring")
    config.addinivalue_line("markers", "integration: tests driving the real watchdog observer")


def write_config(directory, name, data):
    """Write ``data`` as JSON or YAML depending on the extension of ``name``."""
    path = Path(directory) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".json":
        path.write_text(json.dumps(data))
    elif path.suffix in (".yml", ".yaml"):
        path.write_text(yaml.safe_dump(data))
    else:
        path.write_text(str(data))
    return path


class FakeWatchHandle:
    """Watch handle fed by the test instead of a watchdog observer."""

    def __init__(self, add_error=None):
        self.events = Queue()
        self.added = []
        self.close_calls = 0
        self.add_error = add_error
        self.added_event = threading.Event()
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self):
        return self._closed

    def add(self, path, recursive=True):
        if self.add_error is not None:
            raise self.add_error
        self.added.append(path)
        self.added_event.set()

    def emit(self, path, op):
        self.events.put(FileEvent(path=str(path), op=op))

    def report_error(self, error):
        self.events.put(error)

    def close(self):
        with self._lock:
            self.close_calls += 1
            if self._closed:
                return
            self._closed = True
        self.events.put(None)


class FakeWatcherFactory:
    """Build FakeWatchHandles and remember them for assertions."""

    def __init__(self, add_error=None):
        self.handles = []
        self.add_error = add_error

    def __call__(self):
        handle = FakeWatchHandle(add_error=self.add_error)
        self.handles.append(handle)
        return handle


@pytest.fixture
def config_dir(tmp_path):
    """An empty configuration directory."""
    directory = tmp_path / "conf"
    directory.mkdir()
    return directory


@pytest.fixture
def watcher_factory():
    return FakeWatcherFactory()


@pytest.fixture(name="write_config")
def write_config_fixture():
    """Expose write_config to test modules."""
    return write_config


@pytest.fixture
def make_watcher_factory():
    """Build a FakeWatcherFactory, optionally failing on ``add``."""
    return FakeWatcherFactory
