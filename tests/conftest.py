"""
Shared fixtures for the Knit test suite.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


def write_file(path, content):
    """Write `content` to `path`, creating parent directories."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


def read_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


class FakeObserver:
    """Stands in for a watchdog Observer; records schedule/unschedule calls."""

    def __init__(self):
        self.scheduled = {}  # directory -> handler
        self.unscheduled = []
        self.started = False
        self.stopped = False
        self.joined = False

    def schedule(self, handler, path, recursive=False):
        assert not recursive
        self.scheduled[path] = handler
        return ("watch", path)

    def unschedule(self, watch):
        _, path = watch
        del self.scheduled[path]
        self.unscheduled.append(path)

    def start(self):
        self.started = True

    def stop(self):
        self.stopped = True

    def join(self, timeout=None):
        self.joined = True


@pytest.fixture
def project(tmp_path):
    """A project directory with a src/ folder; returns a writer for it."""
    root = str(tmp_path)

    def write(relative, content):
        return write_file(os.path.join(root, relative), content)

    write.root = root
    return write


@pytest.fixture
def observer():
    return FakeObserver()
