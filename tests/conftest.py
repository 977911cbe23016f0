# tests/conftest.py
"""
Common test fixtures for handycmd.
"""
import io
import os
import shutil
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from handycmd.commands.models import MessageCategory
from handycmd.commands.reporter import OutcomeReporter


class RecordingReporter(OutcomeReporter):
    """Reporter that keeps every emitted message and prints into a buffer."""

    def __init__(self):
        self.buffer = io.StringIO()
        super().__init__(console=Console(file=self.buffer, highlight=False, width=200))
        self.messages = []

    def emit(self, message):
        self.messages.append(message)
        super().emit(message)

    def texts(self, category=None):
        """Texts of the recorded messages, optionally for one category."""
        return [
            m.text for m in self.messages
            if category is None or m.category == MessageCategory(category)
        ]

    @property
    def output(self):
        return self.buffer.getvalue()


@pytest.fixture
def temp_project_dir():
    """Create a temporary directory and make it the working directory."""
    temp_dir = tempfile.mkdtemp()
    old_dir = os.getcwd()
    os.chdir(temp_dir)
    yield Path(temp_dir)
    os.chdir(old_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def reporter():
    """Returns a RecordingReporter instance."""
    return RecordingReporter()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove handycmd environment overrides."""
    for name in ("HANDYCMD_WATCH_FILE", "HANDYCMD_DELAY", "HANDYCMD_CALL_NOW", "HANDYCMD_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
