"""Shared pytest fixtures and test helpers for todoctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from todoctl.config.settings import TodoSettings
from todoctl.infrastructure.runtime import TodoRuntime
from todoctl.infrastructure.storage import MemoryBlobStore
from todoctl.infrastructure.store import TodoStore


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    todo = logging.getLogger("todoctl")
    todo_level = todo.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    todo.setLevel(todo_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TODOCTL_* environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("TODOCTL_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


class CallCounter:
    """Zero-argument callback that counts its invocations."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()


@pytest.fixture
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture
def blobs() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def settings(tmp_path: Path) -> TodoSettings:
    return TodoSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def runtime(settings: TodoSettings, blobs: MemoryBlobStore) -> TodoRuntime:
    """Started runtime over an in-memory blob store, no entry-point plugins."""
    rt = TodoRuntime(settings, blobs=blobs)
    rt.start(discover_plugins=False)
    return rt


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI persists into an isolated data dir.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(tmp_path)


def record_into(log: list[str], name: str) -> Callable[[], None]:
    """Build a callback that appends *name* to *log* when called."""

    def _callback() -> None:
        log.append(name)

    return _callback
