"""Shared fixtures for taskflow tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest

from taskflow.models import Task

FIXED_TODAY = date(2025, 12, 3)


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def task_file(temp_project: Path) -> Path:
    """Path of the default task file inside the temp project (not created)."""
    return temp_project / ".taskflow.yaml"


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """Pin the store's notion of today."""
    monkeypatch.setattr("taskflow.storage.today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config loading."""
    monkeypatch.delenv("TASKFLOW_FILE", raising=False)
    monkeypatch.delenv("TASKFLOW_VERBOSE", raising=False)


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A mix of open and done tasks across priorities and tags."""
    return [
        Task(
            id=1,
            text="Low open",
            priority="low",
            tags=["docs"],
            status="open",
            created=date(2025, 12, 1),
        ),
        Task(
            id=2,
            text="High open",
            priority="high",
            tags=["backend", "api"],
            status="open",
            created=date(2025, 12, 1),
        ),
        Task(
            id=3,
            text="High done",
            priority="high",
            tags=["backend"],
            status="done",
            created=date(2025, 12, 1),
            completed=date(2025, 12, 2),
        ),
        Task(
            id=4,
            text="Medium open",
            priority="medium",
            tags=[],
            status="open",
            created=date(2025, 12, 2),
        ),
        Task(
            id=5,
            text="Medium done",
            priority="medium",
            tags=["api"],
            status="done",
            created=date(2025, 12, 2),
            completed=date(2025, 12, 3),
        ),
    ]


@pytest.fixture
def sample_yaml() -> str:
    """A hand-written task file with two tasks."""
    return """\
version: 1
tasks:
  - id: 1
    text: First task
    priority: high
    tags: []
    status: open
    created: "2025-12-03"
    completed: null
  - id: 2
    text: Second task
    priority: low
    tags:
      - bug
    status: done
    created: "2025-12-02"
    completed: "2025-12-03"
"""
