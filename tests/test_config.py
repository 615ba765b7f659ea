"""Tests for taskflow.config module."""

from __future__ import annotations

from pathlib import Path

from taskflow.config import SCHEMA_VERSION, TASK_FILE_NAME, TaskflowConfig


class TestConstants:
    """Tests for module constants."""

    def test_file_name(self) -> None:
        """Test the default task file name."""
        assert TASK_FILE_NAME == ".taskflow.yaml"

    def test_schema_version(self) -> None:
        """Test the current schema version."""
        assert SCHEMA_VERSION == 1


class TestTaskflowConfig:
    """Tests for TaskflowConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = TaskflowConfig()
        assert config.task_file == ".taskflow.yaml"
        assert config.verbose is False

    def test_load_empty_environment(self) -> None:
        """Test loading with nothing set returns defaults."""
        assert TaskflowConfig.load({}) == TaskflowConfig()

    def test_load_file_override(self) -> None:
        """Test TASKFLOW_FILE overrides the task file."""
        config = TaskflowConfig.load({"TASKFLOW_FILE": "todo.yaml"})
        assert config.task_file == "todo.yaml"

    def test_load_blank_file_ignored(self) -> None:
        """Test a blank TASKFLOW_FILE keeps the default."""
        config = TaskflowConfig.load({"TASKFLOW_FILE": "  "})
        assert config.task_file == ".taskflow.yaml"

    def test_load_verbose_truthy(self) -> None:
        """Test truthy TASKFLOW_VERBOSE values."""
        for value in ("1", "true", "YES", "on"):
            assert TaskflowConfig.load({"TASKFLOW_VERBOSE": value}).verbose is True

    def test_load_verbose_falsy(self) -> None:
        """Test falsy TASKFLOW_VERBOSE values."""
        for value in ("0", "false", "no", ""):
            assert TaskflowConfig.load({"TASKFLOW_VERBOSE": value}).verbose is False

    def test_load_reads_os_environ(self, monkeypatch) -> None:
        """Test load falls back to the process environment."""
        monkeypatch.setenv("TASKFLOW_FILE", "env.yaml")
        assert TaskflowConfig.load().task_file == "env.yaml"


class TestTaskPath:
    """Tests for TaskflowConfig.task_path."""

    def test_relative_to_cwd(self, tmp_path: Path) -> None:
        """Test a relative file is joined onto the given directory."""
        config = TaskflowConfig()
        assert config.task_path(tmp_path) == tmp_path / ".taskflow.yaml"

    def test_defaults_to_process_cwd(self, temp_project: Path) -> None:
        """Test the process working directory is used when none is given."""
        assert TaskflowConfig().task_path() == Path.cwd() / ".taskflow.yaml"

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        """Test absolute paths are returned unchanged."""
        target = tmp_path / "elsewhere" / "tasks.yaml"
        config = TaskflowConfig(task_file=str(target))
        assert config.task_path(Path("/ignored")) == target
