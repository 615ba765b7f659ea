"""Configuration for taskflow."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

TASK_FILE_NAME = ".taskflow.yaml"
SCHEMA_VERSION = 1

FILE_ENV_VAR = "TASKFLOW_FILE"
VERBOSE_ENV_VAR = "TASKFLOW_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


class TaskflowConfig(BaseModel):
    """Runtime configuration for the tf command."""

    task_file: str = TASK_FILE_NAME
    verbose: bool = False

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> TaskflowConfig:
        """Build configuration from environment variables, falling back to defaults."""
        if environ is None:
            environ = os.environ

        data: dict[str, object] = {}

        task_file = environ.get(FILE_ENV_VAR, "").strip()
        if task_file:
            data["task_file"] = task_file

        verbose = environ.get(VERBOSE_ENV_VAR)
        if verbose is not None:
            data["verbose"] = verbose.strip().lower() in _TRUTHY

        return cls.model_validate(data)

    def task_path(self, cwd: Path | None = None) -> Path:
        """Resolve the task file against a working directory.

        Absolute paths are returned as-is; relative ones are joined onto
        ``cwd`` (the process working directory when not given).
        """
        path = Path(self.task_file).expanduser()
        if path.is_absolute():
            return path

        if cwd is None:
            cwd = Path.cwd()

        return cwd / path
