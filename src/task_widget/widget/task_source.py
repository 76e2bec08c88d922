# src/task_widget/widget/task_source.py

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "task +READY -PARENT export"


class TaskwarriorError(RuntimeError):
    """The export command could not be run or exited non-zero."""

    def __init__(self, command: str, returncode: int, stdout: str = "", stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = (stderr or stdout or "").strip()
        msg = f"{command!r} failed with exit code {returncode}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class TaskwarriorExportSource:
    """Runs the configured export command and returns its stdout."""

    def __init__(self, command: str = DEFAULT_COMMAND, *, timeout_seconds: float = 30.0) -> None:
        self.command = command
        self.timeout_seconds = timeout_seconds

    def fetch(self) -> str | None:
        args = shlex.split(self.command)
        if not args:
            raise TaskwarriorError(self.command, 2, stderr="empty command")

        logger.debug("Running %s", args)
        try:
            res = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError as e:
            raise TaskwarriorError(self.command, 127, stderr=str(e)) from e
        except subprocess.TimeoutExpired as e:
            raise TaskwarriorError(self.command, 124, stderr=f"timed out after {e.timeout}s") from e

        if res.returncode != 0:
            raise TaskwarriorError(self.command, res.returncode, res.stdout or "", res.stderr or "")
        return res.stdout


class StaticTaskSource:
    """Serves a payload that was read up front (a file, stdin, a test fixture)."""

    def __init__(self, payload: str | None) -> None:
        self.payload = payload

    @classmethod
    def from_path(cls, path: str | Path) -> StaticTaskSource:
        if str(path) == "-":
            return cls(sys.stdin.read())
        return cls(Path(path).read_text("utf-8"))

    def fetch(self) -> str | None:
        return self.payload
