# src/task_widget/widget/sinks.py

from __future__ import annotations

import contextlib
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class StdoutSink:
    def write(self, document: str) -> None:
        sys.stdout.write(document)
        if not document.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()


class FileSink:
    """
    Writes each document to a file.

    The write goes through a temp file + os.replace so a widget host reading
    the file never sees a half-written document.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, document: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(document, "utf-8")
            os.replace(tmp, self.path)
        except OSError:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise
        logger.debug("Wrote widget document to %s (%d chars)", self.path, len(document))
