"""Text editing through an external editor program."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

from recall.core.errors import EditorError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"
TEMP_FILENAME = "recall-temp.txt"


class Editor(Protocol):
    def edit_text(self, initial: str) -> str: ...


def resolve_editor_command(configured: list[str] | None) -> list[str]:
    if configured:
        return list(configured)
    for variable in ("VISUAL", "EDITOR"):
        if value := os.environ.get(variable, "").strip():
            return value.split()
    return [DEFAULT_EDITOR]


class ExternalEditor(Editor):
    def __init__(self, command: list[str]) -> None:
        if not command:
            raise EditorError(
                "The first entry in editor_command must be the path to a text "
                "editor program"
            )
        self._command = list(command)

    def edit_text(self, initial: str) -> str:
        with tempfile.TemporaryDirectory(prefix="recall-") as tmp_dir:
            file_path = Path(tmp_dir) / TEMP_FILENAME
            try:
                file_path.write_text(initial, encoding="utf-8")
            except OSError as exc:
                raise EditorError(f"Error writing to temp file: {exc}") from exc

            args = [*self._command, str(file_path)]
            logger.debug("Running editor: %s", args)
            try:
                completed = subprocess.run(args, check=False)
            except OSError as exc:
                raise EditorError(f"Error executing editor: {exc}") from exc
            if completed.returncode != 0:
                raise EditorError(f"Editor exited with code {completed.returncode}")

            try:
                return file_path.read_text(encoding="utf-8")
            except OSError as exc:
                raise EditorError(f"Error reading from temp file: {exc}") from exc
