"""Hand paths and links to the desktop's default application."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Protocol

from recall.core.errors import OpenerError

logger = logging.getLogger(__name__)


class Opener(Protocol):
    def open(self, target: str) -> None: ...


def default_opener_command() -> list[str]:
    if sys.platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class SystemOpener(Opener):
    def __init__(self, command: list[str] | None = None) -> None:
        self._command = list(command) if command else default_opener_command()

    def open(self, target: str) -> None:
        args = [*self._command, target]
        logger.debug("Opening with: %s", args)
        try:
            subprocess.Popen(
                args,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise OpenerError(f"Could not open '{target}': {exc}") from exc
