"""Code formatting for generated TypeScript."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from stylegen.errors import FormatterError

log = logging.getLogger(__name__)


class NullFormatter:
    """Leaves text untouched."""

    def format(self, text: str, filename: str) -> str:
        return text


class PrettierFormatter:
    """Pipes text through prettier (or any command reading stdin).

    The file name is appended to the command so prettier can pick the
    parser from the extension.
    """

    def __init__(self, command: Sequence[str]) -> None:
        self.command = list(command)

    def format(self, text: str, filename: str) -> str:
        cmd = self.command + [filename]
        log.debug(f"Formatting {filename}: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            log.warning(
                f"Formatter '{self.command[0]}' not found, writing {filename} unformatted"
            )
            return text

        if result.returncode != 0:
            raise FormatterError(filename, result.stderr.strip())
        return result.stdout
