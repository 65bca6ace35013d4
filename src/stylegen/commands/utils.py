"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from stylegen.config import GeneratorConfig

console = Console()

CONFIG_FILENAME = "stylegen.yaml"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the stylegen CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - one line per generated file
    - Debug (STYLEGEN_DEBUG=1): DEBUG level - also skipped layers/attributes
    """
    debug = bool(os.environ.get("STYLEGEN_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("stylegen")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def load_config(
    config_file: Path | None = None,
    root: Path | None = None,
    spec: Path | None = None,
    output_to_example: bool | None = None,
    format_typescript: bool | None = None,
) -> GeneratorConfig:
    """Load stylegen.yaml (explicit path, or the one in root/cwd) and apply CLI flags."""
    if config_file is None:
        config_file = (root or Path.cwd()) / CONFIG_FILENAME

    return GeneratorConfig.load(
        config_file,
        root=root,
        spec_path=spec,
        output_to_example=output_to_example,
        format_typescript=format_typescript,
    )
