"""Emission driver - renders every source template and writes the files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from jinja2 import Environment

from stylegen.compiler.records import LayerRecord
from stylegen.config import GeneratorConfig
from stylegen.emit.formatter import NullFormatter, PrettierFormatter
from stylegen.emit.template import SourceTemplate, get_template_env

log = logging.getLogger(__name__)


def make_formatter(config: GeneratorConfig):
    if config.format_typescript:
        return PrettierFormatter(config.format_command)
    return NullFormatter()


def emit_sources(
    layers: Sequence[LayerRecord],
    config: GeneratorConfig,
    env: Environment | None = None,
    formatter=None,
) -> list[Path]:
    """Render each target template against ``layers`` and write it.

    Outputs whose file name ends in ``ts`` go through the formatter first.
    Errors from rendering or writing propagate; files written before the
    failure stay in place.

    Args:
        layers: Layer records from enumerate_layers.
        config: Supplies the output locations.
        env: Jinja2 environment. Defaults to the shipped templates.
        formatter: Object with ``format(text, filename)``. Defaults to
            prettier, or no formatting when disabled in config.

    Returns:
        Paths of the written files, in order.
    """
    env = env or get_template_env()
    formatter = formatter or make_formatter(config)
    ctx = {"layers": list(layers)}

    written = []
    for target in config.targets():
        filename = target.filename
        log.info(f"Generating {filename}")

        results = SourceTemplate(template=target.template, _env=env).render(ctx)
        if filename.endswith("ts"):
            results = formatter.format(results, str(target.output))

        target.output.parent.mkdir(parents=True, exist_ok=True)
        target.output.write_text(results, encoding="utf-8")
        written.append(target.output)

    return written
