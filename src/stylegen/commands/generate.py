"""Generate command - the full run: sources, then docs"""

from __future__ import annotations

import logging
from pathlib import Path

from stylegen.compiler import enumerate_layers
from stylegen.config import GeneratorConfig
from stylegen.docs import run_docs
from stylegen.emit import emit_sources
from stylegen.spec import load_spec

from .utils import console

log = logging.getLogger(__name__)


def generate(config: GeneratorConfig, docs: bool = True) -> list[Path]:
    """Run the generator. The spec is checked before anything is written."""
    spec = load_spec(config.resolved_spec_path)
    layers = enumerate_layers(spec, config)

    written = emit_sources(layers, config)
    if docs:
        written += run_docs(layers, config)

    return written


def generate_command(config: GeneratorConfig, docs: bool = True) -> None:
    """Generate sources and docs, then print what was written."""
    written = generate(config, docs=docs)

    for path in written:
        try:
            shown = path.relative_to(config.root)
        except ValueError:
            shown = path
        console.print(f"[green]wrote[/green] {shown}")
