"""Layers command - show what would be generated"""

from __future__ import annotations

from rich.table import Table

from stylegen.compiler import enumerate_layers
from stylegen.config import GeneratorConfig
from stylegen.spec import load_spec

from .utils import console


def layers_command(config: GeneratorConfig) -> None:
    """List supported layers with their property counts."""
    spec = load_spec(config.resolved_spec_path)
    layers = enumerate_layers(spec, config)

    table = Table(
        title=f"android {config.android_version} / ios {config.ios_version}"
    )
    table.add_column("Layer", style="cyan")
    table.add_column("Properties", justify="right")
    table.add_column("Data-driven", justify="right")
    table.add_column("Transitions", justify="right")

    for layer in layers:
        data_driven = sum(1 for prop in layer.properties if prop.support.data.ios)
        transitions = sum(1 for prop in layer.properties if prop.transition)
        table.add_row(
            layer.name,
            str(len(layer.properties)),
            f"[green]{data_driven}[/green]" if data_driven else "[dim]0[/dim]",
            str(transitions),
        )

    console.print(table)
