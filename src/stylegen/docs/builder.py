"""Documentation builders - docs.json from layer records, Markdown from docs.json.

Both builders are async so the run can chain them: the Markdown step starts
only once docs.json has been written.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from jinja2 import Environment

from stylegen.compiler.naming import pascal_case
from stylegen.compiler.records import LayerRecord, PropertyRecord
from stylegen.config import GeneratorConfig
from stylegen.emit.template import SourceTemplate, get_template_env

log = logging.getLogger(__name__)

DOCS_JSON = "docs.json"
STYLES_MD = "styles.md"


def style_props_name(layer: LayerRecord) -> str:
    """Component doc key for a layer, e.g. ``fill-extrusion`` -> ``FillExtrusionLayerStyleProps``."""
    return f"{pascal_case(layer.name)}LayerStyleProps"


def property_doc_entry(prop: PropertyRecord) -> Dict[str, Any]:
    """Flatten a property into the shape the docs consume."""
    return {
        "name": prop.name,
        "type": prop.type,
        "values": prop.doc.values,
        "minimum": prop.doc.minimum,
        "maximum": prop.doc.maximum,
        "units": prop.doc.units,
        "default": prop.doc.default,
        "description": prop.doc.description,
        "requires": list(prop.doc.requires),
        "disabledBy": list(prop.doc.disabled_by),
        "allowedFunctionTypes": list(prop.allowed_function_types),
        "expression": prop.expression,
        "expressionSupported": prop.expression_supported,
        "transition": prop.transition,
    }


class DocJSONBuilder:
    """Writes docs.json: style props name -> ordered property entries."""

    def __init__(self, layers: Sequence[LayerRecord]) -> None:
        self.layers = list(layers)

    def build(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            style_props_name(layer): [
                property_doc_entry(prop) for prop in layer.properties
            ]
            for layer in self.layers
        }

    async def generate(self, path: Path) -> Path:
        text = json.dumps(self.build(), indent=2, ensure_ascii=False) + "\n"
        log.info(f"Generating {path.name}")
        await asyncio.to_thread(_write_text, path, text)
        return path


class MarkdownBuilder:
    """Renders the style reference page from docs.json."""

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or get_template_env()

    def render(self, docs: Dict[str, List[Dict[str, Any]]]) -> str:
        return SourceTemplate(template="styles.md.j2", _env=self.env).render(
            {"components": docs}
        )

    async def generate(self, json_path: Path, out_path: Path) -> Path:
        docs = json.loads(await asyncio.to_thread(json_path.read_text, "utf-8"))
        log.info(f"Generating {out_path.name}")
        await asyncio.to_thread(_write_text, out_path, self.render(docs))
        return out_path


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


async def generate_docs(
    layers: Sequence[LayerRecord], config: GeneratorConfig
) -> List[Path]:
    """Write docs.json, then the Markdown built from it."""
    docs_dir = config.resolved_docs_dir
    json_path = await DocJSONBuilder(layers).generate(docs_dir / DOCS_JSON)
    md_path = await MarkdownBuilder().generate(json_path, docs_dir / STYLES_MD)
    return [json_path, md_path]


def run_docs(layers: Sequence[LayerRecord], config: GeneratorConfig) -> List[Path]:
    return asyncio.run(generate_docs(layers, config))
