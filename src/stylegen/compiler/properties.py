"""Property builder - one style-spec attribute to one PropertyRecord."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

import yaml

from stylegen.compiler.naming import (
    camel_case,
    format_description,
    get_disabled_by,
    get_requires,
)
from stylegen.compiler.records import PropertyDoc, PropertyRecord
from stylegen.compiler.support import resolve_support
from stylegen.config import GeneratorConfig

OVERRIDES_FILE = Path(__file__).parent.parent / "data" / "function_type_overrides.yaml"

FunctionTypeOverrides = Mapping[str, Tuple[str, ...]]


def load_function_type_overrides(path: Optional[Path] = None) -> FunctionTypeOverrides:
    """Load the attribute -> forced function types table.

    Args:
        path: YAML file to read. Defaults to the table shipped with stylegen.

    Returns:
        Read-only mapping of hyphenated attribute names to function types.
    """
    if path is None:
        return _default_overrides()
    return _read_overrides(path)


@lru_cache(maxsize=1)
def _default_overrides() -> FunctionTypeOverrides:
    return _read_overrides(OVERRIDES_FILE)


def _read_overrides(path: Path) -> FunctionTypeOverrides:
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise TypeError(f"Function type overrides in {path} must be a mapping")

    table = {}
    for attr_name, types in data.items():
        if not isinstance(types, list):
            raise TypeError(f"Override for '{attr_name}' must be a list")
        table[str(attr_name)] = tuple(str(t) for t in types)
    return MappingProxyType(table)


def get_allowed_function_types(attribute: Mapping[str, Any]) -> List[str]:
    """Function types the spec allows for an attribute."""
    allowed: List[str] = []

    if attribute.get("zoom-function"):
        allowed.append("camera")

    if attribute.get("property-function"):
        allowed.append("source")
        allowed.append("composite")

    return allowed


def is_image(attr_name: str) -> bool:
    lowered = attr_name.lower()
    return "pattern" in lowered or "image" in lowered


def is_translate(attr_name: str) -> bool:
    return "translate" in attr_name.lower()


def build_property(
    attributes: Mapping[str, Any],
    attr_name: str,
    config: GeneratorConfig,
    overrides: Optional[FunctionTypeOverrides] = None,
) -> PropertyRecord:
    """Build the PropertyRecord for ``attributes[attr_name]``.

    Args:
        attributes: A paint, layout or light attribute catalog.
        attr_name: Hyphenated attribute name, e.g. ``fill-color``.
        config: Supplies the platform target versions.
        overrides: Forced function types per attribute name. Defaults to
            the shipped override table.

    Returns:
        The normalized property record.
    """
    if overrides is None:
        overrides = load_function_type_overrides()

    attribute = attributes[attr_name]
    requires = attribute.get("requires")
    expression = attribute.get("expression")

    doc = PropertyDoc(
        default=attribute.get("default"),
        minimum=attribute.get("minimum"),
        maximum=attribute.get("maximum"),
        units=attribute.get("units"),
        description=format_description(attribute.get("doc")),
        requires=tuple(get_requires(requires)),
        disabled_by=tuple(get_disabled_by(requires)),
        values=attribute.get("values"),
    )

    if attr_name in overrides:
        allowed = tuple(overrides[attr_name])
    else:
        allowed = tuple(get_allowed_function_types(attribute))

    return PropertyRecord(
        name=camel_case(attr_name),
        key=attr_name,
        doc=doc,
        type=attribute.get("type"),
        value=attribute.get("value"),
        image=is_image(attr_name),
        translate=is_translate(attr_name),
        transition=bool(attribute.get("transition")),
        expression=expression,
        expression_supported=bool(expression),
        support=resolve_support(attribute.get("sdk-support"), config),
        allowed_function_types=allowed,
    )
