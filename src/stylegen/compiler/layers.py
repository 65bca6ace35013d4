"""Layer enumerator - walks the style spec and produces the layer records.

Output order:
- layer types in the order the spec declares them, unsupported types dropped
- within a layer, layout properties first, then paint, each in spec key order
- a single ``light`` pseudo-layer, always last
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Tuple

from stylegen.compiler.properties import (
    FunctionTypeOverrides,
    build_property,
    load_function_type_overrides,
)
from stylegen.compiler.records import LayerRecord, PropertyRecord
from stylegen.compiler.support import is_supported
from stylegen.config import GeneratorConfig
from stylegen.spec import StyleSpec

log = logging.getLogger(__name__)

LIGHT_LAYER_NAME = "light"


def get_supported_layers(spec: StyleSpec, config: GeneratorConfig) -> List[str]:
    """Layer type names with basic support on both platforms."""
    supported = []
    for layer_name, declaration in spec.layer_types().items():
        if is_supported(declaration, config):
            supported.append(layer_name)
        else:
            log.debug(f"Skipping layer type '{layer_name}': not supported")
    return supported


def get_supported_properties(
    attributes: Mapping[str, Any], config: GeneratorConfig
) -> List[str]:
    """Attribute names with basic support on both platforms, in catalog order."""
    supported = []
    for attr_name, attribute in attributes.items():
        if is_supported(attribute, config):
            supported.append(attr_name)
        else:
            log.debug(f"Skipping attribute '{attr_name}': not supported")
    return supported


def _build_all(
    attributes: Mapping[str, Any],
    config: GeneratorConfig,
    overrides: FunctionTypeOverrides,
) -> List[PropertyRecord]:
    return [
        build_property(attributes, attr_name, config, overrides)
        for attr_name in get_supported_properties(attributes, config)
    ]


def get_properties_for_layer(
    spec: StyleSpec,
    layer_name: str,
    config: GeneratorConfig,
    overrides: FunctionTypeOverrides,
) -> Tuple[PropertyRecord, ...]:
    layout_props = _build_all(spec.layout(layer_name), config, overrides)
    paint_props = _build_all(spec.paint(layer_name), config, overrides)
    return tuple(layout_props + paint_props)


def get_properties_for_light(
    spec: StyleSpec,
    config: GeneratorConfig,
    overrides: FunctionTypeOverrides,
) -> Tuple[PropertyRecord, ...]:
    """Light properties never take camera, source or composite functions."""
    return tuple(
        replace(prop, allowed_function_types=())
        for prop in _build_all(spec.light(), config, overrides)
    )


def enumerate_layers(
    spec: StyleSpec,
    config: GeneratorConfig,
    overrides: Optional[FunctionTypeOverrides] = None,
) -> Tuple[LayerRecord, ...]:
    """Build one LayerRecord per supported layer type plus the light layer.

    A layer whose attributes are all unsupported is still returned, with no
    properties.

    Args:
        spec: The decoded style spec.
        config: Supplies the platform target versions.
        overrides: Forced function types per attribute name. Defaults to
            the shipped override table.

    Returns:
        Layer records in emission order.
    """
    if overrides is None:
        overrides = load_function_type_overrides()

    layers = [
        LayerRecord(
            name=layer_name,
            properties=get_properties_for_layer(spec, layer_name, config, overrides),
        )
        for layer_name in get_supported_layers(spec, config)
    ]
    layers.append(
        LayerRecord(
            name=LIGHT_LAYER_NAME,
            properties=get_properties_for_light(spec, config, overrides),
        )
    )

    log.debug(
        f"Enumerated {len(layers)} layers: {', '.join(layer.name for layer in layers)}"
    )
    return tuple(layers)
