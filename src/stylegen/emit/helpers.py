"""Jinja2 filters and globals used by the source templates.

Each helper maps a layer or property record to the identifier or type
name one of the target platforms expects.
"""

from typing import Any, Dict, Iterable, List, Optional

from stylegen.compiler.naming import camel_case, pascal_case
from stylegen.compiler.records import LayerRecord, PropertyRecord

LIGHT = "light"


def set_layer_method_name(layer: LayerRecord, platform: str) -> str:
    """Name of the method that applies a whole style dict to a layer.

    Example:
        fill-extrusion -> fillExtrusionLayer (ios)
        fill-extrusion -> setFillExtrusionLayerStyle (android)
    """
    if platform == "ios":
        return f"{camel_case(layer.name)}Layer"
    return f"set{pascal_case(layer.name)}LayerStyle"


def layer_type(layer: LayerRecord, platform: str) -> str:
    """Native class of the layer object."""
    is_light = layer.name == LIGHT
    if platform == "ios":
        return "MGLLight" if is_light else f"MGL{pascal_case(layer.name)}StyleLayer"
    return "Light" if is_light else f"{pascal_case(layer.name)}Layer"


def if_or_else_if(index: int) -> str:
    return "if" if index == 0 else "} else if"


def ios_prop_name(name: str) -> str:
    """MGL property name for a camel-cased style property."""
    if "visibility" in name:
        return "visible"
    if name == "fillExtrusionVerticalGradient":
        return "fillExtrusionHasVerticalGradient"
    return name.replace("Translate", "Translation")


def ios_prop_method_name(layer: LayerRecord, name: str) -> str:
    """Setter suffix; visibility exists on every layer so it gets the layer prefix."""
    if "visibility" in name.lower():
        return f"{pascal_case(layer.name)}StyleLayer{pascal_case(name)}"
    return pascal_case(name)


def ios_string_array_literal(items: Iterable[str]) -> str:
    return "@[" + ", ".join(f'@"{item}"' for item in items) + "]"


def android_input_type(type_: str, value: Optional[str] = None) -> str:
    if type_ == "color":
        return "Integer"
    if type_ == "boolean":
        return "Boolean"
    if type_ == "number":
        return "Float"
    if type_ == "array":
        return "Float[]" if value == "number" else "String[]"
    return "String"


def android_output_type(type_: str, value: Optional[str] = None) -> str:
    if type_ == "color":
        return "String"
    return android_input_type(type_, value)


_ANDROID_GETTERS: Dict[str, str] = {
    "Integer": "styleValue.getInt(VALUE_KEY)",
    "Boolean": "styleValue.getBoolean(VALUE_KEY)",
    "Float": "styleValue.getFloat(VALUE_KEY)",
    "Float[]": "styleValue.getFloatArray(VALUE_KEY)",
    "String[]": "styleValue.getStringArray(VALUE_KEY)",
    "String": "styleValue.getString(VALUE_KEY)",
}


def android_getter(prop: PropertyRecord) -> str:
    """Java expression reading the raw value of a property from a style value."""
    return _ANDROID_GETTERS[android_input_type(prop.type, prop.value)]


def js_style_type(prop: PropertyRecord) -> str:
    if prop.image:
        return "StyleTypes.Image"
    if prop.translate:
        return "StyleTypes.Translation"
    if prop.type == "color":
        return "StyleTypes.Color"
    if prop.type == "enum":
        return "StyleTypes.Enum"
    return "StyleTypes.Constant"


def _dts_base_type(prop: PropertyRecord) -> str:
    if prop.type == "color":
        return "string"
    if prop.type == "number":
        return "number"
    if prop.type == "boolean":
        return "boolean"
    if prop.type == "enum":
        values = prop.doc.values or {}
        if values:
            return " | ".join(f"'{value}'" for value in values)
        return "string"
    if prop.type == "array":
        if prop.value == "number":
            return "number[]"
        if prop.value in ("string", "enum"):
            return "string[]"
        return "any[]"
    if prop.type in ("string", "formatted", "resolvedImage"):
        return "string"
    if prop.translate:
        return "Translation"
    return "any"


def dts_interface_type(prop: PropertyRecord) -> str:
    """TypeScript type of a property in the generated declaration file."""
    base = _dts_base_type(prop)
    if not prop.expression_supported:
        return base
    parameters = (prop.expression or {}).get("parameters") or []
    params = ", ".join(f"'{param}'" for param in parameters)
    return f"Value<{base}, [{params}]>"


def unique_properties(layers: Iterable[LayerRecord]) -> List[PropertyRecord]:
    """Properties across all layers, first occurrence wins."""
    seen = set()
    result = []
    for layer in layers:
        for prop in layer.properties:
            if prop.name in seen:
                continue
            seen.add(prop.name)
            result.append(prop)
    return result


FILTERS: Dict[str, Any] = {
    "camel_case": camel_case,
    "pascal_case": pascal_case,
    "ios_prop_name": ios_prop_name,
}

GLOBALS: Dict[str, Any] = {
    "set_layer_method_name": set_layer_method_name,
    "layer_type": layer_type,
    "if_or_else_if": if_or_else_if,
    "ios_prop_name": ios_prop_name,
    "ios_prop_method_name": ios_prop_method_name,
    "ios_string_array_literal": ios_string_array_literal,
    "android_input_type": android_input_type,
    "android_output_type": android_output_type,
    "android_getter": android_getter,
    "js_style_type": js_style_type,
    "dts_interface_type": dts_interface_type,
    "unique_properties": unique_properties,
}
