"""Layer records - the intermediate representation every artifact is rendered from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class PlatformSupport:
    """Per-platform flags for one capability tier."""

    android: bool = False
    ios: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {"android": self.android, "ios": self.ios}


@dataclass(frozen=True)
class SupportMatrix:
    """Basic and data-driven support on both platforms.

    ``data`` is always all-true or all-false.
    """

    basic: PlatformSupport = field(default_factory=PlatformSupport)
    data: PlatformSupport = field(default_factory=PlatformSupport)

    def to_dict(self) -> Dict[str, Dict[str, bool]]:
        return {"basic": self.basic.to_dict(), "data": self.data.to_dict()}


@dataclass(frozen=True)
class PropertyDoc:
    """Human-facing documentation for one property."""

    default: Any = None
    minimum: Any = None
    maximum: Any = None
    units: Optional[str] = None
    description: str = ""
    requires: Tuple[str, ...] = ()
    disabled_by: Tuple[str, ...] = ()
    values: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default": self.default,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "units": self.units,
            "description": self.description,
            "requires": list(self.requires),
            "disabledBy": list(self.disabled_by),
            "values": self.values,
        }


@dataclass(frozen=True)
class PropertyRecord:
    """A single stylable property, annotated for both platforms."""

    name: str  # e.g., "fillColor"
    key: str  # e.g., "fill-color"
    doc: PropertyDoc = field(default_factory=PropertyDoc)
    type: Optional[str] = None
    value: Optional[str] = None  # element type of array properties
    image: bool = False
    translate: bool = False
    transition: bool = False
    expression: Optional[Dict[str, Any]] = None
    expression_supported: bool = False
    support: SupportMatrix = field(default_factory=SupportMatrix)
    allowed_function_types: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "doc": self.doc.to_dict(),
            "type": self.type,
            "value": self.value,
            "image": self.image,
            "translate": self.translate,
            "transition": self.transition,
            "expression": self.expression,
            "expressionSupported": self.expression_supported,
            "support": self.support.to_dict(),
            "allowedFunctionTypes": list(self.allowed_function_types),
        }


@dataclass(frozen=True)
class LayerRecord:
    """A layer type (or the light pseudo-layer) and its supported properties."""

    name: str
    properties: Tuple[PropertyRecord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "properties": [prop.to_dict() for prop in self.properties],
        }
