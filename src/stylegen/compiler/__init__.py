"""Style compiler - turns the style spec into layer records."""

from stylegen.compiler.layers import enumerate_layers
from stylegen.compiler.properties import build_property, load_function_type_overrides
from stylegen.compiler.records import (
    LayerRecord,
    PlatformSupport,
    PropertyDoc,
    PropertyRecord,
    SupportMatrix,
)
from stylegen.compiler.support import is_version_gte, resolve_support

__all__ = [
    "enumerate_layers",
    "build_property",
    "load_function_type_overrides",
    "resolve_support",
    "is_version_gte",
    "LayerRecord",
    "PlatformSupport",
    "PropertyDoc",
    "PropertyRecord",
    "SupportMatrix",
]
