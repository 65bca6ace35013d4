"""stylegen - style property code generator

Reads the map style specification and derives the per-platform style
setters, the JavaScript style map, TypeScript declarations and the style
documentation from one list of layer records.
"""

from stylegen._version import __version__
from stylegen.compiler import enumerate_layers
from stylegen.config import GeneratorConfig
from stylegen.spec import StyleSpec, load_spec

__all__ = [
    "__version__",
    "GeneratorConfig",
    "StyleSpec",
    "load_spec",
    "enumerate_layers",
]
