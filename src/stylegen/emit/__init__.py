"""Source emission - templates, helpers and the driver that writes files."""

from stylegen.emit.driver import emit_sources
from stylegen.emit.formatter import NullFormatter, PrettierFormatter
from stylegen.emit.template import SourceTemplate, get_template_env

__all__ = [
    "emit_sources",
    "SourceTemplate",
    "get_template_env",
    "NullFormatter",
    "PrettierFormatter",
]
