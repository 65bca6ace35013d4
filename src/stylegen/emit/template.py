"""Template rendering for generated sources and docs.

Templates live in ``stylegen/templates`` and are rendered with
StrictUndefined: a name the template uses but the context lacks is an
error, not an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from stylegen.emit.helpers import FILTERS, GLOBALS

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def get_template_env(templates_dir: Path | None = None) -> Environment:
    """Create a Jinja2 Environment with the stylegen filters and globals.

    Args:
        templates_dir: Where templates are loaded from. Defaults to the
            templates shipped with stylegen.

    Returns:
        Configured Jinja2 Environment.
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters.update(FILTERS)
    env.globals.update(GLOBALS)
    return env


@dataclass
class SourceTemplate:
    """A template to render, either from a file or inline.

    Usage:
        # From file
        SourceTemplate(template="styleMap.js.j2").render({"layers": layers})

        # Inline
        SourceTemplate(content="{{ layers | length }}").render({"layers": layers})
    """

    template: str | None = None
    content: str | None = None
    _env: Environment | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.template is None and self.content is None:
            raise ValueError("Must provide either 'template' or 'content'")
        if self.template is not None and self.content is not None:
            raise ValueError("Cannot provide both 'template' and 'content'")

    def render(self, ctx: dict[str, Any]) -> str:
        env = self._env or get_template_env()

        if self.content is not None:
            tmpl = env.from_string(self.content)
        else:
            tmpl = env.get_template(self.template)  # type: ignore

        return tmpl.render(**ctx)

    @property
    def name(self) -> str:
        if self.template:
            # "RCTMGLStyle.h.j2" -> "RCTMGLStyle.h"
            return Path(self.template).stem
        return "inline"
