"""Configuration for stylegen.

Settings can come from an optional stylegen.yaml; anything passed on the
command line wins over the file. The config is frozen once loaded and
handed explicitly to the enumeration and emission stages.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ANDROID_VERSION = "8.1.0"
DEFAULT_IOS_VERSION = "5.1.0"

EXAMPLE_OUTPUT_PREFIX = (
    "example",
    "node_modules",
    "@react-native-mapbox-gl",
    "maps",
)

IOS_OUTPUT_DIR = ("ios", "RCTMGL")
ANDROID_OUTPUT_DIR = (
    "android",
    "rctmgl",
    "src",
    "main",
    "java",
    "com",
    "mapbox",
    "rctmgl",
    "components",
    "styles",
)
JS_OUTPUT_DIR = ("javascript", "utils")

DEFAULT_FORMAT_COMMAND = ("npx", "prettier", "--stdin-filepath")


@dataclass(frozen=True)
class EmissionTarget:
    """A template and the file it renders to."""

    template: str
    output: Path

    @property
    def filename(self) -> str:
        return self.output.name


class GeneratorConfig(BaseModel):
    """Full stylegen configuration"""

    model_config = ConfigDict(frozen=True)

    android_version: str = Field(
        default=DEFAULT_ANDROID_VERSION, description="Android SDK target version"
    )
    ios_version: str = Field(
        default=DEFAULT_IOS_VERSION, description="iOS SDK target version"
    )
    output_to_example: bool = Field(
        default=True,
        description="Write into the example app's installed package instead of the repo",
    )
    root: Path = Field(
        default_factory=Path.cwd, description="Directory output paths are relative to"
    )
    spec_path: Path | None = Field(
        default=None, description="Style spec JSON (default: <root>/style-spec/v8.json)"
    )
    docs_dir: Path | None = Field(
        default=None, description="Documentation output (default: <root>/docs)"
    )
    format_command: tuple[str, ...] = DEFAULT_FORMAT_COMMAND
    format_typescript: bool = True

    @classmethod
    def load(cls, path: Path | None = None, **overrides: Any) -> "GeneratorConfig":
        """Load config from yaml file, then apply non-None overrides."""
        data: dict[str, Any] = {}
        if path is not None and path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)

    def target_version(self, platform: str) -> str | None:
        """Target SDK version for `android` or `ios`."""
        return {"android": self.android_version, "ios": self.ios_version}.get(
            platform
        )

    @property
    def resolved_spec_path(self) -> Path:
        if self.spec_path is not None:
            return self.root / self.spec_path
        return self.root / "style-spec" / "v8.json"

    @property
    def resolved_docs_dir(self) -> Path:
        if self.docs_dir is not None:
            return self.root / self.docs_dir
        return self.root / "docs"

    @property
    def output_prefix(self) -> Path:
        if self.output_to_example:
            return self.root.joinpath(*EXAMPLE_OUTPUT_PREFIX)
        return self.root

    @property
    def ios_output_path(self) -> Path:
        return self.output_prefix.joinpath(*IOS_OUTPUT_DIR)

    @property
    def android_output_path(self) -> Path:
        return self.output_prefix.joinpath(*ANDROID_OUTPUT_DIR)

    @property
    def js_output_path(self) -> Path:
        return self.output_prefix.joinpath(*JS_OUTPUT_DIR)

    def targets(self) -> list[EmissionTarget]:
        """The generated source files, in emission order."""
        return [
            EmissionTarget("RCTMGLStyle.h.j2", self.ios_output_path / "RCTMGLStyle.h"),
            EmissionTarget("index.d.ts.j2", self.ios_output_path / "index.d.ts"),
            EmissionTarget("RCTMGLStyle.m.j2", self.ios_output_path / "RCTMGLStyle.m"),
            EmissionTarget(
                "RCTMGLStyleFactory.java.j2",
                self.android_output_path / "RCTMGLStyleFactory.java",
            ),
            EmissionTarget("styleMap.js.j2", self.js_output_path / "styleMap.js"),
        ]
