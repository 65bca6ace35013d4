from pathlib import Path

import pytest
from pydantic import ValidationError

from stylegen.config import GeneratorConfig


def test_defaults():
    config = GeneratorConfig(root=Path("/repo/scripts"))
    assert config.android_version == "8.1.0"
    assert config.ios_version == "5.1.0"
    assert config.output_to_example is True
    assert config.resolved_spec_path == Path("/repo/scripts/style-spec/v8.json")
    assert config.resolved_docs_dir == Path("/repo/scripts/docs")


def test_example_output_paths():
    config = GeneratorConfig(root=Path("/repo"))
    prefix = Path("/repo/example/node_modules/@react-native-mapbox-gl/maps")
    assert config.ios_output_path == prefix / "ios" / "RCTMGL"
    assert config.js_output_path == prefix / "javascript" / "utils"
    assert config.android_output_path == prefix.joinpath(
        "android", "rctmgl", "src", "main", "java", "com", "mapbox", "rctmgl",
        "components", "styles",
    )


def test_repo_output_paths():
    config = GeneratorConfig(root=Path("/repo"), output_to_example=False)
    assert config.ios_output_path == Path("/repo/ios/RCTMGL")
    assert [t.filename for t in config.targets()] == [
        "RCTMGLStyle.h",
        "index.d.ts",
        "RCTMGLStyle.m",
        "RCTMGLStyleFactory.java",
        "styleMap.js",
    ]


def test_config_is_frozen():
    config = GeneratorConfig()
    with pytest.raises(ValidationError):
        config.android_version = "9.0.0"


def test_load_yaml_and_overrides(tmp_path):
    path = tmp_path / "stylegen.yaml"
    path.write_text("android_version: 9.0.0\noutput_to_example: false\n")

    config = GeneratorConfig.load(path, root=tmp_path, output_to_example=None)
    assert config.android_version == "9.0.0"
    assert config.ios_version == "5.1.0"
    assert config.output_to_example is False
    assert config.root == tmp_path

    overridden = GeneratorConfig.load(path, output_to_example=True)
    assert overridden.output_to_example is True


def test_load_missing_file_uses_defaults(tmp_path):
    config = GeneratorConfig.load(tmp_path / "nope.yaml")
    assert config == GeneratorConfig(root=config.root)
