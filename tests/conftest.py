import json

import pytest

from stylegen.config import GeneratorConfig
from stylegen.spec import StyleSpec


def basic(android, ios=None):
    support = {"android": android}
    if ios is not None:
        support["ios"] = ios
    return {"basic functionality": support}


SPEC = {
    "layer": {
        "type": {
            "values": {
                "fill": {"sdk-support": basic("2.0.1", "2.0.0")},
                "line": {"sdk-support": basic("2.0.1", "2.0.0")},
                "sky": {"sdk-support": basic("9.1.0", "6.0.0")},
                "heatmap": {"sdk-support": basic("6.0.0", "4.7.0")},
                "hillshade": {},
            }
        }
    },
    "layout_fill": {
        "visibility": {
            "type": "enum",
            "values": {
                "visible": {"doc": "The layer is shown."},
                "none": {"doc": "The layer is not shown."},
            },
            "default": "visible",
            "doc": "Whether this layer is displayed.",
            "sdk-support": basic("1.0.0", "2.0.0"),
        }
    },
    "paint_fill": {
        "fill-antialias": {
            "type": "boolean",
            "default": True,
            "doc": "Whether or not the fill should be antialiased.",
            "zoom-function": True,
            "sdk-support": basic("1.0.0", "2.0.0"),
        },
        "fill-color": {
            "type": "color",
            "default": "#000000",
            "doc": "The color of the filled part of this layer. Ignored when fill-pattern is set.",
            "transition": True,
            "requires": [{"!": "fill-pattern"}],
            "zoom-function": True,
            "property-function": True,
            "expression": {
                "interpolated": True,
                "parameters": ["zoom", "feature", "feature-state"],
            },
            "sdk-support": {
                "basic functionality": {"android": "1.0.0", "ios": "2.0.0"},
                "data-driven styling": {"android": "5.0.0", "ios": "3.5.0"},
            },
        },
        "fill-pattern": {
            "type": "resolvedImage",
            "transition": True,
            "doc": "Name of image in sprite to use for drawing image fills.",
            "zoom-function": True,
            "property-function": True,
            "expression": {"parameters": ["zoom", "feature"]},
            "sdk-support": {
                "basic functionality": {"android": "1.0.0", "ios": "2.0.0"},
                "data-driven styling": {"android": "6.5.0"},
            },
        },
        "fill-translate": {
            "type": "array",
            "value": "number",
            "default": [0, 0],
            "units": "pixels",
            "transition": True,
            "doc": "The geometry's offset.",
            "zoom-function": True,
            "sdk-support": basic("1.0.0", "2.0.0"),
        },
        "fill-sort-key": {
            "type": "number",
            "doc": "Sorts features in ascending order based on this value.",
            "sdk-support": basic("9.2.0", "5.9.0"),
        },
    },
    "layout_line": {
        "line-join": {
            "type": "enum",
            "values": {"bevel": {}, "round": {}, "miter": {}},
            "default": "miter",
            "doc": "The display of lines when joining.",
            "zoom-function": True,
            "property-function": True,
            "sdk-support": {
                "basic functionality": {"android": "2.0.1", "ios": "2.0.0"},
                "data-driven styling": {"android": "5.2.0", "ios": "3.7.0"},
            },
        },
        "line-cap": {
            "type": "enum",
            "values": {"butt": {}, "round": {}, "square": {}},
            "default": "butt",
            "doc": "The display of line endings.",
            "zoom-function": True,
            "sdk-support": basic("2.0.1", "2.0.0"),
        },
    },
    "paint_line": {
        "line-width": {
            "type": "number",
            "default": 1,
            "minimum": 0,
            "units": "pixels",
            "transition": True,
            "doc": "Stroke thickness.",
            "zoom-function": True,
            "property-function": True,
            "expression": {"interpolated": True, "parameters": ["zoom", "feature"]},
            "sdk-support": {
                "basic functionality": {"android": "2.0.1", "ios": "2.0.0"},
                "data-driven styling": {"android": "5.1.0", "ios": "3.7.0"},
            },
        },
        "line-gap-width": {
            "type": "number",
            "default": 0,
            "minimum": 0,
            "doc": "Draws a line casing outside of a line's actual path.",
            "requires": ["line-width"],
            "zoom-function": True,
            "sdk-support": basic("2.0.1", "2.0.0"),
        },
    },
    "paint_heatmap": {
        "heatmap-radius": {
            "type": "number",
            "default": 30,
            "doc": "Radius of influence of one heatmap point in pixels.",
        }
    },
    "light": {
        "anchor": {
            "type": "enum",
            "default": "viewport",
            "values": {"map": {}, "viewport": {}},
            "doc": "Whether extruded geometries are lit relative to the map or viewport.",
            "zoom-function": True,
            "sdk-support": basic("5.1.0", "3.6.0"),
        },
        "position": {
            "type": "array",
            "value": "number",
            "default": [1.15, 210, 30],
            "transition": True,
            "doc": "Position of the light source relative to lit (extruded) geometries.",
            "zoom-function": True,
            "sdk-support": basic("5.1.0", "3.6.0"),
        },
        "color": {
            "type": "color",
            "default": "#ffffff",
            "transition": True,
            "doc": "Color tint for lighting extruded geometries.",
            "zoom-function": True,
            "property-function": True,
            "sdk-support": basic("5.1.0", "3.6.0"),
        },
        "intensity": {
            "type": "number",
            "default": 0.5,
            "doc": "Intensity of lighting (on a scale from 0 to 1).",
            "sdk-support": basic("5.1.0"),
        },
    },
}


@pytest.fixture
def spec_dict():
    return json.loads(json.dumps(SPEC))


@pytest.fixture
def spec(spec_dict):
    return StyleSpec.from_dict(spec_dict)


@pytest.fixture
def config(tmp_path):
    return GeneratorConfig(root=tmp_path, output_to_example=False, format_typescript=False)


@pytest.fixture
def spec_file(tmp_path, spec_dict):
    path = tmp_path / "style-spec" / "v8.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(spec_dict))
    return path
