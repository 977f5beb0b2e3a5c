import json

from ..color import to_css


def build_theme(palette):
    """Build the browser theme payload for a NamedPalette."""
    return {
        "colors": {key: to_css(color) for key, color in palette.colors.items()},
        "properties": dict(palette.properties),
    }


def export_json(palette, filepath, source=None):
    """Export palette as a browser theme JSON with metadata.

    Args:
        palette: The NamedPalette
        filepath: Output file path
        source: What the base color came from (URL, image, color string)
    """
    data = build_theme(palette)
    data["_scheme"] = palette.scheme.value
    if source:
        data["_source"] = source

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
