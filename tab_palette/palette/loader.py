import json

from ..color import parse_color
from ..scheme import Scheme
from .generator import THEME_PROPERTIES, NamedPalette


def load_palette_from_json(json_path):
    """Load an exported theme JSON back into a NamedPalette.

    Args:
        json_path: Path to a file written by ``export_json``

    Returns:
        NamedPalette. The scheme comes from the ``_scheme`` metadata key, or is
        guessed from the frame luminance when that key is missing.
    """
    with open(json_path) as f:
        data = json.load(f)

    colors = {key: parse_color(value) for key, value in data.get("colors", {}).items()}
    properties = dict(data.get("properties") or THEME_PROPERTIES)

    if "_scheme" in data:
        scheme = Scheme(data["_scheme"])
    else:
        scheme = Scheme.DARK if colors["frame"].luminance < 0.5 else Scheme.LIGHT

    return NamedPalette(scheme=scheme, colors=colors, properties=properties)
