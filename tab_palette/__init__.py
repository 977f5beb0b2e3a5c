from .classifier import Tab, classify, classify_static
from .color import Color, InvalidColorError, create_color, dim_color, parse_color
from .context import Context, make_context
from .contrast import Correction, correct_contrast
from .orchestrator import Orchestrator
from .palette import NamedPalette, generate_palette
from .preferences import JsonPreferenceStore, Preferences
from .scheme import Scheme, resolve_scheme
from .tokens import ColorToken, resolve_token

__all__ = [
    "Color",
    "ColorToken",
    "Context",
    "Correction",
    "InvalidColorError",
    "JsonPreferenceStore",
    "NamedPalette",
    "Orchestrator",
    "Preferences",
    "Scheme",
    "Tab",
    "classify",
    "classify_static",
    "correct_contrast",
    "create_color",
    "dim_color",
    "generate_palette",
    "make_context",
    "parse_color",
    "resolve_scheme",
    "resolve_token",
]
