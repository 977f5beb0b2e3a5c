from .generator import NamedPalette, generate_palette
from .loader import load_palette_from_json

__all__ = ["NamedPalette", "generate_palette", "load_palette_from_json"]
