from .json_export import build_theme, export_json
from .report import generate_readability_report, print_palette

__all__ = ["build_theme", "export_json", "generate_readability_report", "print_palette"]
