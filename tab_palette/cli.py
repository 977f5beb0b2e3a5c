import argparse
import asyncio
import logging
import os

from .classifier import Tab, classify
from .collaborators import CollaboratorUnavailable
from .color import InvalidColorError, to_css
from .context import Context
from .export import export_json, generate_readability_report, print_palette
from .orchestrator import resolve_frame_color
from .palette import generate_palette, load_palette_from_json
from .preferences import JsonPreferenceStore, Preferences
from .sampler import sample_page_color
from .scheme import resolve_scheme
from .tokens import ColorToken, parse_color_source


class OfflinePageSource:
    """No page script to talk to from the command line."""

    async def request_color(self, tab, message):
        raise CollaboratorUnavailable("no page script outside the browser")


class NoAddons:
    async def list_addons(self):
        return []


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Derive browser chrome palettes from page colors"
    )
    parser.add_argument(
        "--prefs",
        metavar="JSON",
        default=None,
        help="Preference file (default: built-in defaults)",
    )
    parser.add_argument(
        "--scheme",
        choices=["light", "dark", "auto"],
        default="auto",
        help="Preferred scheme; auto follows --os-dark",
    )
    parser.add_argument(
        "--os-dark",
        action="store_true",
        help="Pretend the operating system is in dark mode",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    palette_parser = subparsers.add_parser("palette", help="Build the palette for a color")
    palette_parser.add_argument("color", help="Hex, rgb()/rgba() color or a color token name")
    _add_output_arguments(palette_parser)

    classify_parser = subparsers.add_parser("classify", help="Classify a tab URL")
    classify_parser.add_argument("url", help="Tab URL")
    classify_parser.add_argument("--title", default="", help="Tab title")
    classify_parser.add_argument("--favicon", default=None, help="Tab favicon URL")

    sample_parser = subparsers.add_parser("sample", help="Build the palette from a page screenshot")
    sample_parser.add_argument("image_path", help="Path to the screenshot")
    sample_parser.add_argument(
        "--strip",
        type=int,
        default=8,
        help="Height in pixels of the top strip to sample (default: 8)",
    )
    _add_output_arguments(sample_parser)

    report_parser = subparsers.add_parser("report", help="Check an exported theme JSON")
    report_parser.add_argument("theme_path", help="Theme JSON written by --output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    context = _load_context(args)

    if args.command == "palette":
        try:
            source = parse_color_source(args.color)
        except InvalidColorError as e:
            parser.error(str(e))
        _run_palette(args, context, source, args.color)
    elif args.command == "classify":
        _run_classify(args, context)
    elif args.command == "sample":
        print(f"Sampling: {args.image_path}")
        color = sample_page_color(args.image_path, strip_height=args.strip)
        print(f"Page color: {color.hex}")
        _run_palette(args, context, color, os.path.basename(args.image_path))
    elif args.command == "report":
        palette = load_palette_from_json(args.theme_path)
        print_palette(palette)
        report, _ = generate_readability_report(palette)
        print("\n" + report)


def _add_output_arguments(subparser):
    subparser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Write theme JSON (and report) to this directory",
    )
    subparser.add_argument(
        "--report",
        action="store_true",
        help="Print a readability report",
    )


def _load_context(args):
    if args.prefs:
        store = JsonPreferenceStore(args.prefs)
        preferences = asyncio.run(store.load())
        if not store.valid():
            print(f"Invalid preferences in {args.prefs}, using defaults")
            preferences = Preferences()
    else:
        preferences = Preferences()
    return Context(resolve_scheme(args.scheme, args.os_dark), preferences)


def _run_palette(args, context, source, source_name):
    """Correct the color, generate the palette and print or export it."""
    color, scheme = resolve_frame_color(source, context)
    if isinstance(source, ColorToken):
        print(f"Token {source.value} -> {color.hex} ({scheme.value})")
    elif color != source:
        print(f"Corrected {source.hex} -> {color.hex} ({scheme.value})")
    else:
        print(f"Color {color.hex} is usable as is ({scheme.value})")

    palette = generate_palette(color, scheme, context.preferences)
    print_palette(palette)

    report, issues = generate_readability_report(palette)
    if args.report:
        print("\n" + report)

    if args.output:
        os.makedirs(args.output, exist_ok=True)
        theme_path = os.path.join(args.output, f"theme-{scheme.value}.json")
        report_path = os.path.join(args.output, f"readability_report-{scheme.value}.txt")
        export_json(palette, theme_path, source=source_name)
        with open(report_path, "w") as f:
            f.write(report)

        print("\n" + "=" * 60)
        print("Exported:")
        print(f"  - {theme_path}")
        print(f"  - {report_path}")
        print("=" * 60)


def _run_classify(args, context):
    tab = Tab(id=0, window_id=0, url=args.url, title=args.title, fav_icon_url=args.favicon)
    result = asyncio.run(classify(tab, context, OfflinePageSource(), NoAddons()))
    if isinstance(result, ColorToken):
        print(f"{args.url}: token {result.value}")
    else:
        print(f"{args.url}: color {to_css(result)}")


if __name__ == "__main__":
    main()
