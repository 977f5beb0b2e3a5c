from ..color import color_contrast

MIN_TEXT_CONTRAST = 4.5

# (foreground, surfaces it is drawn on)
TEXT_PAIRS = [
    ("tab_background_text", ["frame", "frame_inactive"]),
    ("toolbar_text", ["toolbar", "tab_selected"]),
    ("toolbar_field_text", ["toolbar_field", "toolbar_field_focus"]),
    ("icons", ["toolbar", "frame"]),
    ("popup_text", ["popup"]),
    ("sidebar_text", ["sidebar"]),
    ("ntp_text", ["ntp_background"]),
]


def generate_readability_report(palette, min_contrast=MIN_TEXT_CONTRAST):
    """Generate a readability report of text and icons against their surfaces"""
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Scheme: {palette.scheme.value.upper()}")
    report.append(f"Frame:  {palette.colors['frame'].hex}")
    report.append("")

    issues = []

    for fg_key, surfaces in TEXT_PAIRS:
        fg = palette.colors[fg_key]
        report.append(f"\n{fg_key.upper()} {fg.hex} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for surface in surfaces:
            bg = palette.colors[surface]
            ratio = color_contrast(fg, bg)
            status = "✓" if ratio >= min_contrast else "✗ FAIL"
            if ratio < min_contrast:
                issues.append((fg_key, surface, ratio, min_contrast))
            report.append(f"  on {surface:22} {bg.hex}  {ratio:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for fg_key, surface, achieved, required in issues:
            report.append(
                f"  - {fg_key} on {surface}: {achieved:.1f}:1, needs {required}:1"
            )
    else:
        report.append("ALL SURFACES PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_palette(palette):
    """Print palette info"""
    frame = palette.colors["frame"]

    print("\n" + "=" * 60)
    print(f"CHROME PALETTE ({palette.scheme.value.upper()} SCHEME)")
    print("=" * 60)

    categories = [
        ("TAB BAR", ["frame", "frame_inactive", "tab_selected", "tab_background_text"]),
        ("TOOLBAR", ["toolbar", "toolbar_bottom_separator", "toolbar_text", "icons"]),
        (
            "URL BAR",
            [
                "toolbar_field",
                "toolbar_field_border",
                "toolbar_field_focus",
                "toolbar_field_border_focus",
                "toolbar_field_text",
            ],
        ),
        ("SIDEBAR", ["sidebar", "sidebar_border", "sidebar_text"]),
        ("POPUP", ["popup", "popup_border", "popup_text"]),
    ]

    for cat_name, keys in categories:
        print(f"\n{cat_name}:")
        for key in keys:
            if key in palette.colors:
                c = palette.colors[key]
                contrast = color_contrast(c, frame)
                print(f"  {key:28} {c.hex}  (vs frame: {contrast:.1f}:1)")
