"""Decide where the frame color of a tab comes from.

A page resolves either to a ColorToken (curated, used as is) or to a literal
Color that still has to go through contrast correction.
"""

import logging
import re
from collections import namedtuple
from urllib.parse import urlsplit

from .collaborators import CollaboratorUnavailable, MessageReason
from .color import InvalidColorError, parse_color
from .defaults import ABOUT_PAGE_COLORS, PROTECTED_PAGE_COLORS
from .tokens import ColorToken, parse_color_source

logger = logging.getLogger(__name__)

Tab = namedtuple(
    "Tab",
    ["id", "window_id", "url", "title", "fav_icon_url", "active"],
    defaults=("", "", None, True),
)

INTERNAL_PROTOCOLS = ("chrome", "resource", "jar")
TEXT_EXTENSIONS = (".txt", ".css", ".jsm", ".js")
IMAGE_EXTENSIONS = (".png", ".jpg")
ADDON_PROTOCOL = "moz-extension"
ADDON_RULE_PREFIX = "Add-on ID: "


def parse_url(url):
    """Split a URL, returning None instead of raising when it is malformed."""
    if not isinstance(url, str):
        return None
    try:
        return urlsplit(url)
    except ValueError:
        return None


def _table_color(entry, context, default):
    """Pick a per-scheme table color, honoring the allow-opposite setting."""
    if entry.get(context.scheme.value):
        return parse_color(entry[context.scheme.value])
    if entry.get(context.reversed_scheme.value) and context.allow_opposite:
        return parse_color(entry[context.reversed_scheme.value])
    return default


def about_page_color(pathname, context):
    return _table_color(ABOUT_PAGE_COLORS.get(pathname, {}), context, ColorToken.DEFAULT)


def protected_page_color(hostname, context):
    return _table_color(PROTECTED_PAGE_COLORS.get(hostname, {}), context, ColorToken.FALLBACK)


def classify_static(tab, context):
    """Classify pages that never need the page script.

    Returns a ColorToken, a Color, or None when the tab is an add-on page or
    a regular web page.
    """
    parts = parse_url(tab.url)
    if parts is None:
        return None
    protocol = parts.scheme.lower()

    if protocol == "view-source":
        return ColorToken.PLAINTEXT
    if protocol in INTERNAL_PROTOCOLS:
        path = parts.path.lower()
        if path.endswith(TEXT_EXTENSIONS):
            return ColorToken.PLAINTEXT
        if path.endswith(IMAGE_EXTENSIONS):
            return ColorToken.IMAGEVIEWER
        return ColorToken.SYSTEM
    if protocol == "about":
        return about_page_color(parts.path, context)
    if parts.hostname in PROTECTED_PAGE_COLORS:
        return protected_page_color(parts.hostname, context)
    return None


def find_custom_rule(url, rules):
    """Find the rule for a page by exact URL or exact hostname.

    The first match in the rules' insertion order wins. Returns
    ``(site, rule)`` or ``(None, None)``.
    """
    for site, rule in rules.items():
        if url == site:
            return site, rule
        parts = parse_url(url)
        if parts is None:
            continue
        if parts.hostname is not None and parts.hostname == site:
            return site, rule
    return None, None


def _addon_uuid(url):
    parts = parse_url(url)
    return parts.netloc if parts is not None else None


async def addon_page_color(url, context, addon_source):
    """Look up the custom rule of the add-on owning a moz-extension page."""
    uuid = _addon_uuid(url)
    rules = context.custom_rules
    try:
        addons = await addon_source.list_addons()
    except Exception as e:
        logger.warning("Add-on list unavailable for %s: %s", url, e)
        return ColorToken.ADDON
    for addon in addons:
        if addon.get("type") != "extension" or not addon.get("host_permissions"):
            continue
        key = f"{ADDON_RULE_PREFIX}{addon.get('id')}"
        for host in addon["host_permissions"]:
            if host.startswith(f"{ADDON_PROTOCOL}:") and uuid == _addon_uuid(host) and key in rules:
                try:
                    return parse_color_source(rules[key])
                except InvalidColorError:
                    logger.warning("Ignoring unusable rule for %s: %r", key, rules[key])
                    return ColorToken.ADDON
    return ColorToken.ADDON


def unreachable_page_color(tab):
    """Best guess for a page whose script did not answer."""
    url = tab.url or ""
    title = tab.title or ""
    if url.startswith("data:image"):
        # content scripts are blocked on data: pages
        return ColorToken.IMAGEVIEWER
    if url.endswith(".pdf") or title.endswith(".pdf"):
        return ColorToken.PDFVIEWER
    if (tab.fav_icon_url or "").startswith("chrome:"):
        # page failed to load
        return ColorToken.DEFAULT
    if title and (url == title or re.fullmatch(rf"https?://{re.escape(title)}", url)):
        # plain text viewer, the title is the URL
        return ColorToken.PLAINTEXT
    return ColorToken.FALLBACK


def color_request(context, rule=None):
    preferences = context.preferences
    return {
        "reason": MessageReason.COLOUR_REQUEST.value,
        "config": {
            "dynamic": preferences.dynamic,
            "ignoreMetaThemeColor": preferences.no_theme_color,
            "customRule": rule,
        },
    }


async def web_page_color(tab, context, page_source):
    """Ask the page for its color, falling back to URL/title heuristics."""
    _, rule = find_custom_rule(tab.url, context.custom_rules)
    try:
        response = await page_source.request_color(tab, color_request(context, rule))
    except CollaboratorUnavailable:
        response = None
    logger.debug("Response from tab %s: %s", tab.url, response)

    if response and response.get("colour") is not None:
        try:
            return parse_color_source(response["colour"])
        except InvalidColorError:
            logger.warning("Tab %s answered with an unusable color: %r", tab.url, response["colour"])
    return unreachable_page_color(tab)


async def classify(tab, context, page_source, addon_source):
    """Classify a tab into a ColorToken or a literal Color.

    Args:
        tab: Tab to classify
        context: Context snapshot of scheme and preferences
        page_source: PageColorSource asked for the page's own color
        addon_source: AddonSource used for add-on pages

    Returns:
        ColorToken or Color
    """
    result = classify_static(tab, context)
    if result is not None:
        return result
    parts = parse_url(tab.url)
    if parts is not None and parts.scheme.lower() == ADDON_PROTOCOL:
        return await addon_page_color(tab.url, context, addon_source)
    return await web_page_color(tab, context, page_source)
