"""Event handling: turns browser events into applied chrome themes.

Every event rebuilds the context snapshot and recomputes palettes from
scratch. Nothing is cached between events, so a late answer for a tab that
has since changed only repaints its window once more.
"""

import asyncio
import logging

from .classifier import classify, web_page_color
from .collaborators import MessageReason
from .color import InvalidColorError
from .context import Context
from .contrast import correct_contrast
from .export import build_theme
from .palette import generate_palette
from .scheme import Scheme, resolve_scheme
from .tokens import ColorToken, parse_color_source, resolve_token

logger = logging.getLogger(__name__)


def resolve_frame_color(source, context):
    """Resolve a token or literal color into the (color, scheme) to paint with.

    Tokens are curated per scheme and used as is; literal colors are
    contrast-corrected first.
    """
    if isinstance(source, ColorToken):
        return resolve_token(source, context)
    preferences = context.preferences
    return correct_contrast(
        source,
        context.scheme,
        preferences.min_contrast_light,
        preferences.min_contrast_dark,
        preferences.allow_dark_light,
    )


class Orchestrator:
    """Coordinates scheme resolution, classification and theme application.

    Args:
        preference_store: PreferenceStore holding the user's preferences
        scheme_signal: SchemeSignal for the browser override and OS dark mode
        tabs: TabSource listing the active tab of every window
        page_source: PageColorSource asked for a page's color
        addon_source: AddonSource listing installed add-ons
        theme_sink: ThemeSink that paints a window
    """

    def __init__(self, preference_store, scheme_signal, tabs, page_source, addon_source, theme_sink):
        self.preference_store = preference_store
        self.scheme_signal = scheme_signal
        self.tabs = tabs
        self.page_source = page_source
        self.addon_source = addon_source
        self.theme_sink = theme_sink
        self.context = Context(Scheme.LIGHT, preference_store.preferences)

    async def current_scheme(self):
        override = await self.scheme_signal.get_override()
        os_prefers_dark = await self.scheme_signal.prefers_dark()
        return resolve_scheme(override, os_prefers_dark)

    async def refresh_context(self):
        """Replace the snapshot. Classification only ever sees complete snapshots."""
        scheme = await self.current_scheme()
        self.context = Context(scheme, self.preference_store.preferences)
        return self.context

    async def initialise(self):
        await self.preference_store.normalize()
        await self.update()

    async def preference_update(self):
        await self.preference_store.load()
        await self.update()

    async def update(self):
        """Recompute and apply the theme of every window."""
        await self.refresh_context()
        if not self.preference_store.valid():
            logger.warning("Preferences are invalid, reinitialising")
            await self.initialise()
            return
        active_tabs = list(await self.tabs.active_tabs())
        results = await asyncio.gather(
            *(self.update_tab(tab) for tab in active_tabs), return_exceptions=True
        )
        for tab, result in zip(active_tabs, results):
            if isinstance(result, Exception):
                logger.warning("Window %s was not updated: %r", tab.window_id, result)

    async def update_tab(self, tab):
        context = self.context
        source = await classify(tab, context, self.page_source, self.addon_source)
        return await self.set_frame_color(tab.window_id, source, context)

    async def set_frame_color(self, window_id, source, context=None):
        """Build the palette for ``source`` and apply it to the window."""
        context = context or self.context
        color, scheme = resolve_frame_color(source, context)
        palette = generate_palette(color, scheme, context.preferences)
        logger.debug("Window %s: %s frame %s", window_id, scheme.value, color.hex)
        await self.theme_sink.apply(window_id, build_theme(palette))
        return palette

    async def handle_message(self, message, tab=None):
        """Act on a message sent by a page script or the options page.

        Only messages from the active tab are acted on; anything else, and any
        unknown reason, triggers a full update.
        """
        reason = (message or {}).get("reason")
        if tab is None or not tab.active or reason not in _ACTIONS:
            await self.update()
            return
        await _ACTIONS[reason](self, message, tab)

    async def _on_script_loaded(self, message, tab):
        source = await web_page_color(tab, self.context, self.page_source)
        await self.set_frame_color(tab.window_id, source)

    async def _on_colour_update(self, message, tab):
        colour = (message.get("response") or {}).get("colour")
        try:
            source = parse_color_source(colour)
        except InvalidColorError:
            logger.warning("Tab %s reported an unusable color: %r", tab.url, colour)
            await self.update()
            return
        await self.set_frame_color(tab.window_id, source)

    async def _on_init_request(self, message, tab):
        await self.initialise()

    async def _on_update_request(self, message, tab):
        await self.preference_update()

    # browser event listeners
    async def on_tab_activated(self, *args):
        await self.update()

    async def on_tab_updated(self, *args):
        await self.update()

    async def on_tab_attached(self, *args):
        await self.update()

    async def on_window_focus_changed(self, *args):
        await self.update()

    async def on_scheme_changed(self, *args):
        await self.update()


_ACTIONS = {
    MessageReason.INIT_REQUEST.value: Orchestrator._on_init_request,
    MessageReason.UPDATE_REQUEST.value: Orchestrator._on_update_request,
    MessageReason.SCRIPT_LOADED.value: Orchestrator._on_script_loaded,
    MessageReason.COLOUR_UPDATE.value: Orchestrator._on_colour_update,
}
