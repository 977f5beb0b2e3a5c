"""Interfaces of the browser-side collaborators the orchestrator talks to.

All methods are coroutines; the orchestrator awaits them one event at a time.
"""

from enum import Enum
from typing import Any, Iterable, Optional, Protocol, runtime_checkable


class MessageReason(str, Enum):
    INIT_REQUEST = "INIT_REQUEST"
    UPDATE_REQUEST = "UPDATE_REQUEST"
    SCRIPT_LOADED = "SCRIPT_LOADED"
    COLOUR_UPDATE = "COLOUR_UPDATE"
    COLOUR_REQUEST = "COLOUR_REQUEST"


class CollaboratorUnavailable(Exception):
    """Raised by a collaborator that cannot be reached, e.g. a blocked content script."""


@runtime_checkable
class PreferenceStore(Protocol):
    preferences: Any

    async def load(self) -> Any: ...

    async def normalize(self) -> Any: ...

    def valid(self) -> bool: ...


@runtime_checkable
class SchemeSignal(Protocol):
    async def get_override(self) -> str:
        """Return "light", "dark" or "auto"."""
        ...

    async def prefers_dark(self) -> bool: ...


@runtime_checkable
class PageColorSource(Protocol):
    async def request_color(self, tab: Any, message: dict) -> Optional[dict]:
        """Send a COLOUR_REQUEST to the page; None means no response."""
        ...


@runtime_checkable
class AddonSource(Protocol):
    async def list_addons(self) -> Iterable[dict]:
        """Installed add-ons as dicts with ``id``, ``type`` and ``host_permissions``."""
        ...


@runtime_checkable
class TabSource(Protocol):
    async def active_tabs(self) -> Iterable[Any]: ...


@runtime_checkable
class ThemeSink(Protocol):
    async def apply(self, window_id: int, theme: dict) -> None: ...
