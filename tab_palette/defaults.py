"""Default preference values and built-in color tables.

Colors are stored as hex strings, the same form the preference file uses.
"""

DEFAULT_PREFERENCES = {
    # Dimming coefficients per surface
    "tabbar": 0.0,
    "tabSelected": 0.1,
    "toolbar": 0.0,
    "toolbarBorder": 0.0,
    "toolbarField": 0.05,
    "toolbarFieldBorder": 0.05,
    "toolbarFieldOnFocus": 0.05,
    "sidebar": 0.05,
    "sidebarBorder": 0.05,
    "popup": 0.05,
    "popupBorder": 0.05,
    # Contrast floors against the chrome's foreground (black text in light, white in dark)
    "minContrast_light": 4.5,
    "minContrast_dark": 4.5,
    "allowDarkLight": True,
    "dynamic": True,
    "noThemeColour": True,
    "custom": True,
    "homeBackground_light": "#ffffff",
    "homeBackground_dark": "#2b2a33",
    "fallbackColour_light": "#ffffff",
    "fallbackColour_dark": "#2b2a33",
    "customRule": {},
}

# about: pages, keyed by URL pathname
ABOUT_PAGE_COLORS = {
    "blank": {"light": "#ffffff", "dark": "#1c1b22"},
    "checkerboard": {"dark": "#000000"},
    "debugging": {"light": "#f9f9fa", "dark": "#1c1b22"},
    "devtools-toolbox": {"light": "#f9f9fa", "dark": "#0c0c0d"},
    "firefoxview": {"light": "#f9f9fb", "dark": "#2b2a33"},
    "home": {"light": "#f9f9fb", "dark": "#2b2a33"},
    "newtab": {"light": "#f9f9fb", "dark": "#2b2a33"},
    "privatebrowsing": {"dark": "#25003e"},
    "processes": {"light": "#eeeeee", "dark": "#32313a"},
    "sync-log": {"light": "#ececec", "dark": "#282828"},
}

# Sites where content scripts are not allowed to run, keyed by hostname
PROTECTED_PAGE_COLORS = {
    "accounts-static.cdn.mozilla.net": {"light": "#ffffff", "dark": "#1c1b22"},
    "accounts.firefox.com": {"light": "#fafafd"},
    "addons.cdn.mozilla.net": {"light": "#ffffff", "dark": "#1c1b22"},
    "addons.mozilla.org": {"light": "#20123a", "dark": "#20123a"},
    "content.cdn.mozilla.net": {"light": "#ffffff", "dark": "#1c1b22"},
    "discovery.addons.mozilla.org": {"light": "#ececec"},
    "install.mozilla.org": {"light": "#ffffff", "dark": "#1c1b22"},
    "support.mozilla.org": {"light": "#ffffff"},
}
