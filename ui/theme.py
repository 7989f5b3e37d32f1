import logging
from tkinter import ttk

import config

logger = logging.getLogger(__name__)

PALETTES = {
    'light': {'bg': '#ffffff', 'fg': '#0f172a', 'field': '#f8fafc', 'select': '#dbeafe', 'muted': '#64748b', 'error': '#dc2626'},
    'dark': {'bg': '#020617', 'fg': '#f8fafc', 'field': '#0f172a', 'select': '#1e293b', 'muted': '#94a3b8', 'error': '#ef4444'},
}

ICONS = {'light': "☀️", 'dark': "🌙", 'system': "🖥️"}
TOOLTIPS = {
    'light': "Modo claro (clic para oscuro)",
    'dark': "Modo oscuro (clic para sistema)",
    'system': "Modo sistema (clic para claro)",
}


def next_theme(current: str) -> str:
    # claro -> oscuro -> sistema -> claro
    if current not in config.THEMES:
        return config.THEMES[0]
    return config.THEMES[(config.THEMES.index(current) + 1) % len(config.THEMES)]


class ThemeManager:
    """
    Aplica los temas claro/oscuro sobre ttk.Style.
    'system' vuelve al tema ttk que trae la plataforma.
    """
    def __init__(self, root, theme: str = config.DEFAULT_THEME):
        self.root = root
        self.style = ttk.Style(root)
        self._system_theme = self.style.theme_use()
        self._system_bg = root.cget("background")
        self.theme = theme
        self.apply(theme)

    def cycle(self) -> str:
        self.apply(next_theme(self.theme))
        return self.theme

    def apply(self, theme: str):
        self.theme = theme
        if theme == 'system' or theme not in PALETTES:
            self.style.theme_use(self._system_theme)
            self.root.configure(background=self._system_bg)
            logger.debug("Tema del sistema: %s", self._system_theme)
            return

        p = PALETTES[theme]
        self.style.theme_use('clam')
        self.style.configure(".", background=p['bg'], foreground=p['fg'], fieldbackground=p['field'])
        self.style.configure("Treeview", background=p['field'], foreground=p['fg'], fieldbackground=p['field'])
        self.style.map("Treeview", background=[("selected", p['select'])], foreground=[("selected", p['fg'])])
        self.style.configure("Treeview.Heading", background=p['select'], foreground=p['fg'])
        self.style.configure("Muted.TLabel", foreground=p['muted'])
        self.style.configure("Error.TLabel", foreground=p['error'])
        self.root.configure(background=p['bg'])
        logger.debug("Tema aplicado: %s", theme)

    @property
    def icon(self) -> str:
        return ICONS.get(self.theme, ICONS['light'])

    @property
    def tooltip(self) -> str:
        return TOOLTIPS.get(self.theme, "Cambiar tema")
