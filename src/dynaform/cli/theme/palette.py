"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from dynaform.config import ThemeName


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, fila seleccionada
    secondary: str    # Encabezados de tabla
    accent: str       # Valores ingresados

    # Colores semánticos
    success: str      # Campo completo, envío exitoso
    warning: str      # Campo requerido pendiente
    error: str        # Errores de validación
    info: str         # Mensajes informativos
    muted: str        # Texto secundario/atenuado

    # Bordes
    border: str

    # Navegación interactiva
    nav_confirm: str     # Enter / enviar
    nav_cancel: str      # Esc / eliminar
    nav_key: str         # Flechas y atajos
    input_text: str      # Texto en edición

    # Barra de progreso
    bar_filled: str
    bar_empty: str


# Tema por defecto - colores pasteles
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    border="#5f5f5f",       # Gris oscuro
    nav_confirm="#87af87",
    nav_cancel="#d75f5f",
    nav_key="#af87af",
    input_text="#ffffff",
    bar_filled="#5f87af",
    bar_empty="#4e4e4e",
)

# Tema Nord - colores fríos
THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    info="#5e81ac",
    muted="#4c566a",
    border="#3b4252",
    nav_confirm="#a3be8c",
    nav_cancel="#bf616a",
    nav_key="#b48ead",
    input_text="#eceff4",
    bar_filled="#88c0d0",
    bar_empty="#3b4252",
)

# Tema Minimal - grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    info="#5fafff",
    muted="#606060",
    border="#404040",
    nav_confirm="#87d787",
    nav_cancel="#ff8787",
    nav_key="#5fafff",
    input_text="#ffffff",
    bar_filled="#5fafff",
    bar_empty="#404040",
)

THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Recrear console con el nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "title": f"bold {p.primary}",
                "nav.confirm": f"bold {p.nav_confirm}",
                "nav.cancel": f"bold {p.nav_cancel}",
                "nav.key": f"bold {p.nav_key}",
                "input": f"bold {p.input_text}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
