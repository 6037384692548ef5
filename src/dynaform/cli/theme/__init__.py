"""
Sistema de temas para la interfaz CLI de dynaform.

- palette: paletas de colores y consola Rich (CLITheme, ColorPalette)
- icons: iconos Unicode con fallback ASCII
- printing: funciones que imprimen directamente a consola
"""

from dynaform.cli.theme.palette import (
    ColorPalette,
    THEME_DEFAULT,
    THEME_NORD,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from dynaform.cli.theme.icons import IconSet, get_icons
from dynaform.cli.theme.printing import (
    styled_header,
    print_header,
    print_success,
    print_error,
    print_info,
)

__all__ = [
    # palette
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_NORD",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # icons
    "IconSet",
    "get_icons",
    # printing
    "styled_header",
    "print_header",
    "print_success",
    "print_error",
    "print_info",
]
