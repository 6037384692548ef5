"""
Sistema de iconos para la CLI.

Iconos Unicode con fallback automático a ASCII si el terminal no
soporta Unicode.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, 'encoding', None) or 'ascii'
        test_chars = "❯✓✗⚠ℹ█░•"
        test_chars.encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    check: str            # Campo completo
    cross: str            # Campo con error
    warning: str          # Requerido pendiente
    info: str             # Opcional
    edit: str             # Acción editar
    remove: str           # Acción eliminar
    bar_filled: str       # Bloque lleno de la barra de progreso
    bar_empty: str        # Bloque vacío
    mask: str             # Carácter para enmascarar contraseñas


ICONS_UNICODE = IconSet(
    check="✓",
    cross="✗",
    warning="⚠",
    info="ℹ",
    edit="✎",
    remove="−",
    bar_filled="█",
    bar_empty="░",
    mask="•",
)

ICONS_ASCII = IconSet(
    check="[+]",
    cross="[x]",
    warning="[!]",
    info="[i]",
    edit="*",
    remove="-",
    bar_filled="#",
    bar_empty=".",
    mask="*",
)


# Cache del IconSet activo
_active_icons: Optional[IconSet] = None


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons

    if _active_icons is None:
        _active_icons = ICONS_UNICODE if _detect_unicode_support() else ICONS_ASCII

    return _active_icons

