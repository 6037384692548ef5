"""
Utilidades de terminal para el visor interactivo.

Funciones para limpiar pantalla y capturar teclas.
"""

import os
import select
import sys

# Espera máxima por el resto de una secuencia de escape (segundos)
ESCAPE_TIMEOUT = 0.05

_ARROWS = {
    'A': 'up',
    'B': 'down',
    'C': 'right',
    'D': 'left',
}


def _normalize_char(key: str) -> str:
    """Traduce un carácter leído al nombre de tecla usado por los handlers."""
    if key == ' ':
        return 'space'
    if key in ('\r', '\n'):
        return 'enter'
    if key in ('\x7f', '\x08'):
        return 'backspace'
    if key == '\t':
        return 'tab'
    return key


def _read_char(fd: int) -> str:
    """Lee un carácter UTF-8 directamente del descriptor, sin buffer."""
    first = os.read(fd, 1)
    if not first:
        return ''
    lead = first[0]
    extra = 0 if lead < 0xC0 else 1 if lead < 0xE0 else 2 if lead < 0xF0 else 3
    data = first + (os.read(fd, extra) if extra else b'')
    return data.decode('utf-8', errors='ignore')


def _pending(fd: int, timeout: float = ESCAPE_TIMEOUT) -> bool:
    """Indica si hay bytes disponibles en el descriptor antes del timeout."""
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


def _read_escape(fd: int) -> str:
    """
    Interpreta lo que sigue a un ESC ya leído.

    Un ESC sin bytes detrás dentro de ESCAPE_TIMEOUT es la tecla Esc.
    """
    if not _pending(fd):
        return 'esc'
    if _read_char(fd) != '[' or not _pending(fd):
        return 'esc'
    return _ARROWS.get(_read_char(fd), 'esc')


def clear_screen() -> None:
    """Limpia la pantalla de la terminal."""
    os.system('cls' if os.name == 'nt' else 'clear')


def get_key() -> str:
    """
    Captura una tecla del usuario.

    Returns:
        String representando la tecla presionada:
        - 'up', 'down', 'left', 'right': flechas
        - 'esc', 'enter', 'backspace', 'space', 'tab'
        - otro caracter tal cual (se conserva mayúscula/minúscula)
    """
    if os.name == 'nt':
        # Windows
        import msvcrt
        key = msvcrt.getch()

        if key == b'\xe0':  # Tecla especial (flechas)
            key2 = msvcrt.getch()
            return {
                b'K': 'left',
                b'M': 'right',
                b'H': 'up',
                b'P': 'down',
            }.get(key2, '')
        elif key == b'\x1b':
            return 'esc'

        return _normalize_char(key.decode('utf-8', errors='ignore'))
    else:
        # Unix/Linux/Mac
        import tty
        import termios

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            key = _read_char(fd)

            if key == '\x1b':  # Secuencia de escape
                return _read_escape(fd)

            return _normalize_char(key)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
