"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_console, get_palette


def styled_header(text: str, subtitle: str = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    console = get_console()
    p = get_palette()
    console.print(Text(f"[+] {text}", style=p.success))


def print_error(text: str) -> None:
    """Imprime error."""
    console = get_console()
    p = get_palette()
    console.print(Text(f"[x] {text}", style=p.error))


def print_info(text: str) -> None:
    """Imprime información."""
    console = get_console()
    p = get_palette()
    console.print(Text(f"[i] {text}", style=p.info))
