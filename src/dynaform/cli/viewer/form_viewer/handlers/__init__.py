"""
Handlers de teclas para el formulario interactivo.

Cada módulo maneja un modo específico del visor.
"""

from typing import Optional

from ..models import ViewerState, ViewerMode

from .navigate import handle_navigate
from .edit import handle_edit_text, handle_edit_select
from .selector import handle_select_form
from .ledger import handle_ledger


def handle_key(key: str, view: ViewerState) -> Optional[dict]:
    """
    Maneja una tecla presionada.

    Returns:
        None si debe continuar el loop
        dict con "_result" si debe salir
    """
    if view.mode == ViewerMode.EDIT_TEXT:
        return handle_edit_text(key, view)

    elif view.mode == ViewerMode.EDIT_SELECT:
        return handle_edit_select(key, view)

    elif view.mode == ViewerMode.SELECT_FORM:
        return handle_select_form(key, view)

    elif view.mode == ViewerMode.LEDGER:
        return handle_ledger(key, view)

    elif view.mode == ViewerMode.NAVIGATE:
        return handle_navigate(key, view)

    return None


__all__ = ["handle_key"]
