"""
Handler para el selector de tipo de formulario.
"""

from typing import Optional

from ..models import ViewerState, ViewerMode


def handle_select_form(key: str, view: ViewerState) -> Optional[dict]:
    """Maneja el selector de tipo de formulario."""
    ctrl = view.controller
    keys = ctrl.registry.keys()

    if key == 'up':
        view.select_idx = (view.select_idx - 1) % len(keys)
    elif key == 'down':
        view.select_idx = (view.select_idx + 1) % len(keys)

    elif key == 'enter':
        schema = ctrl.select_form_type(keys[view.select_idx])
        view.reset_cursor()
        view.message = f"{schema.title} selected"

    elif key == 'esc':
        view.mode = ViewerMode.NAVIGATE
        view.message = ""

    return None
