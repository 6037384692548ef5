"""
Handlers para los modos de edición (texto y selección).
"""

from typing import Optional

from ..models import ViewerState, ViewerMode
from ..validators import parse_input_value


def handle_edit_text(key: str, view: ViewerState) -> Optional[dict]:
    """Maneja el modo de edición de texto."""
    fld = view.current_field

    if key == 'enter':
        try:
            value = parse_input_value(fld, view.input_buffer)
        except ValueError as e:
            view.message = f"Error: {e}"
            return None

        view.controller.set_field_value(fld.name, value)
        view.message = f"{fld.label} updated"
        view.input_buffer = ""
        view.mode = ViewerMode.NAVIGATE
        view.move_field(1)

    elif key == 'esc':
        view.mode = ViewerMode.NAVIGATE
        view.input_buffer = ""
        view.message = ""

    elif key == 'backspace':
        view.input_buffer = view.input_buffer[:-1]

    elif key == 'space':
        view.input_buffer += " "

    elif len(key) == 1 and key.isprintable():
        view.input_buffer += key

    return None


def handle_edit_select(key: str, view: ViewerState) -> Optional[dict]:
    """Maneja el modo de selección de un dropdown."""
    fld = view.current_field
    n_choices = len(fld.options) + 1  # Opción vacía + opciones

    if key == 'up':
        view.select_idx = (view.select_idx - 1) % n_choices
    elif key == 'down':
        view.select_idx = (view.select_idx + 1) % n_choices

    elif key == 'enter':
        value = "" if view.select_idx == 0 else fld.options[view.select_idx - 1]
        view.controller.set_field_value(fld.name, value)
        view.message = f"{fld.label} updated"
        view.mode = ViewerMode.NAVIGATE
        view.move_field(1)

    elif key == 'esc':
        view.mode = ViewerMode.NAVIGATE
        view.message = ""

    return None
