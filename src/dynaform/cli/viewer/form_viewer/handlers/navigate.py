"""
Handler para el modo de navegación del formulario.
"""

from typing import Optional

from dynaform.config import FieldKind

from ..models import ViewerState, ViewerMode, ViewerResult


def handle_navigate(key: str, view: ViewerState) -> Optional[dict]:
    """Maneja el modo de navegación."""
    ctrl = view.controller
    cmd = key.lower() if len(key) == 1 else key

    if cmd == 'q':
        return {"_result": ViewerResult.QUIT}

    elif cmd == 'up':
        view.move_field(-1)
        view.message = ""

    elif cmd in ('down', 'tab'):
        view.move_field(1)
        view.message = ""

    elif cmd == 'enter':
        fld = view.current_field
        if fld is None:
            view.message = "This form has no fields"
            return None

        view.message = ""
        if fld.type == FieldKind.DROPDOWN:
            current = ctrl.state.values.get(fld.name)
            # Índice 0 es la opción vacía
            view.select_idx = fld.options.index(current) + 1 if current in fld.options else 0
            view.mode = ViewerMode.EDIT_SELECT
        else:
            current = ctrl.state.values.get(fld.name)
            view.input_buffer = "" if current is None else str(current)
            view.mode = ViewerMode.EDIT_TEXT

    elif cmd == 's':
        result = ctrl.submit()
        if result.ok:
            view.reset_cursor()
        else:
            n = len(result.errors)
            view.message = f"Error: {n} required field{'s' if n != 1 else ''} missing"

    elif cmd == 't':
        keys = ctrl.registry.keys()
        view.select_idx = keys.index(ctrl.form_type) if ctrl.form_type in keys else 0
        view.mode = ViewerMode.SELECT_FORM
        view.message = ""

    elif cmd == 'l':
        if len(ctrl.ledger):
            view.clamp_ledger()
            view.mode = ViewerMode.LEDGER
            view.message = ""
        else:
            view.message = "No submitted entries yet"

    return None
