"""
Handler para la tabla de registros enviados.
"""

from typing import Optional

from ..models import ViewerState, ViewerMode


def handle_ledger(key: str, view: ViewerState) -> Optional[dict]:
    """Maneja el modo de registros enviados (editar / eliminar)."""
    ctrl = view.controller
    cmd = key.lower() if len(key) == 1 else key

    if cmd == 'up':
        view.move_ledger(-1)
    elif cmd == 'down':
        view.move_ledger(1)

    elif cmd == 'e':
        ctrl.load_for_edit(view.ledger_idx)
        view.reset_cursor()
        view.clamp_ledger()
        view.message = "Entry loaded for editing"

    elif cmd == 'd':
        # El mensaje de confirmación llega por el notifier del controlador
        ctrl.delete_entry(view.ledger_idx)
        view.clamp_ledger()
        if not len(ctrl.ledger):
            view.mode = ViewerMode.NAVIGATE

    elif cmd in ('esc', 'q'):
        view.mode = ViewerMode.NAVIGATE
        view.message = ""

    return None
