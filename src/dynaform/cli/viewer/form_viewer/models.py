"""
Modelos de datos del visor interactivo.

El estado del formulario (valores, errores, progreso, registro) vive en el
FormController. ViewerState solo guarda lo propio de la pantalla: cursor,
modo actual, buffer de edición y mensaje.
"""

from dataclasses import dataclass

from dynaform.core.controller import FormController


class ViewerMode:
    """Modos del visor."""
    NAVIGATE = "navigate"  # Moverse entre campos
    EDIT_TEXT = "edit_text"  # Escribiendo el valor de un campo
    EDIT_SELECT = "edit_select"  # Eligiendo una opción de un dropdown
    SELECT_FORM = "select_form"  # Selector de tipo de formulario
    LEDGER = "ledger"  # Moverse entre registros enviados


class ViewerResult:
    """Resultado del visor al salir."""
    QUIT = "quit"


@dataclass
class ViewerState:
    """Estado de la pantalla del formulario."""
    controller: FormController
    mode: str = ViewerMode.NAVIGATE
    selected_idx: int = 0  # Campo actual
    input_buffer: str = ""
    select_idx: int = 0  # Opción actual en dropdown o selector de formulario
    ledger_idx: int = 0  # Registro actual en modo LEDGER
    message: str = ""

    @property
    def current_field(self):
        """Campo bajo el cursor, o None si el esquema no tiene campos."""
        fields = self.controller.schema.fields
        if not fields:
            return None
        return fields[self.selected_idx % len(fields)]

    def move_field(self, step: int) -> None:
        """Mueve el cursor de campos, circular."""
        n = len(self.controller.schema.fields)
        if n:
            self.selected_idx = (self.selected_idx + step) % n

    def move_ledger(self, step: int) -> None:
        """Mueve el cursor de registros, circular."""
        n = len(self.controller.ledger)
        if n:
            self.ledger_idx = (self.ledger_idx + step) % n

    def clamp_ledger(self) -> None:
        """Ajusta el cursor de registros tras eliminar o retirar uno."""
        n = len(self.controller.ledger)
        self.ledger_idx = min(self.ledger_idx, max(n - 1, 0))

    def reset_cursor(self) -> None:
        """Vuelve al primer campo en modo navegación."""
        self.mode = ViewerMode.NAVIGATE
        self.selected_idx = 0
        self.input_buffer = ""
        self.select_idx = 0
