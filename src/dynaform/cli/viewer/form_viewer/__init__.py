"""
Visor interactivo del formulario dinámico.

Muestra los campos del esquema activo, el progreso y la tabla de registros
enviados, y traduce teclas a operaciones del FormController.
"""

from .models import ViewerMode, ViewerResult, ViewerState
from .main import interactive_form
from .builders import (
    build_display,
    build_form_table,
    build_ledger_table,
    build_progress_panel,
    render_field_input,
)
from .handlers import handle_key
from .validators import format_field_value, parse_input_value

__all__ = [
    "ViewerMode",
    "ViewerResult",
    "ViewerState",
    "interactive_form",
    "build_display",
    "build_form_table",
    "build_ledger_table",
    "build_progress_panel",
    "render_field_input",
    "handle_key",
    "format_field_value",
    "parse_input_value",
]
