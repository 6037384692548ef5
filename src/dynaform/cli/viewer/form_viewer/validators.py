"""
Conversión y formateo de valores de campos.
"""

import math
from typing import Any

from dynaform.config import FieldKind, FieldValue
from dynaform.core.validation import is_filled


def format_field_value(field, value: Any, mask: str = "*") -> str:
    """Formatea el valor de un campo para mostrar."""
    if not is_filled(value):
        return "-"

    if field.type == FieldKind.PASSWORD:
        return mask * len(str(value))

    if field.type == FieldKind.NUMBER and isinstance(value, float):
        return f"{value:g}"

    return str(value)


def parse_input_value(field, text: str) -> FieldValue:
    """
    Convierte el texto ingresado al valor del campo.

    Solo los campos numéricos se convierten; el resto se guarda como texto.
    Un texto vacío se guarda como "" (campo vacío).

    Raises:
        ValueError: Si un campo numérico recibe un texto no numérico
    """
    value = text.strip() if field.type == FieldKind.NUMBER else text
    if value == "":
        return ""

    if field.type == FieldKind.NUMBER:
        try:
            return int(value)
        except ValueError:
            pass
        try:
            number = float(value)
        except ValueError:
            number = math.nan
        if not math.isfinite(number):
            raise ValueError(f"{field.label} must be a number")
        return number

    return value
