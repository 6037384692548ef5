"""
Validación de campos requeridos y cálculo de progreso.

Funciones puras: no modifican el esquema ni los valores recibidos.
"""

import math
from typing import Any, Mapping

from dynaform.config import FormSchema


# Progreso de un esquema sin campos requeridos (vacuamente completo)
NO_REQUIRED_PROGRESS = 100.0


def is_filled(value: Any) -> bool:
    """
    Indica si un valor cuenta como completado.

    Solo None y "" son vacíos. Un 0 numérico o un texto con espacios
    cuentan como completados.
    """
    return value is not None and value != ""


def required_message(label: str) -> str:
    """Mensaje de error para un campo requerido vacío."""
    return f"{label} is required"


def compute_errors(schema: FormSchema, values: Mapping[str, Any]) -> dict[str, str]:
    """
    Calcula los errores de validación del formulario.

    Solo se validan campos requeridos, y solo su presencia.

    Returns:
        Diccionario nombre_campo -> mensaje, vacío si es válido
    """
    errors = {}
    for fld in schema.fields:
        if fld.required and not is_filled(values.get(fld.name)):
            errors[fld.name] = required_message(fld.label)
    return errors


def count_required(schema: FormSchema, values: Mapping[str, Any]) -> tuple[int, int]:
    """Retorna (requeridos_completos, requeridos_totales)."""
    required = schema.required_fields
    filled = sum(1 for fld in required if is_filled(values.get(fld.name)))
    return filled, len(required)


def compute_progress(schema: FormSchema, values: Mapping[str, Any]) -> float:
    """
    Porcentaje de campos requeridos completos, en [0, 100].

    Un esquema sin campos requeridos retorna NO_REQUIRED_PROGRESS.
    """
    filled, required = count_required(schema, values)
    if required == 0:
        return NO_REQUIRED_PROGRESS
    return 100.0 * filled / required


def round_progress(progress: float) -> int:
    """Redondea el progreso al entero más cercano (0.5 hacia arriba)."""
    return int(math.floor(progress + 0.5))


def format_progress(progress: float) -> str:
    """Formatea el progreso para mostrar (ej: '67%')."""
    return f"{round_progress(progress)}%"
