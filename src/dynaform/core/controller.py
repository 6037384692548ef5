"""
Controlador de estado del formulario.

Mantiene el esquema activo, los valores en edición, los errores, el
progreso y el registro de envíos. Cada operación deja el estado completo
consistente antes de retornar: no existe un estado intermedio donde el
registro tenga el nuevo envío y los valores no se hayan limpiado.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from dynaform.config import FieldValue, FormSchema, SubmittedRecord
from dynaform.core.ledger import SubmissionLedger
from dynaform.core.validation import compute_errors, compute_progress
from dynaform.data.schema_loader import SchemaRegistry
from dynaform.exceptions import UnknownField

logger = logging.getLogger(__name__)


SUBMIT_SUCCESS_MESSAGE = "Form submitted successfully!"
DELETE_SUCCESS_MESSAGE = "Entry deleted successfully."


class FormPhase(Enum):
    """Fase de la sesión del formulario."""
    IDLE = "idle"  # Esquema seleccionado, sin cambios
    EDITING = "editing"  # Al menos un cambio desde la selección o el último envío


@dataclass
class FormState:
    """Estado mutable del formulario activo."""
    schema: FormSchema
    values: dict[str, FieldValue] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    progress: float = 0.0
    phase: FormPhase = FormPhase.IDLE


@dataclass(frozen=True)
class FormSnapshot:
    """Vista de solo lectura del estado, para renderizar."""
    schema: FormSchema
    values: dict
    errors: dict
    progress: float
    phase: FormPhase
    entries: tuple[SubmittedRecord, ...]

    @property
    def form_type(self) -> str:
        return self.schema.key


@dataclass(frozen=True)
class SubmitResult:
    """Resultado de un intento de envío."""
    ok: bool
    errors: dict = field(default_factory=dict)
    record: Optional[SubmittedRecord] = None


class FormController:
    """
    Coordina esquema, valores, validación y registro de envíos.

    Example:
        >>> ctrl = FormController(load_registry())
        >>> ctrl.set_field_value("firstName", "A")
        >>> ctrl.submit().errors
        {'lastName': 'Last Name is required'}
    """

    def __init__(
        self,
        registry: SchemaRegistry,
        form_type: Optional[str] = None,
        ledger: Optional[SubmissionLedger] = None,
        notifier: Optional[Callable[[str], Any]] = None,
    ):
        """
        Inicializa el controlador.

        Args:
            registry: Registro de esquemas
            form_type: Tipo inicial (por defecto el del registro)
            ledger: Registro de envíos existente (por defecto uno vacío)
            notifier: Callback para mensajes al usuario tras enviar o eliminar
        """
        self.registry = registry
        self.ledger = ledger if ledger is not None else SubmissionLedger()
        self.notifier = notifier
        key = form_type if form_type is not None else registry.default_key
        self._state = FormState(schema=registry.lookup(key))

    # =========================================================================
    # Acceso al estado
    # =========================================================================

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def schema(self) -> FormSchema:
        return self._state.schema

    @property
    def form_type(self) -> str:
        return self._state.schema.key

    @property
    def values(self) -> dict[str, FieldValue]:
        return dict(self._state.values)

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._state.errors)

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def phase(self) -> FormPhase:
        return self._state.phase

    def snapshot(self) -> FormSnapshot:
        """Retorna una copia del estado completo para renderizar."""
        s = self._state
        return FormSnapshot(
            schema=s.schema,
            values=dict(s.values),
            errors=dict(s.errors),
            progress=s.progress,
            phase=s.phase,
            entries=self.ledger.entries,
        )

    # =========================================================================
    # Operaciones
    # =========================================================================

    def select_form_type(self, key: str) -> FormSchema:
        """
        Activa otro tipo de formulario, descartando valores y errores.

        Raises:
            UnknownFormType: Si la clave no existe (el estado no cambia)
        """
        schema = self.registry.lookup(key)
        self._state = FormState(schema=schema)
        logger.debug("Formulario activo: %s", key)
        return schema

    def set_field_value(self, name: str, value: FieldValue) -> float:
        """
        Asigna el valor de un campo y recalcula el progreso.

        Raises:
            UnknownField: Si el campo no pertenece al esquema activo

        Returns:
            Progreso actualizado
        """
        s = self._state
        if s.schema.get_field(name) is None:
            raise UnknownField(name, s.schema.key)

        values = {**s.values, name: value}
        s.values = values
        s.progress = compute_progress(s.schema, values)
        s.phase = FormPhase.EDITING
        return s.progress

    def reset_form(self) -> None:
        """Limpia valores, errores y progreso sin cambiar de esquema."""
        self._state = FormState(schema=self._state.schema)

    def submit(self) -> SubmitResult:
        """
        Valida y, si corresponde, agrega los valores al registro.

        Si hay errores quedan en el estado y se retornan; valores, progreso
        y registro no cambian. Si no hay errores se agrega un registro nuevo
        y el formulario se reinicia.
        """
        s = self._state
        errors = compute_errors(s.schema, s.values)
        if errors:
            s.errors = errors
            s.phase = FormPhase.EDITING
            logger.debug("Envío rechazado en %s: %s", s.schema.key, ", ".join(errors))
            return SubmitResult(ok=False, errors=dict(errors))

        record = SubmittedRecord(form_type=s.schema.key, values=dict(s.values))
        self.ledger.append(record)
        self._state = FormState(schema=s.schema)
        logger.info("Formulario %s enviado (registro %s)", record.form_type, record.id)
        self._notify(SUBMIT_SUCCESS_MESSAGE)
        return SubmitResult(ok=True, record=record)

    def load_for_edit(self, index: int) -> SubmittedRecord:
        """
        Retira un registro y carga sus valores en el formulario.

        Si el registro pertenece a otro tipo de formulario, ese tipo se
        activa primero. Los errores se limpian y el progreso se recalcula.

        Raises:
            LedgerIndexError: Si el índice está fuera de rango
        """
        record = self.ledger[index]
        schema = self.registry.lookup(record.form_type)
        self.ledger.checkout(index)

        values = {k: v for k, v in record.values.items() if k in schema.field_names}
        self._state = FormState(
            schema=schema,
            values=values,
            progress=compute_progress(schema, values),
            phase=FormPhase.EDITING,
        )
        logger.debug("Registro %s cargado para edición", record.id)
        return record

    def delete_entry(self, index: int) -> SubmittedRecord:
        """
        Elimina un registro enviado. El formulario activo no cambia.

        Raises:
            LedgerIndexError: Si el índice está fuera de rango
        """
        record = self.ledger.delete(index)
        logger.info("Registro %s eliminado", record.id)
        self._notify(DELETE_SUCCESS_MESSAGE)
        return record

    def _notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier(message)
