"""
Núcleo de dynaform: validación, progreso, registro de envíos y controlador.
"""

from dynaform.core.validation import (
    NO_REQUIRED_PROGRESS,
    is_filled,
    required_message,
    compute_errors,
    count_required,
    compute_progress,
    round_progress,
    format_progress,
)
from dynaform.core.ledger import SubmissionLedger
from dynaform.core.controller import (
    SUBMIT_SUCCESS_MESSAGE,
    DELETE_SUCCESS_MESSAGE,
    FormPhase,
    FormState,
    FormSnapshot,
    SubmitResult,
    FormController,
)

__all__ = [
    # validación y progreso
    "NO_REQUIRED_PROGRESS",
    "is_filled",
    "required_message",
    "compute_errors",
    "count_required",
    "compute_progress",
    "round_progress",
    "format_progress",
    # registro
    "SubmissionLedger",
    # controlador
    "SUBMIT_SUCCESS_MESSAGE",
    "DELETE_SUCCESS_MESSAGE",
    "FormPhase",
    "FormState",
    "FormSnapshot",
    "SubmitResult",
    "FormController",
]
