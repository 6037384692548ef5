"""
dynaform - Formularios dinámicos definidos por esquema.

Renderiza campos tipados a partir de un esquema, valida campos requeridos,
calcula el progreso de completado y mantiene un registro en memoria de los
formularios enviados.
"""

__version__ = "0.1.0"

from dynaform.config import (
    FieldKind,
    TextField,
    NumberField,
    DateField,
    PasswordField,
    DropdownField,
    FormSchema,
    SubmittedRecord,
    AppSettings,
)
from dynaform.exceptions import (
    DynaformError,
    UnknownFormType,
    UnknownField,
    LedgerIndexError,
    SchemaFileError,
)
from dynaform.data import SchemaRegistry, load_registry
from dynaform.core import (
    compute_errors,
    compute_progress,
    SubmissionLedger,
    FormController,
    SubmitResult,
)

__all__ = [
    "__version__",
    "FieldKind",
    "TextField",
    "NumberField",
    "DateField",
    "PasswordField",
    "DropdownField",
    "FormSchema",
    "SubmittedRecord",
    "AppSettings",
    "DynaformError",
    "UnknownFormType",
    "UnknownField",
    "LedgerIndexError",
    "SchemaFileError",
    "SchemaRegistry",
    "load_registry",
    "compute_errors",
    "compute_progress",
    "SubmissionLedger",
    "FormController",
    "SubmitResult",
]
