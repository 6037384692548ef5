"""Modelos Pydantic para esquemas de formularios, registros y configuración."""

import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


FieldValue = Union[str, int, float]


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


class FieldKind(str, Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    PASSWORD = "password"
    DROPDOWN = "dropdown"


class ThemeName(str, Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    NORD = "nord"
    MINIMAL = "minimal"


# ============================================================================
# Descriptores de campo
# ============================================================================

class _BaseField(BaseModel):
    """Atributos comunes a todos los tipos de campo."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Clave única dentro del esquema")
    label: str = Field(..., min_length=1, description="Etiqueta visible")
    required: bool = Field(default=False, description="Campo obligatorio")


class TextField(_BaseField):
    """Campo de texto libre."""
    type: Literal["text"] = "text"


class NumberField(_BaseField):
    """Campo numérico."""
    type: Literal["number"] = "number"


class DateField(_BaseField):
    """Campo de fecha (texto libre, sin validación de formato)."""
    type: Literal["date"] = "date"


class PasswordField(_BaseField):
    """Campo de texto con valor enmascarado."""
    type: Literal["password"] = "password"


class DropdownField(_BaseField):
    """Campo de selección entre opciones fijas."""
    type: Literal["dropdown"] = "dropdown"
    options: tuple[str, ...] = Field(..., min_length=1, description="Opciones en orden")


FieldDescriptor = Annotated[
    Union[TextField, NumberField, DateField, PasswordField, DropdownField],
    Field(discriminator="type"),
]


# ============================================================================
# Esquemas
# ============================================================================

class FormSchema(BaseModel):
    """Esquema de formulario: lista ordenada de campos."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Clave del tipo de formulario")
    title: str = Field(..., min_length=1, description="Nombre visible en el selector")
    fields: tuple[FieldDescriptor, ...] = Field(default=())

    @field_validator("fields")
    @classmethod
    def validate_unique_names(cls, v: tuple) -> tuple:
        names = [f.name for f in v]
        duplicated = sorted({n for n in names if names.count(n) > 1})
        if duplicated:
            raise ValueError(f"Duplicate field names: {', '.join(duplicated)}")
        return v

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    @property
    def required_fields(self) -> tuple:
        return tuple(f for f in self.fields if f.required)

    def get_field(self, name: str):
        """Obtiene un campo por su nombre, o None."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


# ============================================================================
# Registros enviados
# ============================================================================

class SubmittedRecord(BaseModel):
    """
    Copia de los valores de un formulario enviado.

    Cada envío genera un id nuevo, incluso al reenviar un registro editado.
    Los valores quedan en un mapping de solo lectura.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_id)
    form_type: str
    values: Mapping[str, FieldValue] = Field(default_factory=dict, validate_default=True)
    submitted_at: str = Field(default_factory=generate_timestamp)

    @field_validator("values", mode="after")
    @classmethod
    def freeze_values(cls, v: Mapping[str, FieldValue]) -> Mapping[str, FieldValue]:
        return MappingProxyType(dict(v))

    @field_serializer("values")
    def serialize_values(self, v: Mapping[str, FieldValue]) -> dict[str, FieldValue]:
        return dict(v)


# ============================================================================
# Configuración de la aplicación
# ============================================================================

class AppSettings(BaseModel):
    """Configuración de la CLI."""
    theme: ThemeName = Field(default=ThemeName.DEFAULT)
    default_form_type: Optional[str] = Field(default=None, description="Tipo inicial; None usa el del registro")
    schemas_file: Optional[Path] = Field(default=None, description="JSON con esquemas propios")
    verbose: bool = False
