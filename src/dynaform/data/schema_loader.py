"""
Registro de esquemas de formularios.

Los esquemas del sistema se leen de ``schemas.json`` (junto a este módulo).
Opcionalmente se puede cargar un archivo JSON propio con la misma forma:

    {
      "default": "userInfo",
      "forms": [
        {"key": "...", "title": "...", "fields": [{"name": ..., "type": ..., ...}]}
      ]
    }

El registro es de solo lectura: se construye una vez y no se modifica.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from dynaform.config import FormSchema
from dynaform.exceptions import SchemaFileError, UnknownFormType

logger = logging.getLogger(__name__)

SYSTEM_SCHEMAS_FILE = Path(__file__).parent / "schemas.json"


class SchemaRegistry:
    """
    Mapeo de tipo de formulario a esquema.

    Example:
        >>> registry = load_registry()
        >>> schema = registry.lookup("userInfo")
        >>> [f.name for f in schema.fields]
        ['firstName', 'lastName', 'age']
    """

    def __init__(self, schemas: list[FormSchema], default_key: Optional[str] = None):
        self._schemas: dict[str, FormSchema] = {}
        for schema in schemas:
            if schema.key in self._schemas:
                raise SchemaFileError(f"Duplicate form type '{schema.key}'")
            self._schemas[schema.key] = schema

        if default_key is None and self._schemas:
            default_key = next(iter(self._schemas))
        if default_key is not None and default_key not in self._schemas:
            raise UnknownFormType(default_key, self.keys())
        self._default_key = default_key

    @property
    def default_key(self) -> Optional[str]:
        """Tipo de formulario inicial."""
        return self._default_key

    def lookup(self, key: str) -> FormSchema:
        """
        Obtiene el esquema de un tipo de formulario.

        Raises:
            UnknownFormType: Si la clave no está registrada
        """
        try:
            return self._schemas[key]
        except KeyError:
            raise UnknownFormType(key, self.keys()) from None

    def keys(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def schemas(self) -> tuple[FormSchema, ...]:
        return tuple(self._schemas.values())

    def __contains__(self, key: object) -> bool:
        return key in self._schemas

    def __iter__(self) -> Iterator[FormSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)


def parse_registry(data: dict) -> SchemaRegistry:
    """Construye un registro a partir del contenido JSON ya decodificado."""
    if not isinstance(data, dict) or not isinstance(data.get("forms"), list):
        raise SchemaFileError("Expected an object with a 'forms' list")
    if not data["forms"]:
        raise SchemaFileError("No form schemas defined")

    try:
        schemas = [FormSchema.model_validate(item) for item in data["forms"]]
    except ValidationError as e:
        raise SchemaFileError(f"Invalid schema: {e}") from e

    return SchemaRegistry(schemas, default_key=data.get("default"))


def load_registry(path: Optional[Path] = None) -> SchemaRegistry:
    """
    Carga el registro de esquemas.

    Args:
        path: Archivo JSON propio. Si es None se usan los esquemas del sistema.

    Raises:
        SchemaFileError: Si el archivo no existe, no es JSON o no valida
    """
    json_path = Path(path) if path is not None else SYSTEM_SCHEMAS_FILE

    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SchemaFileError(f"Cannot read {json_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaFileError(f"Invalid JSON in {json_path}: {e}") from e

    registry = parse_registry(data)
    logger.debug("Esquemas cargados desde %s: %s", json_path, ", ".join(registry.keys()))
    return registry
