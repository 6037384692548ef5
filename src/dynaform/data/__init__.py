"""
Datos del sistema: esquemas de formularios incluidos en el paquete.
"""

from dynaform.data.schema_loader import (
    SYSTEM_SCHEMAS_FILE,
    SchemaRegistry,
    load_registry,
    parse_registry,
)

__all__ = [
    "SYSTEM_SCHEMAS_FILE",
    "SchemaRegistry",
    "load_registry",
    "parse_registry",
]
