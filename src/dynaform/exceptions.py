"""
Excepciones de dynaform.

Los errores de validación de un formulario NO son excepciones: se reportan
como diccionario campo -> mensaje. Estas clases cubren errores de
configuración o de uso del controlador.
"""


class DynaformError(Exception):
    """Error base del paquete."""


class UnknownFormType(DynaformError, KeyError):
    """El tipo de formulario no existe en el registro de esquemas."""

    def __init__(self, key: str, available=()):
        self.key = key
        self.available = tuple(available)
        super().__init__(key)

    def __str__(self) -> str:
        msg = f"Unknown form type '{self.key}'"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg


class UnknownField(DynaformError, KeyError):
    """El campo no pertenece al esquema activo."""

    def __init__(self, name: str, form_type: str):
        self.name = name
        self.form_type = form_type
        super().__init__(name)

    def __str__(self) -> str:
        return f"Field '{self.name}' does not belong to form '{self.form_type}'"


class LedgerIndexError(DynaformError, IndexError):
    """Índice fuera de rango en el registro de envíos."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Entry index {index} out of range ({size} entries)")


class SchemaFileError(DynaformError, ValueError):
    """Archivo de esquemas ilegible o mal formado."""
