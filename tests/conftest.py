"""Configuración de pytest para tests de dynaform."""

import pytest

from dynaform.config import FormSchema, TextField, NumberField, DropdownField
from dynaform.core.controller import FormController
from dynaform.data.schema_loader import SchemaRegistry, load_registry


@pytest.fixture
def registry():
    """Registro con los esquemas del sistema."""
    return load_registry()


@pytest.fixture
def user_schema(registry):
    """Esquema userInfo: firstName y lastName requeridos, age opcional."""
    return registry.lookup("userInfo")


@pytest.fixture
def optional_schema():
    """Esquema sin campos requeridos."""
    return FormSchema(
        key="feedback",
        title="Feedback",
        fields=(
            TextField(name="comment", label="Comment"),
            NumberField(name="score", label="Score"),
        ),
    )


@pytest.fixture
def custom_registry(optional_schema):
    """Registro con un esquema sin requeridos y otro que comparte nombres con userInfo."""
    shared = FormSchema(
        key="contact",
        title="Contact",
        fields=(
            TextField(name="firstName", label="Given Name", required=True),
            DropdownField(name="channel", label="Channel", options=("Email", "Phone"), required=True),
        ),
    )
    return SchemaRegistry([shared, optional_schema], default_key="contact")


@pytest.fixture
def notifications():
    """Mensajes emitidos por el controlador."""
    return []


@pytest.fixture
def controller(registry, notifications):
    """Controlador con userInfo activo y mensajes capturados."""
    return FormController(registry, "userInfo", notifier=notifications.append)
