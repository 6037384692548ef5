"""
Comandos CLI del formulario dinámico.
"""

from typing import Annotated, List, Optional

import questionary
import typer
from rich.table import Table
from rich import box

from dynaform.cli.theme import (
    get_console,
    get_palette,
    print_header,
    print_success,
    print_error,
    print_info,
)
from dynaform.cli.viewer.form_viewer import (
    interactive_form,
    build_ledger_table,
    build_progress_panel,
    parse_input_value,
    ViewerState,
    ViewerMode,
)
from dynaform.config import AppSettings, FieldKind
from dynaform.core.controller import FormController
from dynaform.data.schema_loader import SchemaRegistry, load_registry
from dynaform.exceptions import DynaformError


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


def _load_registry(settings: AppSettings) -> SchemaRegistry:
    """Carga el registro de esquemas o termina con error."""
    try:
        return load_registry(settings.schemas_file)
    except DynaformError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _initial_form_type(registry: SchemaRegistry, settings: AppSettings) -> str:
    """Tipo de formulario por defecto según configuración y registro."""
    if settings.default_form_type and settings.default_form_type in registry:
        return settings.default_form_type
    return registry.default_key


def _parse_assignments(assignments: List[str]) -> list[tuple[str, str]]:
    """Parsea pares nombre=valor."""
    pairs = []
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected name=value, got '{item}'", param_hint="--value")
        pairs.append((name.strip(), value))
    return pairs


def form_run(
    ctx: typer.Context,
    form_type: Annotated[Optional[str], typer.Option(
        "--form-type", "-f",
        help="Form type to open (asks when omitted)",
        envvar="DYNAFORM_FORM_TYPE",
    )] = None,
):
    """
    Abre el formulario interactivo.

    Ejemplo:
        dynaform run
        dynaform run --form-type addressInfo
    """
    settings = _settings(ctx)
    registry = _load_registry(settings)

    if form_type is None:
        default = _initial_form_type(registry, settings)
        choices = [
            questionary.Choice(title=f"{s.title} ({s.key})", value=s.key)
            for s in registry
        ]
        form_type = questionary.select(
            "Form type:",
            choices=choices,
            default=next((c for c in choices if c.value == default), None),
        ).ask()
        if form_type is None:
            raise typer.Exit()

    try:
        controller = FormController(registry, form_type)
    except DynaformError as e:
        print_error(str(e))
        raise typer.Exit(1)

    snap = interactive_form(controller)

    n = len(snap.entries)
    if n:
        print_success(f"{n} entr{'ies' if n != 1 else 'y'} submitted")
        view = ViewerState(controller=controller, mode=ViewerMode.NAVIGATE)
        get_console().print(build_ledger_table(view, snap))
    else:
        print_info("No entries submitted")


def form_schemas(ctx: typer.Context):
    """
    Lista los tipos de formulario disponibles.

    Ejemplo:
        dynaform schemas
        dynaform --schemas mis_formularios.json schemas
    """
    settings = _settings(ctx)
    registry = _load_registry(settings)
    p = get_palette()

    table = Table(
        title="Form types",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Key")
    table.add_column("Title")
    table.add_column("Fields", justify="right")
    table.add_column("Required", justify="right")

    for schema in registry:
        marker = " *" if schema.key == registry.default_key else ""
        table.add_row(
            schema.key + marker,
            schema.title,
            str(len(schema.fields)),
            str(len(schema.required_fields)),
        )

    get_console().print(table)


def form_show(
    ctx: typer.Context,
    form_type: Annotated[str, typer.Argument(help="Form type key")],
):
    """
    Muestra los campos de un tipo de formulario.

    Ejemplo:
        dynaform show paymentInfo
    """
    settings = _settings(ctx)
    registry = _load_registry(settings)

    try:
        schema = registry.lookup(form_type)
    except DynaformError as e:
        print_error(str(e))
        raise typer.Exit(1)

    p = get_palette()
    print_header(schema.title, schema.key)

    table = Table(
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Name")
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Options")

    for fld in schema.fields:
        options = ", ".join(fld.options) if fld.type == FieldKind.DROPDOWN else ""
        table.add_row(
            fld.name,
            fld.label,
            str(fld.type),
            "yes" if fld.required else "no",
            options,
        )

    get_console().print(table)


def form_check(
    ctx: typer.Context,
    form_type: Annotated[str, typer.Argument(help="Form type key")],
    values: Annotated[Optional[List[str]], typer.Option(
        "--value", "-v",
        help="Field value as name=value (repeatable)",
    )] = None,
):
    """
    Valida valores de un formulario sin abrir el visor.

    Termina con código 1 si faltan campos requeridos.

    Ejemplo:
        dynaform check userInfo -v firstName=Ana -v lastName=Pérez
    """
    settings = _settings(ctx)
    registry = _load_registry(settings)
    pairs = _parse_assignments(values or [])

    try:
        controller = FormController(registry, form_type)
        for name, raw in pairs:
            fld = controller.schema.get_field(name)
            value = parse_input_value(fld, raw) if fld is not None else raw
            controller.set_field_value(name, value)
    except (DynaformError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    snap = controller.snapshot()
    get_console().print(build_progress_panel(snap))

    result = controller.submit()
    if not result.ok:
        for message in result.errors.values():
            print_error(message)
        raise typer.Exit(1)

    print_success(f"{controller.schema.title}: all required fields present")
