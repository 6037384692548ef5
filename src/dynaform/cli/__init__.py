"""
CLI de dynaform - Formularios dinámicos en terminal.

Comandos:
- run: Formulario interactivo con registro de envíos
- schemas: Lista de tipos de formulario
- show: Campos de un tipo de formulario
- check: Validación no interactiva de valores
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from dynaform.cli.form import form_run, form_schemas, form_show, form_check
from dynaform.cli.theme import CLITheme
from dynaform.config import AppSettings, ThemeName

# Crear aplicación principal
app = typer.Typer(
    name="dynaform",
    help="Schema-driven forms with validation, progress and submitted entries.",
    no_args_is_help=True,
)

app.command("run")(form_run)
app.command("schemas")(form_schemas)
app.command("show")(form_show)
app.command("check")(form_check)


@app.callback()
def main(
    ctx: typer.Context,
    schemas: Annotated[Optional[Path], typer.Option(
        "--schemas",
        help="JSON file with custom form schemas",
        envvar="DYNAFORM_SCHEMAS",
    )] = None,
    theme: Annotated[ThemeName, typer.Option(
        "--theme",
        help="Color theme",
        envvar="DYNAFORM_THEME",
    )] = ThemeName.DEFAULT,
    default_form_type: Annotated[Optional[str], typer.Option(
        "--default-form-type",
        help="Form type preselected when run asks for one",
        envvar="DYNAFORM_DEFAULT_FORM_TYPE",
    )] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
):
    """
    dynaform - Formularios dinámicos definidos por esquema.
    """
    settings = AppSettings(
        theme=theme,
        default_form_type=default_form_type,
        schemas_file=schemas,
        verbose=verbose,
    )
    CLITheme.set_theme(settings.theme)

    if settings.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    ctx.obj = settings


__all__ = [
    "app",
]
