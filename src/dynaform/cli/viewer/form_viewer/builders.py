"""
Funciones para construir componentes visuales del formulario.

Todas reciben el ViewerState y leen el estado del formulario a través de
un FormSnapshot del controlador.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text
from rich.panel import Panel
from rich import box

from dynaform.cli.theme import get_palette, get_icons
from dynaform.config import FieldKind, FormSchema
from dynaform.core.controller import FormSnapshot
from dynaform.core.validation import count_required, format_progress, is_filled, round_progress

from .models import ViewerState, ViewerMode
from .validators import format_field_value


BAR_WIDTH = 30


def placeholder_text(field) -> str:
    """Texto de la opción vacía de un dropdown."""
    return f"Select {field.label}"


def render_field_input(field, value, editing: bool = False, buffer: str = "") -> Text:
    """
    Construye la celda de valor de un campo según su tipo.

    Raises:
        TypeError: Si el tipo de campo no es uno de los conocidos
    """
    p = get_palette()
    icons = get_icons()

    if editing:
        shown = icons.mask * len(buffer) if field.type == FieldKind.PASSWORD else buffer
        text = Text(shown, style=f"bold {p.input_text}")
        text.append("_", style=f"blink bold {p.input_text}")
        return text

    filled = is_filled(value)
    value_style = f"bold {p.accent}" if filled else p.muted

    if field.type == FieldKind.TEXT:
        return Text(format_field_value(field, value), style=value_style)
    elif field.type == FieldKind.NUMBER:
        return Text(format_field_value(field, value), style=value_style)
    elif field.type == FieldKind.DATE:
        return Text(format_field_value(field, value) if filled else "yyyy-mm-dd", style=value_style)
    elif field.type == FieldKind.PASSWORD:
        return Text(format_field_value(field, value, mask=icons.mask), style=value_style)
    elif field.type == FieldKind.DROPDOWN:
        return Text(str(value) if filled else placeholder_text(field), style=value_style)

    raise TypeError(f"Tipo de campo no soportado: {field.type!r}")


def build_form_table(view: ViewerState, snap: FormSnapshot) -> Table:
    """Construye la tabla del formulario."""
    p = get_palette()
    icons = get_icons()

    table = Table(
        title=snap.schema.title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("#", justify="right", width=3)
    table.add_column("Field", justify="left", width=22)
    table.add_column("Value", justify="left", width=28)
    table.add_column("Status", justify="left", width=26)

    in_form = view.mode in (ViewerMode.NAVIGATE, ViewerMode.EDIT_TEXT, ViewerMode.EDIT_SELECT)

    for idx, fld in enumerate(snap.schema.fields):
        is_selected = in_form and idx == view.selected_idx
        value = snap.values.get(fld.name)
        error = snap.errors.get(fld.name)

        # Estado visual
        if error:
            status_text = Text(f"{icons.cross} {error}", style=p.error)
        elif is_filled(value):
            status_text = Text(f"{icons.check} filled", style=p.success)
        elif fld.required:
            status_text = Text(f"{icons.warning} required", style=p.warning)
        else:
            status_text = Text(f"{icons.info} optional", style=p.muted)

        editing = is_selected and view.mode == ViewerMode.EDIT_TEXT
        value_text = render_field_input(fld, value, editing=editing, buffer=view.input_buffer)

        label = fld.label + (" *" if fld.required else "")

        if is_selected:
            row_style = f"bold reverse {p.primary}"
            idx_text = Text(f">{idx + 1}", style=row_style)
            label_text = Text(label, style=row_style)
            if not editing:
                value_text.stylize(row_style)
        else:
            idx_text = Text(str(idx + 1), style=p.muted)
            label_text = Text(label, style="bold" if fld.required else p.muted)

        table.add_row(idx_text, label_text, value_text, status_text)

    return table


def build_progress_panel(snap: FormSnapshot) -> Panel:
    """Construye el panel de progreso con barra y porcentaje redondeado."""
    p = get_palette()
    icons = get_icons()

    filled_width = round_progress(snap.progress) * BAR_WIDTH // 100
    filled_width = max(0, min(BAR_WIDTH, filled_width))

    text = Text()
    text.append("  Progress: ", style=p.muted)
    text.append(icons.bar_filled * filled_width, style=p.bar_filled)
    text.append(icons.bar_empty * (BAR_WIDTH - filled_width), style=p.bar_empty)
    text.append(f"  {format_progress(snap.progress)}", style=f"bold {p.accent}")

    filled, required = count_required(snap.schema, snap.values)
    text.append(f"  ({filled}/{required} required)", style=p.muted)

    return Panel(text, border_style=p.border, padding=(0, 1))


def build_ledger_table(view: ViewerState, snap: FormSnapshot) -> Table:
    """
    Construye la tabla de registros enviados.

    Una columna por campo del esquema activo y una de acciones.
    """
    p = get_palette()
    icons = get_icons()
    schema: FormSchema = snap.schema

    table = Table(
        title=f"Submitted entries ({len(snap.entries)})",
        title_style=f"bold {p.secondary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.SIMPLE_HEAVY,
        show_header=True,
        padding=(0, 1),
    )

    table.add_column("#", justify="right", width=3)
    for fld in schema.fields:
        table.add_column(fld.label, justify="left")
    table.add_column("Actions", justify="left")

    in_ledger = view.mode == ViewerMode.LEDGER

    for idx, record in enumerate(snap.entries):
        is_selected = in_ledger and idx == view.ledger_idx
        cells = [Text(f">{idx + 1}" if is_selected else str(idx + 1))]
        for fld in schema.fields:
            value = record.values.get(fld.name)
            cells.append(Text(format_field_value(fld, value, mask=icons.mask) if is_filled(value) else ""))

        actions = Text()
        actions.append(f"[e] {icons.edit} Edit", style=p.warning)
        actions.append("  ")
        actions.append(f"[d] {icons.remove} Delete", style=p.error)
        cells.append(actions)

        table.add_row(*cells, style=f"bold reverse {p.primary}" if is_selected else None)

    return table


def build_select_options(view: ViewerState) -> Table:
    """Construye la lista de opciones de un dropdown, con la opción vacía primero."""
    p = get_palette()
    fld = view.current_field

    table = Table(
        title=f"Select: {fld.label}",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.ROUNDED,
        show_header=False,
        padding=(0, 1),
    )
    table.add_column("", width=3)
    table.add_column("Option", width=40)

    choices = [placeholder_text(fld), *fld.options]
    for idx, name in enumerate(choices):
        if idx == view.select_idx:
            row_style = f"bold reverse {p.primary}"
            table.add_row(Text(">", style=row_style), Text(name, style=row_style))
        else:
            table.add_row(Text(" "), Text(name, style=p.muted if idx == 0 else ""))

    return table


def build_form_type_selector(view: ViewerState) -> Table:
    """Construye el selector de tipo de formulario."""
    p = get_palette()
    ctrl = view.controller

    table = Table(
        title="Form type",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.DOUBLE,
        show_header=False,
        padding=(0, 1),
    )
    table.add_column("", width=3)
    table.add_column("Form", width=30)
    table.add_column("Key", width=16)

    for idx, schema in enumerate(ctrl.registry):
        active = " (active)" if schema.key == ctrl.form_type else ""
        if idx == view.select_idx:
            row_style = f"bold reverse {p.primary}"
            table.add_row(
                Text(">", style=row_style),
                Text(schema.title + active, style=row_style),
                Text(schema.key, style=row_style),
            )
        else:
            table.add_row(Text(" "), Text(schema.title + active), Text(schema.key, style=p.muted))

    return table


def _nav_key(nav: Text, key: str, label: str, style: str) -> None:
    p = get_palette()
    nav.append("[", style=p.muted)
    nav.append(key, style=f"bold {style}")
    nav.append(f"] {label}  ", style=p.muted)


def build_nav_text(view: ViewerState) -> Text:
    """Construye el texto de navegación según el modo."""
    p = get_palette()
    nav = Text("  ")

    if view.mode == ViewerMode.NAVIGATE:
        _nav_key(nav, "↑↓", "Move", p.nav_key)
        _nav_key(nav, "Enter", "Edit", p.nav_key)
        _nav_key(nav, "s", "Submit", p.nav_confirm)
        _nav_key(nav, "t", "Form type", p.nav_key)
        if len(view.controller.ledger):
            _nav_key(nav, "l", "Entries", p.nav_key)
        _nav_key(nav, "q", "Quit", p.nav_cancel)

    elif view.mode == ViewerMode.EDIT_TEXT:
        _nav_key(nav, "Enter", "Confirm", p.nav_confirm)
        _nav_key(nav, "Esc", "Cancel", p.nav_cancel)

    elif view.mode in (ViewerMode.EDIT_SELECT, ViewerMode.SELECT_FORM):
        _nav_key(nav, "↑↓", "Move", p.nav_key)
        _nav_key(nav, "Enter", "Select", p.nav_confirm)
        _nav_key(nav, "Esc", "Cancel", p.nav_cancel)

    elif view.mode == ViewerMode.LEDGER:
        _nav_key(nav, "↑↓", "Move", p.nav_key)
        _nav_key(nav, "e", "Edit", p.warning)
        _nav_key(nav, "d", "Delete", p.nav_cancel)
        _nav_key(nav, "Esc", "Back to form", p.nav_key)

    return nav


def build_message_text(view: ViewerState) -> Text:
    """Construye el texto de mensaje."""
    p = get_palette()
    if not view.message:
        return Text("")

    msg = view.message.lower()
    if msg.startswith("error"):
        style = f"bold {p.error}"
    elif "success" in msg:
        style = f"bold {p.success}"
    else:
        style = p.info

    return Text(f"  {view.message}", style=style)


def build_display(view: ViewerState) -> Group:
    """Construye el display completo."""
    snap = view.controller.snapshot()

    elements = [
        Text(""),
        build_form_table(view, snap),
    ]

    if view.mode == ViewerMode.EDIT_SELECT:
        elements.append(Text(""))
        elements.append(build_select_options(view))
    elif view.mode == ViewerMode.SELECT_FORM:
        elements.append(Text(""))
        elements.append(build_form_type_selector(view))

    elements.extend([
        Text(""),
        build_progress_panel(snap),
    ])

    if snap.entries:
        elements.append(build_ledger_table(view, snap))

    elements.extend([
        build_message_text(view),
        build_nav_text(view),
    ])

    return Group(*elements)
