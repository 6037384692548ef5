"""
Función principal del formulario interactivo.
"""

import shutil

from rich.live import Live

from dynaform.cli.theme import get_console
from dynaform.cli.viewer.terminal import get_key, clear_screen
from dynaform.core.controller import FormController, FormSnapshot

from .models import ViewerState
from .builders import build_display
from .handlers import handle_key


def interactive_form(controller: FormController) -> FormSnapshot:
    """
    Muestra el formulario interactivo hasta que el usuario sale con 'q'.

    Los mensajes del controlador (envío exitoso, registro eliminado) se
    muestran en la línea de mensajes.

    Args:
        controller: Controlador con el tipo de formulario inicial ya activo

    Returns:
        Estado final del formulario, incluyendo los registros enviados
    """
    console = get_console()
    view = ViewerState(controller=controller)

    previous_notifier = controller.notifier

    def notify(message: str) -> None:
        view.message = message
        if previous_notifier is not None:
            previous_notifier(message)

    controller.notifier = notify

    # Guardar tamaño inicial del terminal para detectar cambios
    last_terminal_size = shutil.get_terminal_size()

    clear_screen()

    try:
        with Live(console=console, auto_refresh=False, screen=False) as live:
            live.update(build_display(view), refresh=True)

            while True:
                key = get_key()
                result = handle_key(key, view)

                if result is not None and "_result" in result:
                    break

                # Reiniciar Live si cambió el tamaño del terminal
                current_size = shutil.get_terminal_size()
                if current_size != last_terminal_size:
                    live.stop()
                    clear_screen()
                    last_terminal_size = current_size
                    live.start()

                live.update(build_display(view), refresh=True)
    finally:
        controller.notifier = previous_notifier

    return controller.snapshot()
