"""Textual preview of a trigger's modal."""

from textual.app import App

from .actions import TriggerAction
from .ui.widgets import ActionModal


class ModalPreviewApp(App[str | None]):
    """Open one trigger's modal and exit with the pressed action's name."""

    TITLE = "actionmodal"

    def __init__(self, trigger: TriggerAction) -> None:
        super().__init__()
        self.trigger = trigger
        self.sub_title = trigger.get_label()

    def on_mount(self) -> None:
        self.push_screen(ActionModal(self.trigger), self.exit)


def run(trigger: TriggerAction) -> str | None:
    """Run the preview and return the pressed action's name."""
    app = ModalPreviewApp(trigger)
    return app.run()
