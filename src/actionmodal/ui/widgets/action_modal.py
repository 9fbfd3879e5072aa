"""Modal screen rendering a trigger's resolved modal configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

if TYPE_CHECKING:
    from ...actions import ModalAction, TriggerAction

logger = logging.getLogger(__name__)

# Terminal cell widths for each modal width token
WIDTH_CELLS = {
    "xs": 30,
    "sm": 40,
    "md": 50,
    "lg": 60,
    "xl": 70,
    "2xl": 80,
    "3xl": 90,
    "4xl": 100,
    "5xl": 110,
    "6xl": 120,
    "7xl": 130,
}

BUTTON_VARIANTS = {
    "primary": "primary",
    "danger": "error",
    "warning": "warning",
    "success": "success",
}


def button_variant(color: str) -> str:
    """Map an action color to a Textual button variant."""
    return BUTTON_VARIANTS.get(color, "default")


class ActionModal(ModalScreen[str | None]):
    """Modal showing a trigger's heading, content and resolved actions.

    Returns the name of the pressed action, or None when the modal was
    cancelled (cancel action or Escape).
    """

    DEFAULT_CSS = """
    ActionModal {
        align: center middle;
    }

    ActionModal > #dialog {
        height: auto;
        max-width: 100%;
        max-height: 100%;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    ActionModal #heading {
        width: 100%;
        text-style: bold;
    }

    ActionModal #subheading {
        width: 100%;
        color: $text-muted;
        margin-bottom: 1;
    }

    ActionModal #content {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }

    ActionModal #footer {
        width: 100%;
        height: auto;
        color: $text-muted;
        margin-top: 1;
    }

    ActionModal .buttons {
        width: 100%;
        height: auto;
        align: left middle;
    }

    ActionModal Button {
        margin: 0 1 0 0;
    }

    ActionModal.-centered #heading, ActionModal.-centered #subheading {
        text-align: center;
    }

    ActionModal.-centered .buttons {
        align: center middle;
    }

    ActionModal.-slide-over {
        align: right top;
    }

    ActionModal.-slide-over > #dialog {
        height: 100%;
        border: none;
        border-left: solid $primary;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, trigger: TriggerAction) -> None:
        super().__init__()
        self.trigger = trigger
        self._actions: dict[str, ModalAction] = {}

    def compose(self) -> ComposeResult:
        trigger = self.trigger
        subheading = trigger.get_modal_subheading()
        content = trigger.get_modal_content()
        footer = trigger.get_modal_footer()
        actions = trigger.get_modal_actions()

        self._actions = {f"modal-action-{index}": action for index, action in enumerate(actions)}
        logger.debug(
            "Rendering modal for %s with actions %s",
            trigger.get_name(),
            [action.get_name() for action in actions],
        )

        with Vertical(id="dialog"):
            yield Static(trigger.get_modal_heading(), id="heading")
            if subheading is not None:
                yield Static(subheading, id="subheading")
            if content is not None:
                yield Static(content, id="content")
            if self._actions:
                with Horizontal(classes="buttons"):
                    for button_id, action in self._actions.items():
                        yield Button(
                            action.get_label(),
                            id=button_id,
                            variant=button_variant(action.get_color()),
                        )
            if footer is not None:
                yield Static(footer, id="footer")

    def on_mount(self) -> None:
        self.set_class(self.trigger.is_modal_centered(), "-centered")
        self.set_class(self.trigger.is_modal_slide_over(), "-slide-over")

        width = self.trigger.get_modal_width()
        dialog = self.query_one("#dialog", Vertical)
        dialog.styles.width = WIDTH_CELLS.get(width, "100%")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        action = self._actions.get(event.button.id or "")
        if action is None or action.is_cancel():
            self.dismiss(None)
        else:
            self.dismiss(action.get_name())

    def action_cancel(self) -> None:
        self.dismiss(None)
