"""Trigger actions that open a modal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..models.enums import Color
from ..translation import TranslationService
from ..utils.text import headline
from .evaluation import Evaluator
from .modal import ModalConfiguration
from .modal_action import ModalAction

if TYPE_CHECKING:
    from .protocol import Translator


class TriggerAction:
    """An action whose trigger opens a configurable modal.

    The modal itself lives in a ``ModalConfiguration`` held by the trigger;
    the ``modal_*`` methods here forward to it and return the trigger so
    everything chains from one object::

        TriggerAction.make("delete_post").color("danger").modal_width("sm")
    """

    DEFAULT_CALLBACK_NAME = "call_mounted_action"

    modal_action_class: type[ModalAction] = ModalAction

    def __init__(self, name: str, translator: Translator | None = None) -> None:
        self._name = name
        self._label: Any = None
        self._color: Any = None
        self._steps: Any = None
        self._arguments: dict[str, Any] = {}
        self._callback_name = self.DEFAULT_CALLBACK_NAME
        self._evaluator = Evaluator(self.get_evaluation_context)
        self.modal = ModalConfiguration(self, translator or TranslationService())

    @classmethod
    def make(cls, name: str, translator: Translator | None = None) -> TriggerAction:
        return cls(name, translator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"

    # Trigger configuration

    def label(self, label: Any) -> TriggerAction:
        self._label = label
        return self

    def color(self, color: Any) -> TriggerAction:
        self._color = color
        return self

    def steps(self, steps: Any) -> TriggerAction:
        """Run the trigger as a stepped flow; the steps own their navigation."""
        self._steps = steps
        return self

    def arguments(self, arguments: dict[str, Any] | None) -> TriggerAction:
        self._arguments = dict(arguments or {})
        return self

    def callback(self, callback_name: str) -> TriggerAction:
        self._callback_name = callback_name
        return self

    # Trigger resolution

    def get_name(self) -> str:
        return self._name

    def get_label(self) -> str:
        label = self._evaluator.evaluate(self._label)
        if label is None:
            return headline(self._name)
        return label

    def get_color(self) -> str:
        color = self._evaluator.evaluate(self._color)
        if color is None:
            return Color.PRIMARY.value
        return color.value if isinstance(color, Color) else color

    def get_steps(self) -> list[Any]:
        return list(self._evaluator.evaluate(self._steps) or [])

    def is_wizard(self) -> bool:
        return bool(self.get_steps())

    def get_arguments(self) -> dict[str, Any]:
        return dict(self._arguments)

    def get_callback_name(self) -> str:
        return self._callback_name

    def get_evaluation_context(self) -> dict[str, Any]:
        return {
            "action": self,
            "arguments": self.get_arguments(),
        }

    def evaluate(self, value: Any, **parameters: Any) -> Any:
        return self._evaluator.evaluate(value, **parameters)

    # Modal action factories

    @classmethod
    def make_modal_action(cls, name: str) -> ModalAction:
        return cls.modal_action_class.make(name)

    def make_extra_modal_action(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
    ) -> ModalAction:
        """Build a gray action that calls back into this trigger with ``arguments``."""
        return (
            self.make_modal_action(name)
            .action(self.get_callback_name(), arguments)
            .color(Color.GRAY.value)
            .context(self.get_evaluation_context)
        )

    # Modal configuration

    def center_modal(self, condition: Any = True) -> TriggerAction:
        self.modal.center_modal(condition)
        return self

    def slide_over(self, condition: Any = True) -> TriggerAction:
        self.modal.slide_over(condition)
        return self

    def modal_actions(self, actions: Any = None) -> TriggerAction:
        self.modal.modal_actions(actions)
        return self

    def extra_modal_actions(self, actions: Any) -> TriggerAction:
        self.modal.extra_modal_actions(actions)
        return self

    def modal_submit_action(self, action: Any = None) -> TriggerAction:
        self.modal.modal_submit_action(action)
        return self

    def modal_cancel_action(self, action: Any = None) -> TriggerAction:
        self.modal.modal_cancel_action(action)
        return self

    def modal_button(self, label: Any = None) -> TriggerAction:
        self.modal.modal_button(label)
        return self

    def modal_content(self, content: Any = None) -> TriggerAction:
        self.modal.modal_content(content)
        return self

    def modal_footer(self, footer: Any = None) -> TriggerAction:
        self.modal.modal_footer(footer)
        return self

    def modal_heading(self, heading: Any = None) -> TriggerAction:
        self.modal.modal_heading(heading)
        return self

    def modal_subheading(self, subheading: Any = None) -> TriggerAction:
        self.modal.modal_subheading(subheading)
        return self

    def modal_width(self, width: Any = None) -> TriggerAction:
        self.modal.modal_width(width)
        return self

    # Modal resolution

    def get_modal_actions(self) -> list[ModalAction]:
        return self.modal.get_modal_actions()

    def get_modal_submit_action(self) -> ModalAction:
        return self.modal.get_modal_submit_action()

    def get_modal_cancel_action(self) -> ModalAction:
        return self.modal.get_modal_cancel_action()

    def get_extra_modal_actions(self) -> list[ModalAction]:
        return self.modal.get_extra_modal_actions()

    def get_modal_button_label(self) -> str:
        return self.modal.get_modal_button_label()

    def get_modal_content(self) -> Any:
        return self.modal.get_modal_content()

    def get_modal_footer(self) -> Any:
        return self.modal.get_modal_footer()

    def get_modal_heading(self) -> Any:
        return self.modal.get_modal_heading()

    def get_modal_subheading(self) -> Any:
        return self.modal.get_modal_subheading()

    def get_modal_width(self) -> str:
        return self.modal.get_modal_width()

    def is_modal_centered(self) -> bool:
        return self.modal.is_modal_centered()

    def is_modal_slide_over(self) -> bool:
        return self.modal.is_modal_slide_over()
