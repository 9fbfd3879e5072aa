"""Modal configuration attached to a trigger action."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..models.enums import CENTERED_MODAL_WIDTHS, DEFAULT_MODAL_WIDTH, Color
from .evaluation import Evaluator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .modal_action import ModalAction
    from .protocol import ModalOwner, Translator

logger = logging.getLogger(__name__)

SUBMIT_LABEL_KEY = "modal.actions.submit.label"
CANCEL_LABEL_KEY = "modal.actions.cancel.label"


class ModalConfiguration:
    """Slots describing a trigger's modal, and their resolution.

    Setters store literals or callables and return the configuration for
    chaining. Getters resolve the current slots on every call; nothing is
    cached and resolving never changes a slot.
    """

    def __init__(self, owner: ModalOwner, translator: Translator) -> None:
        self._owner = owner
        self._translator = translator
        self._evaluator = Evaluator(self._evaluation_context)

        self._extra_modal_actions: Any = []
        self._is_modal_centered: Any = None
        self._is_modal_slide_over: Any = False
        self._modal_actions: Any = None
        self._modal_cancel_action: Any = None
        self._modal_submit_action: Any = None
        self._modal_button_label: Any = None
        self._modal_content: Any = None
        self._modal_footer: Any = None
        self._modal_heading: Any = None
        self._modal_subheading: Any = None
        self._modal_width: Any = None

    def _evaluation_context(self) -> dict[str, Any]:
        context = dict(self._owner.get_evaluation_context())
        context["modal"] = self
        return context

    def evaluate(self, value: Any, **parameters: Any) -> Any:
        return self._evaluator.evaluate(value, **parameters)

    # Setters

    def center_modal(self, condition: Any = True) -> ModalConfiguration:
        self._is_modal_centered = condition
        return self

    def slide_over(self, condition: Any = True) -> ModalConfiguration:
        self._is_modal_slide_over = condition
        return self

    def modal_actions(self, actions: Any = None) -> ModalConfiguration:
        self._modal_actions = actions
        return self

    def extra_modal_actions(self, actions: Any) -> ModalConfiguration:
        self._extra_modal_actions = actions
        return self

    def modal_submit_action(self, action: Any = None) -> ModalConfiguration:
        self._modal_submit_action = action
        return self

    def modal_cancel_action(self, action: Any = None) -> ModalConfiguration:
        self._modal_cancel_action = action
        return self

    def modal_button(self, label: Any = None) -> ModalConfiguration:
        self._modal_button_label = label
        return self

    def modal_content(self, content: Any = None) -> ModalConfiguration:
        self._modal_content = content
        return self

    def modal_footer(self, footer: Any = None) -> ModalConfiguration:
        self._modal_footer = footer
        return self

    def modal_heading(self, heading: Any = None) -> ModalConfiguration:
        self._modal_heading = heading
        return self

    def modal_subheading(self, subheading: Any = None) -> ModalConfiguration:
        self._modal_subheading = subheading
        return self

    def modal_width(self, width: Any = None) -> ModalConfiguration:
        self._modal_width = width
        return self

    # Action list

    def get_modal_actions(self) -> list[ModalAction]:
        """
        Get the actions to render inside the modal, in display order.

        Wizards render their own step navigation, so they get no modal
        actions. An explicit ``modal_actions`` list is used as given (minus
        hidden actions). Otherwise the list is submit, extra actions, cancel,
        reversed as a whole when the modal is centered.
        """
        if self._owner.is_wizard():
            return []

        if self._modal_actions is not None:
            actions = self.evaluate(self._modal_actions)
            if actions is not None:
                return self._filter_hidden_modal_actions(actions)
            logger.debug("modal_actions resolved to None, composing defaults")

        actions = [
            self.get_modal_submit_action(),
            *self.get_extra_modal_actions(),
            self.get_modal_cancel_action(),
        ]

        if self.is_modal_centered():
            actions.reverse()

        return self._filter_hidden_modal_actions(actions)

    @staticmethod
    def _filter_hidden_modal_actions(actions: Iterable[ModalAction]) -> list[ModalAction]:
        return [action for action in actions if not action.is_hidden()]

    def get_modal_submit_action(self) -> ModalAction:
        """Get the submit override, or build the default submit action.

        An override that resolves to None counts as unset.
        """
        if self._modal_submit_action is not None:
            action = self.evaluate(self._modal_submit_action)
            if action is not None:
                return action

        color = self._owner.get_color()
        if color == Color.GRAY.value:
            color = Color.PRIMARY.value

        return (
            self._owner.make_modal_action("submit")
            .label(self.get_modal_button_label())
            .submit(self._owner.get_callback_name())
            .color(color)
            .context(self._owner.get_evaluation_context)
        )

    def get_modal_cancel_action(self) -> ModalAction:
        if self._modal_cancel_action is not None:
            action = self.evaluate(self._modal_cancel_action)
            if action is not None:
                return action

        return (
            self._owner.make_modal_action("cancel")
            .label(self._translator.get(CANCEL_LABEL_KEY))
            .cancel()
            .color(Color.GRAY.value)
            .context(self._owner.get_evaluation_context)
        )

    def get_extra_modal_actions(self) -> list[ModalAction]:
        return list(self.evaluate(self._extra_modal_actions) or [])

    # Content

    def get_modal_button_label(self) -> str:
        label = self.evaluate(self._modal_button_label)
        if label is None:
            return self._translator.get(SUBMIT_LABEL_KEY)
        return label

    def get_modal_content(self) -> Any:
        return self.evaluate(self._modal_content)

    def get_modal_footer(self) -> Any:
        return self.evaluate(self._modal_footer)

    def get_modal_heading(self) -> Any:
        """Get the heading, falling back to the trigger's label."""
        heading = self.evaluate(self._modal_heading)
        if heading is None:
            return self._owner.get_label()
        return heading

    def get_modal_subheading(self) -> Any:
        return self.evaluate(self._modal_subheading)

    # Layout

    def get_modal_width(self) -> str:
        width = self.evaluate(self._modal_width)
        if width is None:
            return DEFAULT_MODAL_WIDTH
        return width

    def is_modal_centered(self) -> bool:
        """Explicit centering wins; otherwise small modals are centered."""
        centered = self.evaluate(self._is_modal_centered)
        if centered is None:
            return self.get_modal_width() in CENTERED_MODAL_WIDTHS
        return bool(centered)

    def is_modal_slide_over(self) -> bool:
        return bool(self.evaluate(self._is_modal_slide_over))
