"""Actions rendered inside a modal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..models.enums import ActionRole, Color
from ..utils.text import headline
from .evaluation import Evaluator

if TYPE_CHECKING:
    from collections.abc import Callable


class ModalAction:
    """A button shown inside a modal.

    Built fluently::

        ModalAction.make("archive").label("Archive").color("warning")

    Label, color and visibility accept literals or callables; callables are
    resolved against the action itself (``modal_action``) plus whatever
    context the owning trigger supplies.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._label: Any = None
        self._color: Any = None
        self._is_hidden: Any = False
        self._is_visible: Any = True
        self._role = ActionRole.GENERIC
        self._callback_name: str | None = None
        self._arguments: dict[str, Any] | None = None
        self._context: Callable[[], dict[str, Any]] | None = None
        self._evaluator = Evaluator(self._evaluation_context)

    @classmethod
    def make(cls, name: str) -> ModalAction:
        return cls(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, role={self._role.value!r})"

    # Configuration

    def label(self, label: Any) -> ModalAction:
        self._label = label
        return self

    def color(self, color: Any) -> ModalAction:
        self._color = color
        return self

    def hidden(self, condition: Any = True) -> ModalAction:
        self._is_hidden = condition
        return self

    def visible(self, condition: Any = True) -> ModalAction:
        self._is_visible = condition
        return self

    def submit(self, callback_name: str | None) -> ModalAction:
        """Wire the action to submit the modal through ``callback_name``."""
        self._role = ActionRole.SUBMIT
        self._callback_name = callback_name
        return self

    def cancel(self, condition: bool = True) -> ModalAction:
        """Wire the action to close the modal without submitting."""
        self._role = ActionRole.CANCEL if condition else ActionRole.GENERIC
        return self

    def action(
        self,
        callback_name: str | None,
        arguments: dict[str, Any] | None = None,
    ) -> ModalAction:
        """Wire the action to call ``callback_name`` with ``arguments``."""
        self._role = ActionRole.GENERIC
        self._callback_name = callback_name
        self._arguments = arguments
        return self

    def context(self, provider: Callable[[], dict[str, Any]] | None) -> ModalAction:
        """Supply extra named values for deferred label/color/visibility."""
        self._context = provider
        return self

    # Resolution

    def _evaluation_context(self) -> dict[str, Any]:
        context = dict(self._context()) if self._context is not None else {}
        context["modal_action"] = self
        return context

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

    def get_role(self) -> ActionRole:
        return self._role

    def get_callback_name(self) -> str | None:
        return self._callback_name

    def get_arguments(self) -> dict[str, Any]:
        return dict(self._arguments or {})

    def is_submit(self) -> bool:
        return self._role is ActionRole.SUBMIT

    def is_cancel(self) -> bool:
        return self._role is ActionRole.CANCEL

    def is_hidden(self) -> bool:
        if self._evaluator.evaluate(self._is_hidden):
            return True
        return not self._evaluator.evaluate(self._is_visible)
