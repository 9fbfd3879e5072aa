"""Interfaces the modal configuration needs from its surroundings."""

from typing import Any, Protocol

from .modal_action import ModalAction


class ModalOwner(Protocol):
    """The trigger a modal configuration is attached to."""

    def get_color(self) -> str:
        """Get the trigger's resolved color."""
        ...

    def get_label(self) -> str:
        """Get the trigger's resolved label."""
        ...

    def is_wizard(self) -> bool:
        """Check whether the trigger runs as a stepped flow."""
        ...

    def get_callback_name(self) -> str:
        """Get the name the host calls when the modal is submitted."""
        ...

    def make_modal_action(self, name: str) -> ModalAction:
        """Build a new modal action named ``name``."""
        ...

    def get_evaluation_context(self) -> dict[str, Any]:
        """Get named values available to deferred modal properties."""
        ...


class Translator(Protocol):
    """Looks up localized text by key."""

    def get(self, key: str) -> str:
        """Get the text for ``key`` in the active locale."""
        ...
