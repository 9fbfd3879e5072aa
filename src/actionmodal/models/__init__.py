"""Data models."""

from .definitions import (
    DefinitionsFile,
    ModalActionDefinition,
    ModalDefinition,
    TriggerDefinition,
)
from .enums import (
    CENTERED_MODAL_WIDTHS,
    DEFAULT_MODAL_WIDTH,
    MODAL_WIDTHS,
    ActionRole,
    Color,
)

__all__ = [
    "CENTERED_MODAL_WIDTHS",
    "DEFAULT_MODAL_WIDTH",
    "MODAL_WIDTHS",
    "ActionRole",
    "Color",
    "DefinitionsFile",
    "ModalActionDefinition",
    "ModalDefinition",
    "TriggerDefinition",
]
