"""Enums and constants for modal actions."""

from enum import Enum


class ActionRole(str, Enum):
    """How a modal action behaves when pressed."""

    GENERIC = "generic"
    SUBMIT = "submit"
    CANCEL = "cancel"


class Color(str, Enum):
    """Named colors understood by the rendering layer."""

    PRIMARY = "primary"
    GRAY = "gray"
    DANGER = "danger"
    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"


# Ordered smallest to largest
MODAL_WIDTHS = (
    "xs",
    "sm",
    "md",
    "lg",
    "xl",
    "2xl",
    "3xl",
    "4xl",
    "5xl",
    "6xl",
    "7xl",
    "screen",
)

DEFAULT_MODAL_WIDTH = "4xl"

# Widths small enough that the modal is centered unless told otherwise
CENTERED_MODAL_WIDTHS = frozenset({"xs", "sm"})
