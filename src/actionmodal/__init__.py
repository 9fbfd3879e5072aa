"""actionmodal - deferred modal configuration for action triggers."""

from .actions import (
    ActionRole,
    Evaluator,
    ModalAction,
    ModalConfiguration,
    TriggerAction,
)

__version__ = "0.1.0"

__all__ = [
    "ActionRole",
    "Evaluator",
    "ModalAction",
    "ModalConfiguration",
    "TriggerAction",
    "__version__",
]
