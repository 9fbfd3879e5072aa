"""Trigger actions and their modal configuration."""

from ..models.enums import ActionRole
from .action import TriggerAction
from .evaluation import Evaluator, is_deferred
from .modal import ModalConfiguration
from .modal_action import ModalAction
from .protocol import ModalOwner, Translator

__all__ = [
    "ActionRole",
    "Evaluator",
    "ModalAction",
    "ModalConfiguration",
    "ModalOwner",
    "TriggerAction",
    "Translator",
    "is_deferred",
]
