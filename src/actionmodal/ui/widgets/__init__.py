"""Widget components."""

from .action_modal import ActionModal

__all__ = ["ActionModal"]
