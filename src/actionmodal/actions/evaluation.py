"""Resolution of literal-or-deferred configuration values.

Every configurable property ("slot") holds one of three things: a literal
value, a callable computing the value later, or ``None``. ``Evaluator``
turns any of these into the concrete value.

Callables receive keyword arguments by name from the evaluator's context::

    evaluator = Evaluator(lambda: {"action": trigger, "arguments": {}})
    evaluator.evaluate(lambda action: action.get_label())

Nothing is cached; every call re-runs the callable.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

ContextProvider = Callable[[], Mapping[str, Any]]


def is_deferred(value: Any) -> bool:
    """Check whether a slot value is a deferred computation."""
    return callable(value) and not isinstance(value, type)


class Evaluator:
    """Resolve slot values, injecting context into deferred callables."""

    def __init__(self, context: ContextProvider | None = None) -> None:
        """Initialize the evaluator.

        Args:
            context: Zero-argument callable returning the named values that
                deferred computations may ask for. Called on every
                evaluation so the context can change between calls.
        """
        self._context = context

    def get_context(self) -> dict[str, Any]:
        """Get the named parameters currently available for injection."""
        if self._context is None:
            return {}
        return dict(self._context())

    def evaluate(self, value: Any, **parameters: Any) -> Any:
        """
        Resolve a slot value.

        Literals (including ``None``) are returned unchanged. Callables are
        invoked with the context parameters they declare by name; explicit
        ``parameters`` take precedence over the context. Exceptions raised
        by the callable propagate to the caller.
        """
        if not is_deferred(value):
            return value

        available = self.get_context()
        available.update(parameters)

        return value(**self._injectable(value, available))

    @staticmethod
    def _injectable(func: Callable[..., Any], available: dict[str, Any]) -> dict[str, Any]:
        """Select the keyword arguments ``func`` can accept."""
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            # Some builtins expose no signature
            logger.debug("No signature for %r, calling without arguments", func)
            return {}

        kwargs: dict[str, Any] = {}
        for parameter in signature.parameters.values():
            if parameter.kind is inspect.Parameter.VAR_KEYWORD:
                return available
            if parameter.kind in (
                inspect.Parameter.POSITIONAL_ONLY,
                inspect.Parameter.VAR_POSITIONAL,
            ):
                continue
            if parameter.name in available:
                kwargs[parameter.name] = available[parameter.name]

        return kwargs
