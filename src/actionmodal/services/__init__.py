"""Service layer for loading definitions."""

from .definition_service import DefinitionService

__all__ = ["DefinitionService"]
