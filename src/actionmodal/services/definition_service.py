"""Service for loading trigger definitions from actionmodal.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from rich.markdown import Markdown

from ..actions import ModalAction, TriggerAction
from ..models import (
    ActionRole,
    Color,
    DefinitionsFile,
    ModalActionDefinition,
    TriggerDefinition,
)
from ..translation import TranslationService

if TYPE_CHECKING:
    from ..actions import Translator

logger = logging.getLogger(__name__)


class DefinitionService:
    """Service for loading, caching and building trigger definitions."""

    def __init__(
        self,
        path: Path,
        translator: Translator | None = None,
        locale: str = "en",
        translations_file: Path | None = None,
    ) -> None:
        """Initialize the definition service.

        Args:
            path: Path to the YAML definitions file
            translator: Translator for default modal labels. When omitted,
                one is created for the file's ``locale``, or ``locale``
                when the file sets none.
            locale: Fallback locale for the created translator
            translations_file: Optional YAML translation overrides
        """
        self.path = path
        self._translator = translator
        self._locale = locale
        self._translations_file = translations_file
        self._definitions: DefinitionsFile | None = None
        self._load_error: str | None = None

    @property
    def has_load_error(self) -> bool:
        """Check if there was an error loading definitions."""
        return self._load_error is not None

    @property
    def load_error(self) -> str | None:
        """Get the load error message if any."""
        return self._load_error

    def get_definitions(self) -> DefinitionsFile:
        """Get definitions, loading from file if not cached."""
        if self._definitions is None:
            self._definitions = self._load_definitions()
        return self._definitions

    def reload(self) -> None:
        """Clear cached definitions, forcing reload on next access."""
        self._definitions = None
        self._load_error = None

    def list_triggers(self) -> list[str]:
        return [trigger.name for trigger in self.get_definitions().triggers]

    def get_definition(self, name: str) -> TriggerDefinition:
        """Get a trigger definition by name.

        Raises:
            KeyError: If no trigger with that name is defined
        """
        definition = self.get_definitions().get_trigger(name)
        if definition is None:
            raise KeyError(name)
        return definition

    def get_translator(self) -> Translator:
        if self._translator is None:
            locale = self.get_definitions().locale or self._locale
            self._translator = TranslationService(locale, self._translations_file)
        return self._translator

    def build_trigger(self, name: str) -> TriggerAction:
        """Build a configured TriggerAction from its definition."""
        definition = self.get_definition(name)
        modal = definition.modal

        trigger = TriggerAction.make(definition.name, self.get_translator())

        if definition.label is not None:
            trigger.label(definition.label)
        if definition.color is not None:
            trigger.color(definition.color)
        if definition.callback is not None:
            trigger.callback(definition.callback)
        if definition.steps:
            trigger.steps(definition.steps)

        trigger.modal_heading(modal.heading)
        trigger.modal_subheading(modal.subheading)
        trigger.modal_content(Markdown(modal.content) if modal.content else None)
        trigger.modal_footer(Markdown(modal.footer) if modal.footer else None)
        trigger.modal_width(modal.width)
        trigger.center_modal(modal.centered)
        trigger.slide_over(modal.slide_over)
        trigger.modal_button(modal.button_label)

        if modal.submit_action is not None:
            trigger.modal_submit_action(
                self._build_modal_action(trigger, modal.submit_action, ActionRole.SUBMIT)
            )
        if modal.cancel_action is not None:
            trigger.modal_cancel_action(
                self._build_modal_action(trigger, modal.cancel_action, ActionRole.CANCEL)
            )
        if modal.actions is not None:
            trigger.modal_actions(
                [self._build_modal_action(trigger, action) for action in modal.actions]
            )
        trigger.extra_modal_actions(
            [self._build_modal_action(trigger, action) for action in modal.extra_actions]
        )

        logger.debug(f"Built trigger {name!r}")
        return trigger

    @staticmethod
    def _build_modal_action(
        trigger: TriggerAction,
        definition: ModalActionDefinition,
        role: ActionRole = ActionRole.GENERIC,
    ) -> ModalAction:
        if role is ActionRole.SUBMIT:
            action = trigger.make_modal_action(definition.name).submit(trigger.get_callback_name())
        elif role is ActionRole.CANCEL or definition.cancel:
            action = trigger.make_modal_action(definition.name).cancel().color(Color.GRAY.value)
        else:
            action = trigger.make_extra_modal_action(definition.name, definition.arguments)

        if definition.label is not None:
            action.label(definition.label)
        if definition.color is not None:
            action.color(definition.color)

        return action.hidden(definition.hidden)

    def _load_definitions(self) -> DefinitionsFile:
        """Load definitions from file or return an empty set."""
        self._load_error = None

        if not self.path.exists():
            logger.debug(f"No {self.path} found, using empty definitions")
            return DefinitionsFile()

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f)

            if data is None:
                self._load_error = f"{self.path.name} is empty"
                logger.warning(self._load_error)
                return DefinitionsFile()

            definitions = DefinitionsFile(**data)
            logger.info(f"Loaded {self.path.name} with {len(definitions.triggers)} triggers")
            return definitions

        except yaml.YAMLError as e:
            self._load_error = f"Invalid YAML in {self.path.name}: {e}"
            logger.warning(self._load_error)
            return DefinitionsFile()

        except Exception as e:
            self._load_error = f"Error loading {self.path.name}: {e}"
            logger.warning(self._load_error)
            return DefinitionsFile()
