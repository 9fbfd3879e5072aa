"""Inspect command for printing a trigger's resolved modal."""

import logging
from typing import Any

import yaml

from ..actions.modal import SUBMIT_LABEL_KEY
from ..services import DefinitionService
from .output import detail, error, header, info

logger = logging.getLogger(__name__)


def describe(value: Any) -> str:
    """Render a resolved modal property as one line of text."""
    if value is None:
        return "-"
    if isinstance(value, str):
        return value
    # rich Markdown keeps its source text
    markup = getattr(value, "markup", None)
    if isinstance(markup, str):
        return markup.strip().splitlines()[0] if markup.strip() else "-"
    return type(value).__name__


def load_translations(service: DefinitionService) -> bool:
    """Load the translation catalogs up front, reporting any failure."""
    try:
        service.get_translator().get(SUBMIT_LABEL_KEY)
    except (OSError, ValueError, yaml.YAMLError) as e:
        error(f"Could not load translations: {e}")
        return False
    return True


def run_list(service: DefinitionService) -> int:
    """Print the names of all defined triggers."""
    triggers = service.list_triggers()

    if service.has_load_error:
        error(service.load_error or "Failed to load definitions")
        return 1

    if not triggers:
        info(f"No triggers defined in {service.path}")
        return 0

    header(f"Triggers in {service.path}:")
    for name in triggers:
        info(name)
    return 0


def run_inspect(service: DefinitionService, name: str) -> int:
    """Print the resolved modal of trigger ``name``."""
    service.get_definitions()
    if service.has_load_error:
        error(service.load_error or "Failed to load definitions")
        return 1

    try:
        trigger = service.build_trigger(name)
    except KeyError:
        error(f"Unknown trigger: {name}")
        return 1

    if not load_translations(service):
        return 1

    header(f"{trigger.get_label()} ({trigger.get_name()})")
    info(f"Heading: {describe(trigger.get_modal_heading())}")
    info(f"Subheading: {describe(trigger.get_modal_subheading())}")
    info(f"Content: {describe(trigger.get_modal_content())}")
    info(f"Footer: {describe(trigger.get_modal_footer())}")
    info(f"Width: {trigger.get_modal_width()}")
    info(f"Centered: {'yes' if trigger.is_modal_centered() else 'no'}")
    info(f"Slide-over: {'yes' if trigger.is_modal_slide_over() else 'no'}")

    if trigger.is_wizard():
        info(f"Wizard with steps: {', '.join(map(str, trigger.get_steps()))}")

    actions = trigger.get_modal_actions()
    if not actions:
        info("Actions: none")
        return 0

    info("Actions:")
    for action in actions:
        detail(
            f"{action.get_name()}: {action.get_label()!r} "
            f"[{action.get_role().value}, {action.get_color()}]"
        )

    logger.debug(f"Inspected trigger {name!r} with {len(actions)} actions")
    return 0
