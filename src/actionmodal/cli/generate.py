"""Generate command for creating an example definitions file."""

import logging
from pathlib import Path

import yaml

from ..models import DefinitionsFile
from .output import error, info, success

logger = logging.getLogger(__name__)

DEFINITIONS_HEADER = """\
# actionmodal trigger definitions
#
# Each trigger opens a modal. Modal keys (all optional):
#   heading / subheading: Text shown at the top (heading defaults to the label)
#   content / footer: Markdown rendered in the body and below the buttons
#   width: xs, sm, md, lg, xl, 2xl ... 7xl, screen (default 4xl)
#   centered: true/false; unset centers xs and sm modals only
#   slide_over: Open as a panel docked to the right
#   button_label: Label of the default submit button
#   submit_action / cancel_action: Replace the default buttons
#   extra_actions: Buttons placed between submit and cancel
#   actions: Replace the whole button list (used as given)
#
# Colors: primary, gray, danger, warning, success, info, or a hex code.
# A trigger with steps runs as a wizard and shows no modal buttons.

"""

EXAMPLE_DEFINITIONS = {
    "version": 1,
    "triggers": [
        {
            "name": "delete_post",
            "label": "Delete post",
            "color": "danger",
            "modal": {
                "heading": "Delete post?",
                "subheading": "This cannot be undone.",
                "width": "sm",
                "button_label": "Yes, delete it",
            },
        },
        {
            "name": "publish_post",
            "color": "gray",
            "modal": {
                "content": "The post becomes visible to **everyone**.",
                "extra_actions": [
                    {
                        "name": "schedule",
                        "label": "Schedule",
                        "arguments": {"when": "later"},
                    },
                ],
            },
        },
    ],
}


def generate_definitions_yaml() -> str:
    """Generate example definitions YAML with header comments."""
    # Validate before writing so the example never drifts out of date
    DefinitionsFile(**EXAMPLE_DEFINITIONS)
    body = yaml.dump(EXAMPLE_DEFINITIONS, default_flow_style=False, sort_keys=False)
    return DEFINITIONS_HEADER + body


def run_generate(path: Path) -> int:
    """Write an example definitions file to ``path``.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if path.exists():
        info(f"{path} already exists, leaving it untouched")
        return 0

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(generate_definitions_yaml())
    except OSError as e:
        error(f"Could not write {path}: {e}")
        return 1

    logger.info(f"Generated {path}")
    success(f"Created {path}")
    return 0
