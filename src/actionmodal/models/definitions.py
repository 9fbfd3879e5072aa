"""Definition models for actionmodal.yml."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .enums import MODAL_WIDTHS, Color


def _validate_identifier(value: str, name: str = "Name") -> str:
    """Validate an identifier is alphanumeric with underscores, starting with a letter."""
    if not value:
        raise ValueError(f"{name} cannot be empty")
    if not value[0].isalpha():
        raise ValueError(f"{name} must start with a letter")
    if not all(c.isalnum() or c == "_" for c in value):
        raise ValueError(f"{name} must be alphanumeric with underscores only")
    return value


def _validate_color(v: str | None) -> str | None:
    """Validate color is a known named color or hex code."""
    if v is None:
        return v
    if v.startswith("#"):
        hex_part = v[1:]
        if len(hex_part) not in (3, 6):
            raise ValueError("Hex color must be 3 or 6 characters (e.g., #fff or #ffffff)")
        if not all(c in "0123456789abcdefABCDEF" for c in hex_part):
            raise ValueError("Invalid hex color code")
        return v
    names = [color.value for color in Color]
    if v not in names:
        raise ValueError(f"Unknown color '{v}' (expected one of: {', '.join(names)})")
    return v


class ModalActionDefinition(BaseModel):
    """A button inside a modal."""

    name: str = Field(..., min_length=1)
    label: str | None = None
    color: str | None = None
    hidden: bool = False
    cancel: bool = Field(default=False, description="Close the modal without submitting")
    arguments: dict | None = Field(
        default=None,
        description="Arguments passed back to the trigger when pressed",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_identifier(v, "Action name")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _validate_color(v)


class ModalDefinition(BaseModel):
    """Modal configuration for a trigger."""

    heading: str | None = None
    subheading: str | None = None
    content: str | None = Field(default=None, description="Markdown body")
    footer: str | None = Field(default=None, description="Markdown footer")
    width: str | None = None
    centered: bool | None = Field(
        default=None,
        description="Unset derives centering from the width",
    )
    slide_over: bool = False
    button_label: str | None = None
    submit_action: ModalActionDefinition | None = None
    cancel_action: ModalActionDefinition | None = None
    actions: list[ModalActionDefinition] | None = Field(
        default=None,
        description="Replaces the submit/extra/cancel actions entirely",
    )
    extra_actions: list[ModalActionDefinition] = Field(default_factory=list)

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: str | None) -> str | None:
        if v is not None and v not in MODAL_WIDTHS:
            raise ValueError(f"Unknown modal width '{v}' (expected one of: {', '.join(MODAL_WIDTHS)})")
        return v


class TriggerDefinition(BaseModel):
    """A trigger action and the modal it opens."""

    name: str = Field(..., min_length=1)
    label: str | None = None
    color: str | None = None
    callback: str | None = None
    steps: list[str] = Field(
        default_factory=list,
        description="Step names; a trigger with steps runs as a wizard",
    )
    modal: ModalDefinition = Field(default_factory=ModalDefinition)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _validate_identifier(v, "Trigger name")

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str | None) -> str | None:
        return _validate_color(v)


class DefinitionsFile(BaseModel):
    """Root model for actionmodal.yml."""

    version: int = Field(default=1)
    locale: str | None = Field(
        default=None,
        description="Overrides the locale from settings when set",
    )
    triggers: list[TriggerDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> "DefinitionsFile":
        names = [trigger.name for trigger in self.triggers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate trigger names: {', '.join(duplicates)}")
        return self

    def get_trigger(self, name: str) -> TriggerDefinition | None:
        for trigger in self.triggers:
            if trigger.name == name:
                return trigger
        return None
