"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    definitions_file: Path = Field(
        default=Path("actionmodal.yml"),
        description="YAML file containing trigger and modal definitions",
    )

    locale: str = Field(
        default="en",
        description="Locale used for default modal button labels",
    )

    translations_file: Path | None = Field(
        default=None,
        description="Optional YAML file overriding built-in translations",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "ACTIONMODAL_",
    }
