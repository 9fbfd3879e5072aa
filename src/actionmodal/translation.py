"""Localized text for default modal labels."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"

BUILTIN_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "modal.actions.submit.label": "Submit",
        "modal.actions.cancel.label": "Cancel",
    },
    "de": {
        "modal.actions.submit.label": "Absenden",
        "modal.actions.cancel.label": "Abbrechen",
    },
    "fr": {
        "modal.actions.submit.label": "Valider",
        "modal.actions.cancel.label": "Annuler",
    },
    "es": {
        "modal.actions.submit.label": "Enviar",
        "modal.actions.cancel.label": "Cancelar",
    },
}


class TranslationService:
    """Look up localized text by dotted key.

    Lookup order: the active locale, then ``en``, then the key itself.
    A YAML catalog file can add locales or override built-in strings::

        de:
          modal.actions.submit.label: Speichern
    """

    def __init__(self, locale: str = FALLBACK_LOCALE, catalog_path: Path | None = None) -> None:
        """Initialize the translation service.

        Args:
            locale: Active locale code (e.g. "en", "de")
            catalog_path: Optional YAML file with per-locale overrides
        """
        self.locale = locale
        self._catalog_path = catalog_path
        self._catalogs: dict[str, dict[str, str]] | None = None

    def get(self, key: str) -> str:
        """Get the text for ``key`` in the active locale."""
        catalogs = self._get_catalogs()

        for locale in (self.locale, FALLBACK_LOCALE):
            text = catalogs.get(locale, {}).get(key)
            if text is not None:
                return text

        logger.debug(f"No translation for {key!r} in locale {self.locale!r}")
        return key

    def reload(self) -> None:
        """Clear cached catalogs, forcing reload on next lookup."""
        self._catalogs = None

    def _get_catalogs(self) -> dict[str, dict[str, str]]:
        if self._catalogs is None:
            self._catalogs = self._load_catalogs()
        return self._catalogs

    def _load_catalogs(self) -> dict[str, dict[str, str]]:
        catalogs = {locale: dict(entries) for locale, entries in BUILTIN_CATALOGS.items()}

        if self._catalog_path is None:
            return catalogs

        with open(self._catalog_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Translation file {self._catalog_path} must map locales to strings")

        for locale, entries in data.items():
            if not isinstance(entries, dict):
                raise ValueError(f"Translations for locale {locale!r} must be a mapping")
            catalogs.setdefault(str(locale), {}).update(
                {str(key): str(text) for key, text in entries.items()}
            )

        logger.info(f"Loaded translations from {self._catalog_path}")
        return catalogs
