"""Loaders for lists of available locales, with Pydantic validation."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, RootModel, ValidationError


class LocaleSourceError(Exception):
    """Raised when a list of available locales cannot be loaded."""


class LocaleListData(RootModel[list[str]]):
    """Model for a plain JSON array of locale ids."""


class AvailableLocalesData(BaseModel):
    """Model for CLDR availableLocales.json."""

    available_locales: dict[str, list[str]] = Field(alias="availableLocales")

    @property
    def full(self) -> list[str]:
        return self.available_locales.get("full", [])


def load_json(path: Path) -> object:
    """Load JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def load_available_locales(path: Path) -> list[str]:
    """Load locale ids from a JSON array or a CLDR availableLocales.json.

    Raises:
        LocaleSourceError: If the file cannot be read or has another shape.
    """
    try:
        data = load_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise LocaleSourceError(f"Failed to read locales from '{path}': {e}") from e

    try:
        if isinstance(data, dict):
            return AvailableLocalesData.model_validate(data).full
        return LocaleListData.model_validate(data).root
    except ValidationError as e:
        raise LocaleSourceError(
            f"'{path}' is neither a JSON array of locale ids nor a CLDR "
            "availableLocales.json document."
        ) from e


def scan_locale_dirs(directory: Path) -> list[str]:
    """Return the names of the sub-directories of an i18n directory, sorted."""
    if not directory.exists():
        raise LocaleSourceError(f"I18n directory '{directory}' does not exist.")
    if not directory.is_dir():
        raise LocaleSourceError(f"I18n path '{directory}' is not a directory.")
    return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())
