"""JSON dataset loading for the demo and CLI.

Two file shapes are understood:

* Country files: ``{"countries": {"<code>": {"name": ..., "native": ...}}}``
* Word lists: a JSON array of strings.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Union

from ..models import Country

logger = logging.getLogger(__name__)

__all__ = [
    "DataLoadError",
    "default_dataset_path",
    "load_countries",
    "load_dataset",
    "load_words",
    "parse_countries",
]

Dataset = Union[list[Country], list[str]]


class DataLoadError(Exception):
    """Raised when a dataset file can't be read or has an unknown shape."""


def default_dataset_path() -> Path:
    """Path of the bundled country dataset."""
    return Path(str(resources.files("fuzzy_tui.data").joinpath("countries.json")))


def _read_json(path: Path) -> Any:
    """Read and decode a JSON file, wrapping failures in DataLoadError."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataLoadError(f"Cannot read {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e


def parse_countries(contents: dict[str, Any]) -> list[Country]:
    """Build Country objects from decoded country-file contents.

    Args:
        contents: Decoded JSON with a top-level ``countries`` mapping.

    Returns:
        Countries sorted by English name.
    """
    entries = contents.get("countries")
    if not isinstance(entries, dict):
        raise DataLoadError("Expected a 'countries' object")

    countries = []
    for code, entry in entries.items():
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise DataLoadError(f"Country {code!r} has no name")
        countries.append(
            Country(
                code=code,
                name=entry["name"],
                native=entry.get("native") or entry["name"],
                capital=entry.get("capital"),
            )
        )
    return sorted(countries, key=lambda c: c.name)


def load_countries(path: Optional[Path] = None) -> list[Country]:
    """Load a country file (the bundled one by default)."""
    path = path or default_dataset_path()
    contents = _read_json(path)
    if not isinstance(contents, dict):
        raise DataLoadError(f"{path} is not a country file")
    countries = parse_countries(contents)
    logger.debug("Loaded %d countries from %s", len(countries), path)
    return countries


def _parse_words(contents: Any, path: Path) -> list[str]:
    if not isinstance(contents, list) or not all(isinstance(w, str) for w in contents):
        raise DataLoadError(f"{path} is not a list of strings")
    logger.debug("Loaded %d words from %s", len(contents), path)
    return contents


def load_words(path: Path) -> list[str]:
    """Load a JSON array of strings."""
    return _parse_words(_read_json(path), path)


def load_dataset(path: Optional[Path] = None) -> Dataset:
    """Load either dataset shape, detected from the top-level JSON value.

    Args:
        path: Dataset file. Defaults to the bundled countries.

    Returns:
        List of Country objects or list of strings.

    Raises:
        DataLoadError: If the file is unreadable or has an unknown shape.
    """
    path = path or default_dataset_path()
    contents = _read_json(path)
    if isinstance(contents, list):
        return _parse_words(contents, path)
    if isinstance(contents, dict) and "countries" in contents:
        countries = parse_countries(contents)
        logger.debug("Loaded %d countries from %s", len(countries), path)
        return countries
    raise DataLoadError(f"Unrecognized dataset format in {path}")
