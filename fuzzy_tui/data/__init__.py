"""Sample datasets and loaders."""

from .loader import (
    DataLoadError,
    default_dataset_path,
    load_countries,
    load_dataset,
    load_words,
    parse_countries,
)

__all__ = [
    "DataLoadError",
    "default_dataset_path",
    "load_countries",
    "load_dataset",
    "load_words",
    "parse_countries",
]
