"""Shared CLI helpers for context management and dataset loading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from click import Context

    from ..services import SearchService


def resolve_data_path(ctx: Context, data: Optional[Path]) -> Optional[Path]:
    """Pick the dataset path: command option first, then config.

    Args:
        ctx: Click context with config.
        data: Value of the command's ``--data`` option.

    Returns:
        Path to load, or None for the bundled dataset.
    """
    if data is not None:
        return data
    return ctx.obj["config"].data_path


def get_search_service(ctx: Context, data: Optional[Path] = None) -> SearchService:
    """Lazily load the dataset and create the search service.

    Args:
        ctx: Click context with config.
        data: Optional dataset path overriding the config.

    Returns:
        SearchService over the loaded dataset.

    Raises:
        DataLoadError: If the dataset can't be loaded.
    """
    from ..data import load_dataset
    from ..services import SearchService

    if "search_service" not in ctx.obj:
        cfg = ctx.obj["config"]
        items = load_dataset(resolve_data_path(ctx, data))
        ctx.obj["search_service"] = SearchService(items, config=cfg.search)

    return ctx.obj["search_service"]
