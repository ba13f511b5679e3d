"""
Configuration utilities and default settings.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from .io_utils import load_json

logger = logging.getLogger(__name__)

DUPLICATE_POLICIES = ("lazy", "contains")


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    # "lazy": enqueue on every improvement, skip stale entries on dequeue
    # "contains": enqueue only if the cell is not already in the open set
    duplicate_policy: str = "lazy"
    max_iterations: Optional[int] = None  # None = unbounded
    precheck_connectivity: bool = False

    def validate(self) -> "SearchConfig":
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"Unknown duplicate_policy {self.duplicate_policy!r}, "
                f"expected one of {DUPLICATE_POLICIES}"
            )
        if self.max_iterations is not None:
            if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, int):
                raise ValueError(f"max_iterations must be an integer, got {self.max_iterations!r}")
            if self.max_iterations <= 0:
                raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        return self


@dataclass
class RenderConfig:
    """Configuration for text and image rendering."""
    path_marker: str = "*"
    cell_size: int = 16  # pixels per grid cell in exported images


# Default configurations
DEFAULT_SEARCH_CONFIG = SearchConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()


def load_search_config(path: Path) -> SearchConfig:
    """
    Load a SearchConfig from a JSON file.

    Args:
        path: JSON file with any subset of SearchConfig fields

    Returns:
        Validated SearchConfig; defaults when the file cannot be read

    Raises:
        ValueError: the file is not a JSON object or holds invalid values
    """
    data = load_json(path)
    if data is None:
        logger.warning("Using default search config, could not read %s", path)
        return SearchConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Search config in {path} must be a JSON object, got {type(data).__name__}")

    known = {f.name for f in fields(SearchConfig)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown search config key %r in %s", key, path)

    config = SearchConfig(**{k: v for k, v in data.items() if k in known})
    return config.validate()
