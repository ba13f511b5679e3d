"""
Input/Output utilities for grids and search results.
"""

import json
import logging
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional
from PIL import Image

from .grid import OccupancyGrid

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".bmp", ".jpg", ".jpeg", ".gif"}


def load_json(file_path: Path) -> Optional[Any]:
    """
    Read a JSON document (search configs, exported results).

    Returns:
        Decoded JSON value, or None when the file is missing or malformed
    """
    file_path = Path(file_path)
    try:
        return json.loads(file_path.read_text())
    except (OSError, ValueError) as e:
        logger.error("Error loading JSON from %s: %s", file_path, e)
        return None


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """Write ``data`` as JSON, creating parent directories; False on failure."""
    file_path = Path(file_path)
    try:
        text = json.dumps(data, indent=indent)
    except (TypeError, ValueError) as e:
        logger.error("Cannot serialise data for %s: %s", file_path, e)
        return False
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text + "\n")
    except OSError as e:
        logger.error("Error saving JSON to %s: %s", file_path, e)
        return False
    return True


def parse_grid_text(text: str) -> OccupancyGrid:
    """
    Parse a text grid: one row per line, cells separated by spaces or commas.

    Blank lines and lines starting with '#' are ignored. Rows written as a
    run of digits ("0100") are also accepted.
    """
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        tokens = line.replace(',', ' ').split()
        if len(tokens) == 1 and len(tokens[0]) > 1:
            tokens = list(tokens[0])
        rows.append([int(t) for t in tokens])
    return OccupancyGrid(rows)


def load_grid(grid_path: Path, threshold: int = 128) -> Optional[OccupancyGrid]:
    """
    Load an occupancy grid from disk.

    Args:
        grid_path: .npy array, image (dark pixels are obstacles) or text file
        threshold: Grayscale value below which an image pixel is an obstacle

    Returns:
        OccupancyGrid, or None if loading fails
    """
    grid_path = Path(grid_path)
    suffix = grid_path.suffix.lower()
    try:
        if suffix == ".npy":
            return OccupancyGrid(np.load(grid_path))
        if suffix in IMAGE_SUFFIXES:
            gray = np.array(Image.open(grid_path).convert("L"))
            return OccupancyGrid((gray < threshold).astype(np.int8))
        return parse_grid_text(grid_path.read_text())
    except (OSError, ValueError) as e:
        logger.error("Error loading grid from %s: %s", grid_path, e)
        return None


def save_grid(grid: OccupancyGrid, grid_path: Path) -> bool:
    """
    Save an occupancy grid as .npy or as a space separated text file.

    Args:
        grid: Grid to save
        grid_path: Destination; the suffix selects the format

    Returns:
        True if successful, False otherwise
    """
    grid_path = Path(grid_path)
    try:
        grid_path.parent.mkdir(parents=True, exist_ok=True)
        if grid_path.suffix.lower() == ".npy":
            np.save(grid_path, np.asarray(grid.data))
        else:
            lines = [" ".join(str(int(v)) for v in row) for row in grid.data]
            grid_path.write_text("\n".join(lines) + "\n")
        return True
    except OSError as e:
        logger.error("Error saving grid to %s: %s", grid_path, e)
        return False


def save_image(image: np.ndarray, image_path: Path, scale: int = 1) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3), uint8
        image_path: Path to save image
        scale: Integer upscaling factor (nearest neighbour)

    Returns:
        True if successful, False otherwise
    """
    image_path = Path(image_path)
    try:
        image_path.parent.mkdir(parents=True, exist_ok=True)
        if scale > 1:
            image = np.repeat(np.repeat(image, scale, axis=0), scale, axis=1)
        Image.fromarray(image.astype(np.uint8)).save(image_path)
        return True
    except (OSError, ValueError) as e:
        logger.error("Error saving image to %s: %s", image_path, e)
        return False


def result_to_dict(result) -> Dict[str, Any]:
    """
    Convert a SearchResult into JSON-ready data.

    Args:
        result: SearchResult from AStar.search

    Returns:
        Dictionary with status, endpoints, cost and path
    """
    return {
        'status': result.status.value,
        'start': list(result.start),
        'goal': list(result.goal),
        'cost': result.cost if result.found else None,
        'length': len(result.path) if result.path else 0,
        'nodes_expanded': result.nodes_expanded,
        'path': [list(cell) for cell in result.path] if result.path else None,
    }
