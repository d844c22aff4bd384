"""Generated upload files: creation and best-effort cleanup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)


def generate_image(file_name: str, directory: str | os.PathLike, color: str = "blue") -> Path:
    """
    Write a small JPEG used as an upload fixture.

    Args:
        file_name: File name, e.g. ``"Shoes a1b2c3.jpg"``.
        directory: Destination directory (created when missing).
        color: Fill colour of the image.

    Returns:
        Path of the written image.
    """
    os.makedirs(directory, exist_ok=True)
    path = Path(directory) / file_name
    img = Image.new("RGB", (200, 200), color=color)
    img.save(path, format="JPEG")
    logger.debug("Generated image %s", path)
    return path


def delete_file(path: str | os.PathLike) -> bool:
    """
    Delete a file if it exists.

    Returns:
        True if a file was deleted, False if there was nothing to delete.
    """
    try:
        os.remove(path)
    except FileNotFoundError:
        logger.debug("Nothing to delete at %s", path)
        return False
    logger.debug("Deleted %s", path)
    return True


def delete_files(directory: str | os.PathLike, file_names: list[str]) -> int:
    """Delete each of ``file_names`` from ``directory``; return how many existed."""
    return sum(delete_file(Path(directory) / name) for name in file_names)
