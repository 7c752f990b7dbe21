"""
Helpers shared by the schema query engine and the export/import paths.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Sequence, TypeVar

from .constants import EXTENSION_SEPARATOR, JSON_EXTENSION

logger = logging.getLogger("tf2-schema")

T = TypeVar("T")


def is_empty(elements: Sequence[Any]) -> bool:
    """Check whether a sequence has no elements."""
    return len(elements) == 0


def binary_search_by_index(objects: Sequence[T], index: int, key: Callable[[T], int]) -> T | None:
    """
    Binary search a sequence assumed to be sorted ascending by ``key``.

    Returns:
        The object whose key equals ``index``, or None if the probe path
        never hits it (also the case for an unsorted sequence)
    """
    low, high = 0, len(objects) - 1
    while low <= high:
        mid = (low + high) // 2
        value = key(objects[mid])
        if value < index:
            low = mid + 1
        elif value > index:
            high = mid - 1
        else:
            return objects[mid]
    return None


def find_object_by_index(objects: Sequence[T], index: int, key: Callable[[T], int]) -> T | None:
    """
    Find an object by its numeric index.

    Tries a binary search first and falls back to a linear scan, so an
    unsorted sequence costs time but never returns a false negative.

    Args:
        objects: Sequence to search, normally sorted ascending by ``key``
        index: The index value to look for
        key: Extracts the numeric index from an object

    Returns:
        The first matching object, or None if no object has that index
    """
    found = binary_search_by_index(objects, index, key)
    if found is not None:
        return found

    for obj in objects:
        if key(obj) == index:
            logger.warning(f"Index {index} found by linear scan; collection is not sorted by index")
            return obj
    return None


def get_filename(filename: str) -> str:
    """Append the ``.json`` extension unless the filename already has it."""
    extension = f"{EXTENSION_SEPARATOR}{JSON_EXTENSION}"
    if filename.endswith(extension):
        return filename
    return f"{filename}{extension}"


def export_file(directory: str | Path, filename: str, contents: str, encoding: str = "utf-8") -> Path:
    """
    Write ``contents`` to ``directory/filename.json``.

    The directory is created if it does not exist.

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / get_filename(filename)
    path.write_text(contents, encoding=encoding)
    logger.debug(f"Wrote {len(contents)} characters to {path}")
    return path


def import_file(path: str | Path, encoding: str = "utf-8") -> Any:
    """Read and parse a JSON file written by ``export_file``."""
    path = Path(path)
    data = json.loads(path.read_text(encoding=encoding))
    logger.debug(f"Read {path}")
    return data
