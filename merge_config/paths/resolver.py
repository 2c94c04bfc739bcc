"""Path resolver - expands files and directories into an ordered file list."""

import os
import stat
from pathlib import Path
from typing import Iterable, Optional, Union

from merge_config.config.exceptions import (
    DirectoryEntryError,
    DirectoryReadError,
    FileNameError,
    PathMetadataError,
)
from merge_config.paths.base import PathFilter
from merge_config.paths.filters import NoFilter
from merge_config.utils.logging import get_logger

logger = get_logger(__name__)

Location = Union[str, os.PathLike]


def resolve_paths(
    locations: Iterable[Location], path_filter: Optional[PathFilter] = None
) -> list[Path]:
    """
    Expand locations into the ordered list of files to merge.

    Files pass through as given. Directories contribute the files directly
    inside them (no recursion), filtered by name and sorted alphabetically.
    Results are concatenated in the order the locations were given.

    Args:
        locations: Files and/or directories, lowest precedence first
        path_filter: Filter for files found in directories (default: all)

    Returns:
        Ordered list of file paths

    Raises:
        PathMetadataError: A location cannot be stat'ed (e.g. does not exist)
        DirectoryReadError: A directory cannot be listed
        DirectoryEntryError: An entry in a directory cannot be read
        FileNameError: A file name is not valid text
    """
    path_filter = path_filter or NoFilter()
    paths: list[Path] = []

    for location in locations:
        path = Path(location)
        try:
            mode = path.stat().st_mode
        except OSError as e:
            raise PathMetadataError(path, e) from e

        if stat.S_ISDIR(mode):
            paths.extend(files_in_dir(path, path_filter))
        else:
            paths.append(path)

    logger.debug(f"Resolved {len(paths)} config files: {[str(p) for p in paths]}")
    return paths


def files_in_dir(directory: Path, path_filter: PathFilter) -> list[Path]:
    """List regular files directly inside `directory` that pass the filter, sorted by name."""
    try:
        entries = os.scandir(directory)
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    files: list[Path] = []
    with entries:
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                raise DirectoryEntryError(directory, e) from e

            try:
                is_file = entry.is_file()
            except OSError as e:
                raise PathMetadataError(Path(entry.path), e) from e
            if not is_file:
                continue

            # Undecodable bytes show up as lone surrogates
            try:
                entry.name.encode("utf-8")
            except UnicodeEncodeError as e:
                raise FileNameError(Path(entry.path), e) from e

            if path_filter.matches(entry.name):
                files.append(Path(entry.path))

    if not files:
        logger.warning(f"No config files in {directory} matched {path_filter!r}")

    return sorted(files, key=lambda p: p.name)
