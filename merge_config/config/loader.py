"""Configuration loader - resolves, loads and merges config files."""

from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Optional, Type, TypeVar, Union

from merge_config.config.documents import parse_config_file
from merge_config.config.materializer import materialize
from merge_config.config.merger import MergePolicy, merge_documents, merge_with_policy
from merge_config.paths import PathFilter, resolve_paths
from merge_config.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Location = Union[str, PathLike]


def merge_config_files(
    paths: Iterable[Location], merge_nested: bool = True, extend_array: bool = True
) -> dict:
    """
    Load files in order and merge them into one document.

    Each file is loaded only when its turn comes, so the first bad file
    aborts the whole merge.

    Args:
        paths: Config files, lowest precedence first
        merge_nested: Recurse into objects instead of replacing them
        extend_array: Append to arrays instead of replacing them

    Returns:
        Merged document
    """
    return merge_documents(load_documents(paths), merge_nested, extend_array)


def load_documents(paths: Iterable[Location]) -> Iterator[dict]:
    """Parse files lazily, in order, for the merge fold."""
    for path in paths:
        yield parse_config_file(path)


def parse_config_files(
    paths: Iterable[Location],
    merge_nested: bool = True,
    extend_array: bool = True,
    target: Type[T] = dict,
) -> T:
    """
    Merge already ordered config files and decode the result into `target`.

    Args:
        paths: Config files, lowest precedence first
        merge_nested: Recurse into objects instead of replacing them
        extend_array: Append to arrays instead of replacing them
        target: Type to decode the merged document into

    Returns:
        Instance of `target`
    """
    merged = merge_config_files(paths, merge_nested, extend_array)
    return materialize(merged, target)


def parse_config_paths(
    locations: Iterable[Location],
    path_filter: Optional[PathFilter] = None,
    merge_nested: bool = True,
    extend_array: bool = True,
    target: Type[T] = dict,
) -> T:
    """
    Resolve files and directories, merge them and decode into `target`.

    Args:
        locations: Files and/or directories, lowest precedence first
        path_filter: Filter applied to files found in directories
        merge_nested: Recurse into objects instead of replacing them
        extend_array: Append to arrays instead of replacing them
        target: Type to decode the merged document into

    Returns:
        Instance of `target`
    """
    paths = resolve_paths(locations, path_filter)
    return parse_config_files(paths, merge_nested, extend_array, target)


class ConfigLoader:
    """
    Loads and merges layered configuration with a fixed policy.

    Load order (later wins):
        1. Locations in the order given
        2. Inside a directory, files sorted by name

    Usage:
        loader = ConfigLoader(path_filter=KeywordFilter(["prod"]))
        config = loader.load(["config/base.toml", "config/env"], target=AppConfig)
    """

    def __init__(
        self,
        merge_nested: bool = True,
        extend_array: bool = True,
        path_filter: Optional[PathFilter] = None,
    ):
        self.policy = MergePolicy(merge_nested=merge_nested, extend_array=extend_array)
        self.path_filter = path_filter

    def resolve(self, locations: Iterable[Location]) -> list[Path]:
        """Expand locations into the ordered file list."""
        return resolve_paths(locations, self.path_filter)

    def merge(self, locations: Iterable[Location]) -> dict:
        """Resolve and merge locations into a single document."""
        paths = self.resolve(locations)
        merged = merge_with_policy(load_documents(paths), self.policy)
        logger.info(f"Merged {len(paths)} config files")
        return merged

    def load(self, locations: Iterable[Location], target: Type[T] = dict) -> T:
        """Resolve, merge and decode locations into `target`."""
        return materialize(self.merge(locations), target)

    def __repr__(self) -> str:
        return f"ConfigLoader(policy={self.policy!r}, path_filter={self.path_filter!r})"
