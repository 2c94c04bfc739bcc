"""File discovery - turns files and directories into an ordered path list."""

from merge_config.paths.base import PathFilter
from merge_config.paths.filters import KeywordFilter, NoFilter, WildcardFilter
from merge_config.paths.registry import (
    create_filter,
    filter_names,
    get_filter,
    register_filter,
    unregister_filter,
)
from merge_config.paths.resolver import files_in_dir, resolve_paths

__all__ = [
    "PathFilter",
    "NoFilter",
    "KeywordFilter",
    "WildcardFilter",
    "create_filter",
    "get_filter",
    "register_filter",
    "unregister_filter",
    "filter_names",
    "files_in_dir",
    "resolve_paths",
]
