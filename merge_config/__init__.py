"""Layered TOML/JSON configuration: resolve files, deep merge, decode."""

from merge_config.config.documents import parse_config_file
from merge_config.config.exceptions import (
    ArrayFieldTypeMismatch,
    DirectoryEntryError,
    DirectoryReadError,
    DiscoveryError,
    FileNameError,
    FileOpenError,
    FinalDecodeError,
    FinalEncodeError,
    LoadError,
    MaterializeError,
    MergeConfigError,
    MergeError,
    ObjectFieldTypeMismatch,
    ParseError,
    PathMetadataError,
    ReadError,
    UnsupportedFileType,
)
from merge_config.config.loader import (
    ConfigLoader,
    merge_config_files,
    parse_config_files,
    parse_config_paths,
)
from merge_config.config.materializer import materialize
from merge_config.config.merger import (
    MergePolicy,
    merge_documents,
    merge_objects,
    merge_with_policy,
)
from merge_config.paths import (
    KeywordFilter,
    NoFilter,
    PathFilter,
    WildcardFilter,
    create_filter,
    filter_names,
    get_filter,
    register_filter,
    resolve_paths,
    unregister_filter,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "parse_config_paths",
    "parse_config_files",
    "parse_config_file",
    "merge_config_files",
    "resolve_paths",
    "merge_objects",
    "merge_documents",
    "merge_with_policy",
    "materialize",
    "ConfigLoader",
    "MergePolicy",
    # Filters
    "PathFilter",
    "NoFilter",
    "KeywordFilter",
    "WildcardFilter",
    "create_filter",
    "get_filter",
    "register_filter",
    "unregister_filter",
    "filter_names",
    # Errors
    "MergeConfigError",
    "DiscoveryError",
    "PathMetadataError",
    "DirectoryReadError",
    "DirectoryEntryError",
    "FileNameError",
    "LoadError",
    "FileOpenError",
    "ReadError",
    "ParseError",
    "UnsupportedFileType",
    "MergeError",
    "ObjectFieldTypeMismatch",
    "ArrayFieldTypeMismatch",
    "MaterializeError",
    "FinalEncodeError",
    "FinalDecodeError",
]
