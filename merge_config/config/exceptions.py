"""Exceptions raised while resolving, loading, merging and decoding configs."""

from pathlib import Path
from typing import Any, Optional


class MergeConfigError(Exception):
    """Base exception for all merge-config errors."""

    pass


# Discovery


class DiscoveryError(MergeConfigError):
    """Raised when input locations cannot be expanded into file paths."""

    def __init__(self, message: str, path: Path, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class PathMetadataError(DiscoveryError):
    """Raised when a location's existence or type cannot be determined."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to get metadata for path {path}: {cause}", path, cause)


class DirectoryReadError(DiscoveryError):
    """Raised when a directory cannot be listed."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to read directory {path}: {cause}", path, cause)


class DirectoryEntryError(DiscoveryError):
    """Raised when an entry inside a directory cannot be read."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(
            f"Failed to read entry in directory {path}: {cause}", path, cause
        )


class FileNameError(DiscoveryError):
    """Raised when a file name cannot be decoded as text."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to decode file name for file at {path}", path, cause)


# Loading


class LoadError(MergeConfigError):
    """Raised when a single config file cannot be turned into a document."""

    def __init__(self, message: str, path: Path, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = path
        self.cause = cause


class FileOpenError(LoadError):
    """Raised when a config file cannot be opened."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to open file at {path}: {cause}", path, cause)


class ReadError(LoadError):
    """Raised when the contents of an opened config file cannot be read."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(
            f"Failed to read contents of file at {path}: {cause}", path, cause
        )


class ParseError(LoadError):
    """Raised when file contents are not valid for the detected format."""

    def __init__(self, path: Path, format: str, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to parse {format} file at {path}: {cause}", path, cause)
        self.format = format


class UnsupportedFileType(LoadError):
    """Raised when the file extension is not .toml or .json."""

    def __init__(self, path: Path):
        super().__init__(f"Unsupported file type at {path}", path)


# Merging


class MergeError(MergeConfigError):
    """Raised when two documents cannot be merged."""

    expected = "value"

    def __init__(self, key: str, value: Any):
        super().__init__(
            f"Types on field '{key}' do not match: got {value!r}, expected {self.expected}"
        )
        self.key = key
        self.value = value


class ObjectFieldTypeMismatch(MergeError):
    """Raised when an object field would be merged with a non-object value."""

    expected = "object"


class ArrayFieldTypeMismatch(MergeError):
    """Raised when an array field would be extended with a non-array value."""

    expected = "array"


# Materialization


class MaterializeError(MergeConfigError):
    """Raised when the merged document cannot be decoded into the target type."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class FinalEncodeError(MaterializeError):
    """Raised when the merged document cannot be serialized for decoding."""

    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__(f"Failed to serialize merged config: {cause}", cause)


class FinalDecodeError(MaterializeError):
    """Raised when the merged document does not fit the target type."""

    def __init__(self, target: Any, cause: Optional[BaseException] = None):
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Failed to parse merged config into {name}: {cause}", cause)
        self.target = target
