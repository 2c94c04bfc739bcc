"""Config document loader - reads a single TOML or JSON file."""

import json
import tomllib
from os import PathLike
from pathlib import Path
from typing import Callable, NamedTuple, Union

from merge_config.config.exceptions import (
    FileOpenError,
    ParseError,
    ReadError,
    UnsupportedFileType,
)
from merge_config.utils.logging import get_logger

logger = get_logger(__name__)


class DocumentParser(NamedTuple):
    """Format name and a bytes -> dict parser raising ValueError on bad input."""

    format: str
    parse: Callable[[bytes], dict]


def _parse_toml(data: bytes) -> dict:
    return tomllib.loads(data.decode("utf-8"))


def _parse_json(data: bytes) -> dict:
    document = json.loads(data)
    if not isinstance(document, dict):
        raise ValueError(
            f"top-level value must be an object, got {type(document).__name__}"
        )
    return document


# Extension (exact, case-sensitive, with dot) -> parser
DOCUMENT_PARSERS: dict[str, DocumentParser] = {
    ".toml": DocumentParser("toml", _parse_toml),
    ".json": DocumentParser("json", _parse_json),
}


def parser_for(path: Path) -> DocumentParser:
    """
    Pick the parser for a path by its extension.

    Only lower-case `.toml` and `.json` are recognised; `.TOML` is rejected.

    Raises:
        UnsupportedFileType: If the extension is missing or not registered
    """
    parser = DOCUMENT_PARSERS.get(path.suffix)
    if parser is None:
        raise UnsupportedFileType(path)
    return parser


def parse_config_file(path: Union[str, PathLike]) -> dict:
    """
    Load and parse a single config file into a plain dictionary.

    Args:
        path: Path to a .toml or .json file

    Returns:
        Parsed document

    Raises:
        UnsupportedFileType: Extension is not .toml or .json
        FileOpenError: File cannot be opened
        ReadError: File contents cannot be read
        ParseError: Contents are not valid for the format
    """
    path = Path(path)
    parser = parser_for(path)

    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileOpenError(path, e) from e

    with f:
        try:
            data = f.read()
        except OSError as e:
            raise ReadError(path, e) from e

    try:
        document = parser.parse(data)
    except ValueError as e:
        # TOMLDecodeError, JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise ParseError(path, parser.format, e) from e

    logger.debug(f"Loaded {parser.format} config: {path}")
    return document
