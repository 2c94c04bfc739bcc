"""Typed materializer - decodes a merged document into the caller's type."""

from typing import Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from merge_config.config.exceptions import FinalDecodeError, FinalEncodeError

T = TypeVar("T")


def materialize(document: dict, target: Type[T]) -> T:
    """
    Decode a merged document into `target`.

    The document is serialized to JSON first so the decoder sees exactly
    what a JSON file with the same content would produce (TOML dates become
    ISO strings). The target can be anything pydantic can validate: a
    BaseModel, a dataclass, a TypedDict or a plain `dict[str, Any]`.

    Raises:
        FinalEncodeError: Document contains values that cannot be serialized
        FinalDecodeError: Document does not fit the target type
    """
    try:
        payload = to_json(document)
    except PydanticSerializationError as e:
        raise FinalEncodeError(e) from e

    try:
        return TypeAdapter(target).validate_json(payload)
    except ValidationError as e:
        raise FinalDecodeError(target, e) from e
