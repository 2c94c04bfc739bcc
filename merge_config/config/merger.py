"""Deep merge logic for configuration documents."""

from dataclasses import dataclass
from typing import Iterable

from merge_config.config.exceptions import (
    ArrayFieldTypeMismatch,
    ObjectFieldTypeMismatch,
)
from merge_config.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MergePolicy:
    """
    How containers already present in the target are treated.

    Attributes:
        merge_nested: Recurse into objects instead of replacing them
        extend_array: Append to arrays instead of replacing them
    """

    merge_nested: bool = True
    extend_array: bool = True


def merge_objects(
    target: dict, source: dict, merge_nested: bool, extend_array: bool
) -> dict:
    """
    Merge source on top of target. Source wins on conflicts.

    Only a target value that is an object or array can reject a source value,
    and only when the matching flag asks for recursion or extension.
    Scalars in the target are always replaced.

    Args:
        target: Document merged so far
        source: Document to merge on top
        merge_nested: Recurse into objects, otherwise replace them
        extend_array: Extend arrays, otherwise replace them

    Returns:
        New merged dictionary. Neither input is modified.

    Raises:
        ObjectFieldTypeMismatch: Target field is an object, source is not
        ArrayFieldTypeMismatch: Target field is an array, source is not

    Example:
        target = {"server": {"hosts": ["a"], "port": 8080}}
        source = {"server": {"hosts": ["b"], "port": 8081}}
        result = {"server": {"hosts": ["a", "b"], "port": 8081}}
    """
    result = target.copy()

    for key, value in source.items():
        if key not in result:
            result[key] = value
            continue

        current = result[key]

        if isinstance(current, dict):
            if not merge_nested:
                result[key] = value
            elif isinstance(value, dict):
                result[key] = merge_objects(current, value, merge_nested, extend_array)
            else:
                raise ObjectFieldTypeMismatch(key, value)

        elif isinstance(current, list):
            if not extend_array:
                result[key] = value
            elif isinstance(value, list):
                result[key] = current + value
            else:
                raise ArrayFieldTypeMismatch(key, value)

        else:
            # Scalar - override wins
            result[key] = value

    return result


def merge_documents(
    documents: Iterable[dict], merge_nested: bool, extend_array: bool
) -> dict:
    """
    Fold documents left to right, starting from an empty object.

    Later documents override earlier ones, so the order of `documents`
    is the override precedence.
    """
    merged: dict = {}
    for index, document in enumerate(documents):
        merged = merge_objects(merged, document, merge_nested, extend_array)
        logger.debug(f"Merged document #{index} ({len(document)} top-level keys)")
    return merged


def merge_with_policy(documents: Iterable[dict], policy: MergePolicy) -> dict:
    """Fold documents using a MergePolicy instead of loose flags."""
    return merge_documents(documents, policy.merge_nested, policy.extend_array)
