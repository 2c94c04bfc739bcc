"""Built-in file name filters."""

from fnmatch import fnmatchcase
from typing import Iterable

from merge_config.paths.base import PathFilter
from merge_config.paths.registry import register_filter


@register_filter("all")
class NoFilter(PathFilter):
    """Includes every file."""

    def matches(self, file_name: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "NoFilter()"


@register_filter("keywords")
class KeywordFilter(PathFilter):
    """
    Includes files whose name contains every keyword.

    An empty keyword list includes every file.

    Examples:
        KeywordFilter(["prod"]) -> prod-db.json included, dev.json excluded
        KeywordFilter(["prod", "db"]) -> prod-db.json included, prod.json excluded
    """

    def __init__(self, keywords: Iterable[str] = ()):
        self.keywords = tuple(keywords)

    def matches(self, file_name: str) -> bool:
        return all(keyword in file_name for keyword in self.keywords)

    def __repr__(self) -> str:
        return f"KeywordFilter({list(self.keywords)!r})"


@register_filter("wildcards")
class WildcardFilter(PathFilter):
    """
    Includes files whose name matches at least one glob pattern.

    Patterns support `*`, `?` and `[seq]` and are case-sensitive.
    With no patterns nothing is included, unless `match_all_when_empty`
    is set.

    Examples:
        WildcardFilter(["*.toml"]) -> base.toml included, base.json excluded
        WildcardFilter([]) -> nothing included
        WildcardFilter([], match_all_when_empty=True) -> everything included
    """

    def __init__(self, patterns: Iterable[str] = (), match_all_when_empty: bool = False):
        self.patterns = tuple(patterns)
        self.match_all_when_empty = match_all_when_empty

    def matches(self, file_name: str) -> bool:
        if not self.patterns:
            return self.match_all_when_empty
        return any(fnmatchcase(file_name, pattern) for pattern in self.patterns)

    def __repr__(self) -> str:
        return (
            f"WildcardFilter({list(self.patterns)!r}, "
            f"match_all_when_empty={self.match_all_when_empty})"
        )
