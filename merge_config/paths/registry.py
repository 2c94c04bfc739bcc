"""Named file name filters, looked up by the CLI and by callers."""

from typing import Callable, Type

from merge_config.paths.base import PathFilter

_FILTERS: dict[str, Type[PathFilter]] = {}


def register_filter(name: str) -> Callable[[Type[PathFilter]], Type[PathFilter]]:
    """Class decorator that makes a PathFilter subclass available as `name`."""

    def decorator(cls: Type[PathFilter]) -> Type[PathFilter]:
        if not issubclass(cls, PathFilter):
            raise TypeError(f"{cls.__name__} is not a PathFilter")
        _FILTERS[name] = cls
        cls.filter_name = name
        return cls

    return decorator


def unregister_filter(name: str) -> None:
    """Remove a named filter. Unknown names are ignored."""
    _FILTERS.pop(name, None)


def filter_names() -> list[str]:
    """Registered filter names in registration order."""
    return list(_FILTERS)


def get_filter(name: str) -> Type[PathFilter]:
    """
    Look up a filter class by name.

    Raises:
        KeyError: If no filter is registered under `name`
    """
    try:
        return _FILTERS[name]
    except KeyError:
        available = ", ".join(_FILTERS) or "none"
        raise KeyError(f"Unknown filter: '{name}'. Available: {available}") from None


def create_filter(name: str, *args, **kwargs) -> PathFilter:
    """
    Build a filter by name.

    Usage:
        create_filter("keywords", ["prod"])
        create_filter("wildcards", ["*.toml"], match_all_when_empty=True)
    """
    return get_filter(name)(*args, **kwargs)
