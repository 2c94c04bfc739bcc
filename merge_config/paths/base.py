"""Abstract base class for file name filters."""

from abc import ABC, abstractmethod


class PathFilter(ABC):
    """
    Decides which files inside a directory take part in a merge.

    Filters only see the bare file name, never the directory part.
    Files passed directly as locations are never filtered.
    """

    # Set by register_filter
    filter_name: str = ""

    @abstractmethod
    def matches(self, file_name: str) -> bool:
        """
        Check whether a file should be included.

        Args:
            file_name: Name of a file inside a directory (no directory part)

        Returns:
            True if the file should be included
        """
        pass
