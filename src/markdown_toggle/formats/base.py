"""Abstract base class for document format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from markdown_toggle.formatting.ir import TextRun


class FormatHandler(ABC):
    """Abstract base class for document format handlers.

    Each handler reads a file into styled runs and writes styled runs
    back out in its own format.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.md',))."""
        ...

    @abstractmethod
    def read(self, path: Path) -> list[TextRun]:
        """Read styled runs from a file.

        Args:
            path: Path to the input file

        Returns:
            Ordered runs covering the document text
        """
        ...

    @abstractmethod
    def write(self, runs: list[TextRun], path: Path) -> None:
        """Write styled runs to a file.

        Args:
            runs: Ordered runs covering the document text
            path: Path to write the output file
        """
        ...
