"""File conversion between markdown syntax and styled runs."""

import json
import logging
from pathlib import Path
from typing import Optional

from markdown_toggle.config import get_settings
from markdown_toggle.formats import SUPPORTED_EXTENSIONS, get_handler
from markdown_toggle.formatting.ir import TextRun, coalesce_runs, is_valid

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error during file conversion."""

    pass


class DocumentConverter:
    """Orchestrates conversion between supported file formats.

    Pipeline:
    1. Pick a handler from the input extension and read styled runs
    2. Reject runs carrying a style combination that is not valid
    3. Coalesce adjacent runs of the same style
    4. Write the runs with the handler for the output extension
    """

    def __init__(self, output_format: Optional[str] = None) -> None:
        """Initialize the converter.

        Args:
            output_format: Default output extension (e.g. ".md")
        """
        settings = get_settings()
        self.output_format = output_format or settings.default_output_format

    def read(self, input_path: Path) -> list[TextRun]:
        """Read and validate styled runs from a file.

        Raises:
            ConversionError: If the file is missing, unsupported or malformed
        """
        if not input_path.exists():
            raise ConversionError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ConversionError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        handler = get_handler(ext)()
        try:
            runs = handler.read(input_path)
        except (
            ValueError, json.JSONDecodeError, UnicodeDecodeError, OSError
        ) as e:
            raise ConversionError(f"Could not read {input_path.name}: {e}") from e

        for run in runs:
            if not is_valid(run.style):
                raise ConversionError(
                    f"Invalid style combination {run.style} for {run.text!r}"
                )

        logger.debug("read %d runs from %s", len(runs), input_path)
        return coalesce_runs(runs)

    def convert_file(
        self,
        input_path: Path,
        output_path: Optional[Path] = None,
    ) -> list[TextRun]:
        """Convert a file to another supported format.

        Args:
            input_path: Path to the input file
            output_path: Path for the output file (defaults to the input
                path with the configured output extension)

        Returns:
            The runs that were written

        Raises:
            ConversionError: If conversion fails
        """
        runs = self.read(input_path)

        if output_path is None:
            output_path = input_path.with_suffix(self.output_format)
        if output_path.resolve() == input_path.resolve():
            raise ConversionError(f"Output would overwrite input: {input_path}")

        ext = output_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ConversionError(
                f"Unsupported output format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        get_handler(ext)().write(runs, output_path)
        logger.debug("wrote %d runs to %s", len(runs), output_path)
        return runs
