"""JSON styled-run file handler."""

import json
from pathlib import Path

from markdown_toggle.formats.base import FormatHandler
from markdown_toggle.formatting.ir import (
    TextRun,
    style_from_names,
    style_names,
)


class JSONHandler(FormatHandler):
    """Handler for styled runs stored as JSON (.json).

    The file holds a list of objects such as
    `{"text": "Hi", "style": ["bold", "italic"]}`. An empty or missing
    style list means unstyled text.
    """

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def read(self, path: Path) -> list[TextRun]:
        """Read runs from a JSON file.

        Raises:
            ValueError: If the file is not a list of run objects or names
                an unknown style
        """
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError("Expected a JSON list of runs")

        runs: list[TextRun] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict) or "text" not in item:
                raise ValueError(f"Run {i} must be an object with a 'text' key")
            names = item.get("style") or []
            if isinstance(names, str):
                names = [names]
            if not isinstance(names, list) or not all(
                isinstance(name, str) for name in names
            ):
                raise ValueError(f"Run {i} has an invalid style list")
            try:
                style = style_from_names(names)
            except KeyError as e:
                raise ValueError(f"Run {i} has unknown style {e}") from e
            runs.append(TextRun(text=str(item["text"]), style=style))
        return runs

    def write(self, runs: list[TextRun], path: Path) -> None:
        """Write runs to a JSON file."""
        data = [
            {"text": run.text, "style": style_names(run.style)}
            for run in runs
        ]
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
        )
