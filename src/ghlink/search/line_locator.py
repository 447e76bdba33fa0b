"""Line range resolution for link queries."""

from pathlib import Path

import structlog

from ghlink.core.exceptions import FileReadError, TextNotFoundError
from ghlink.core.models.link import LineRangeResult
from ghlink.core.models.query import (
    LineRange,
    LinkQuery,
    NoRange,
    TextSearch,
    split_query_lines,
)

logger = structlog.get_logger(__name__)


def search_lines(path: Path, text: str) -> list[int]:
    """Search for ``text`` in the file at ``path`` and return line numbers.

    The text is split into query-lines which are matched in order, in a
    single pass: each file line is checked for containing the next
    unmatched query-line, and on a hit its number is recorded and the next
    query-line becomes current. Lines between hits may differ freely and
    the earliest possible line is always taken.

    Fewer line numbers than query-lines are returned when the file runs
    out before every query-line has matched.

    Raises:
        TextNotFoundError: if no query-line matched at all.
        FileReadError: if the file cannot be read as UTF-8 text.
    """
    query_lines = split_query_lines(text)
    line_numbers: list[int] = []

    try:
        with open(path, encoding="utf-8", newline="\n") as f:
            for number, line in enumerate(f, start=1):
                if len(line_numbers) == len(query_lines):
                    break
                if query_lines[len(line_numbers)] in line.rstrip("\n").removesuffix("\r"):
                    line_numbers.append(number)
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(
            f"cannot read {path}: {e}",
            details={"path": str(path)},
        ) from e

    if not line_numbers:
        raise TextNotFoundError(
            f"file {path} does not contain string {text!r}",
            details={"path": str(path), "text": text},
        )
    if len(line_numbers) < len(query_lines):
        logger.warning(
            "Search text matched partially",
            path=str(path),
            matched=len(line_numbers),
            total=len(query_lines),
        )
    return line_numbers


class LineLocator:
    """Turns a link query into a concrete line range."""

    def locate(self, query: LinkQuery, file_path: Path) -> LineRangeResult | None:
        """Resolve ``query`` against the file at ``file_path``.

        Explicit line ranges are returned as given without reading the file.
        """
        if isinstance(query, NoRange):
            return None
        if isinstance(query, LineRange):
            return LineRangeResult(first=query.start, last=query.end)
        if isinstance(query, TextSearch):
            line_numbers = search_lines(Path(file_path), query.pattern)
            return LineRangeResult.from_line_numbers(line_numbers)
        raise TypeError(f"Unknown query type: {type(query).__name__}")
