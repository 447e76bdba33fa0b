"""Link query models.

A query selects what, if anything, is appended to a blob URL: nothing,
an explicit line range, or the lines matched by a text search.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ghlink.core.exceptions import InvalidQueryError


class NoRange(BaseModel):
    """Link to the whole file."""

    kind: Literal["none"] = "none"

    class Config:
        frozen = True


class LineRange(BaseModel):
    """Link to an explicit line or line range."""

    kind: Literal["lines"] = "lines"
    start: int = Field(ge=1)
    end: int | None = Field(default=None, ge=1)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_order(self) -> "LineRange":
        if self.end is not None and self.end < self.start:
            raise ValueError(f"end line {self.end} is before start line {self.start}")
        return self


class TextSearch(BaseModel):
    """Link to the lines of a file matching a block of text."""

    kind: Literal["search"] = "search"
    pattern: str

    class Config:
        frozen = True

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        if not any(split_query_lines(value)):
            raise ValueError("search text is empty")
        return value

    @property
    def query_lines(self) -> list[str]:
        return split_query_lines(self.pattern)


LinkQuery = Annotated[Union[NoRange, LineRange, TextSearch], Field(discriminator="kind")]


def split_query_lines(text: str) -> list[str]:
    """Split search text into query-lines.

    CRLF is folded to LF and a single trailing newline is ignored, so text
    piped from a file or an editor selection splits the same way as a
    literal argument.
    """
    text = text.replace("\r\n", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return []
    return text.split("\n")


def query_from_options(
    line1: int | None = None,
    line2: int | None = None,
    search: str | None = None,
) -> LinkQuery:
    """Build the single query variant selected by raw option values.

    Raises:
        InvalidQueryError: if both a line range and search text are given,
            if an end line is given without a start line, or if the
            selected variant is itself invalid.
    """
    details = {"line1": line1, "line2": line2, "search": search}
    if search is not None and (line1 is not None or line2 is not None):
        raise InvalidQueryError(
            "line numbers and search text are mutually exclusive", details=details
        )
    if line2 is not None and line1 is None:
        raise InvalidQueryError("end line given without a start line", details=details)

    try:
        if line1 is not None:
            return LineRange(start=line1, end=line2)
        if search is not None:
            return TextSearch(pattern=search)
    except ValidationError as e:
        message = "; ".join(error["msg"] for error in e.errors())
        raise InvalidQueryError(f"invalid query: {message}", details=details) from e
    return NoRange()
