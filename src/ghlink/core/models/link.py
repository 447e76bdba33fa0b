"""Resolved link models."""

from pydantic import BaseModel, Field, model_validator


class LineRangeResult(BaseModel):
    """A concrete line range within a file."""

    first: int = Field(ge=1)
    last: int | None = Field(default=None, ge=1)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _check_order(self) -> "LineRangeResult":
        if self.last is not None and self.last < self.first:
            raise ValueError(f"last line {self.last} is before first line {self.first}")
        return self

    @property
    def fragment(self) -> str:
        """URL fragment, e.g. ``#L3`` or ``#L3-L8``."""
        fragment = f"#L{self.first}"
        if self.last is not None:
            fragment += f"-L{self.last}"
        return fragment

    @classmethod
    def from_line_numbers(cls, line_numbers: list[int]) -> "LineRangeResult":
        """Span the earliest to the latest of the given line numbers."""
        first = min(line_numbers)
        last = max(line_numbers)
        return cls(first=first, last=last if len(line_numbers) > 1 else None)
