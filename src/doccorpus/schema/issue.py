"""
Pydantic model for a problem found while loading or validating a corpus.
"""

import json

from pydantic import BaseModel, ConfigDict

from .enums import IssueKind
from .reference import Location

__all__ = [
    "ValidationIssue",
]


class ValidationIssue(BaseModel):
    """
    A single problem reported by a validation run.

    Attributes:
        kind (IssueKind): Category of the problem.
        source_path (str): Page path, or the content file when no page could be built.
        location (Location | None): Position in the raw content, if any.
        detail (str): Human-readable description.
        target (str | None): Offending link target for BrokenLink issues.
    """

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    source_path: str
    location: Location | None = None
    detail: str
    target: str | None = None

    def sort_key(self) -> tuple[str, int, int, str, str]:
        """Ordering key: source path, then position, then kind and detail."""
        line = self.location.line if self.location is not None else 0
        column = self.location.column if self.location is not None else 0
        return (self.source_path, line, column, self.kind.value, self.detail)

    def format(self) -> str:
        """Render as `<source>:<line>:<column>: <Kind>: <detail>`."""
        position = str(self.location) if self.location is not None else "0:0"
        return f"{self.source_path}:{position}: {self.kind.value}: {self.detail}"

    def to_json(self) -> str:
        """Render as a single-line JSON object."""
        return json.dumps(self.model_dump(mode="json"), ensure_ascii=False)

    def __str__(self) -> str:
        return self.format()
