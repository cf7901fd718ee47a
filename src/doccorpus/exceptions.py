"""
Exceptions raised while building and validating a documentation corpus.
"""

from pathlib import Path

from doccorpus.schema.enums import ParseErrorReason

__all__ = [
    "DocCorpusError",
    "ParseError",
    "PageNotFoundError",
    "ContentRootError",
]


class DocCorpusError(Exception):
    """Base class for all doccorpus errors."""


class ParseError(DocCorpusError):
    """
    Raised when raw page content cannot be turned into a Page.

    Attributes:
        reason (ParseErrorReason): Why parsing failed.
        detail (str): Human-readable description.
        line (int | None): 1-based line of the problem, if known.
    """

    def __init__(
        self, reason: ParseErrorReason, detail: str, line: int | None = None
    ) -> None:
        super().__init__(f"{reason.value}: {detail}")
        self.reason = reason
        self.detail = detail
        self.line = line


class PageNotFoundError(DocCorpusError, LookupError):
    """Raised when a path does not resolve to a page in the corpus."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No page with path '{path}' in corpus.")
        self.path = path


class ContentRootError(DocCorpusError, FileNotFoundError):
    """Raised when the content root is missing or cannot be read."""

    def __init__(self, root: Path, detail: str) -> None:
        super().__init__(f"Content root '{root}': {detail}")
        self.root = root
        self.detail = detail
