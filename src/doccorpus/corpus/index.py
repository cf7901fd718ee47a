import logging
from typing import Iterator, Sequence

from doccorpus.exceptions import PageNotFoundError
from doccorpus.paths import normalize_path
from doccorpus.schema import IssueKind, Page, ValidationIssue
from doccorpus.utils import get_logger

__all__ = [
    "CorpusIndex",
]


class CorpusIndex:
    """
    Set of pages keyed by their normalised path.

    An index is owned by a single validation run. Pages are only ever added,
    and the first page to claim a path keeps it.
    """

    def __init__(self) -> None:
        # Map normalised path → page
        self._pages: dict[str, Page] = {}

        self.logger = get_logger(name="corpus", level=logging.DEBUG)

    def add_page(self, page: Page) -> ValidationIssue | None:
        """
        Add a page to the index.

        Args:
            page (Page): The page to store.

        Returns:
            ValidationIssue | None: A DuplicatePath issue if the path is already
                taken (the page is then not stored); otherwise None.
        """
        existing = self._pages.get(page.path)
        if existing is not None:
            owner = existing.source_file or existing.path
            rejected = page.source_file or page.path
            issue = ValidationIssue(
                kind=IssueKind.DUPLICATE_PATH,
                source_path=page.path,
                detail=(
                    f"path '{page.path}' from '{rejected}' is already "
                    f"defined by '{owner}'"
                ),
            )
            self.logger.warning("add_page: %s", issue.detail)
            return issue

        self._pages[page.path] = page
        self.logger.debug("add_page: stored '%s'", page.path)
        return None

    def resolve(self, path: str | Sequence[str]) -> Page:
        """
        Look up a page by path.

        Raises:
            PageNotFoundError: If no page has this path.
        """
        key = normalize_path(path)
        try:
            return self._pages[key]
        except KeyError:
            raise PageNotFoundError(key) from None

    def get(self, path: str | Sequence[str]) -> Page | None:
        return self._pages.get(normalize_path(path))

    def paths(self) -> list[str]:
        """All page paths, sorted."""
        return sorted(self._pages)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, tuple, list)):
            return False
        return normalize_path(path) in self._pages

    def __iter__(self) -> Iterator[Page]:
        for path in self.paths():
            yield self._pages[path]

    def __len__(self) -> int:
        return len(self._pages)
