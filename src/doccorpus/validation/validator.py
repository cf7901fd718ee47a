"""
Check that every cross-reference in a corpus resolves and that code-sample
line annotations are well formed.

Validation is a single pass over an index that is not modified. External URLs
are only checked for syntax, never fetched.
"""

import logging
from typing import Iterable
from urllib.parse import unquote, urlsplit

from doccorpus.config import ValidationConfig
from doccorpus.corpus import CorpusIndex
from doccorpus.paths import join_path, split_path, strip_page_suffix
from doccorpus.pages import extract_references
from doccorpus.schema import (
    CrossReference,
    IssueKind,
    Location,
    Page,
    ReferenceKind,
    ValidationIssue,
)
from doccorpus.utils import get_logger

__all__ = [
    "ReferenceValidator",
    "validate",
    "sort_issues",
    "resolve_target",
]


def sort_issues(issues: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    """Order issues by source path, then position within the page."""
    return sorted(issues, key=ValidationIssue.sort_key)


def resolve_target(target: str, page: Page, config: ValidationConfig) -> str:
    """
    Turn an internal link target into the page path it refers to.

    Fragments and queries are dropped. Relative targets are resolved against the
    page's directory, or against the page itself for index pages.
    """
    path = unquote(target.split("#", 1)[0].split("?", 1)[0]).strip()
    if not path:
        return page.path

    if path.startswith("/"):
        segments = split_path(path)
        prefix = split_path(config.route_prefix)
        if prefix and segments[: len(prefix)] == prefix:
            segments = segments[len(prefix):]
    else:
        base = page.segments if page.is_index else page.segments[:-1]
        segments = split_path(base + (path,))

    segments, _ = strip_page_suffix(segments, config.page_extensions)
    return join_path(segments)


class ReferenceValidator:
    """
    Validates the cross-references and code samples of a corpus.

    Attributes:
        config (ValidationConfig): Run configuration.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self.config = config or ValidationConfig()
        self.logger = get_logger(name="validator", level=logging.DEBUG)

    def validate(self, corpus: CorpusIndex) -> list[ValidationIssue]:
        """
        Check every page of the corpus.

        Args:
            corpus (CorpusIndex): The index to validate. It is not modified.

        Returns:
            list[ValidationIssue]: BrokenLink and MalformedRange issues, ordered
                by source path then location.
        """
        issues: list[ValidationIssue] = []
        count_references = 0

        for page in corpus:
            references = extract_references(page, self.config)
            count_references += len(references)
            for reference in references:
                issue = self.check_reference(corpus, page, reference)
                if issue is not None:
                    self.logger.warning("%s", issue.format())
                    issues.append(issue)

            if self.config.check_code_ranges:
                for issue in self.check_code_samples(page):
                    self.logger.warning("%s", issue.format())
                    issues.append(issue)

        self.logger.info(
            "Validated %d pages and %d references: %d issues",
            len(corpus),
            count_references,
            len(issues),
        )
        return sort_issues(issues)

    def check_reference(
        self, corpus: CorpusIndex, page: Page, reference: CrossReference
    ) -> ValidationIssue | None:
        """
        Check a single reference.

        Returns:
            ValidationIssue | None: A BrokenLink issue, or None if the reference is fine.
        """
        if reference.kind in (ReferenceKind.ANCHOR, ReferenceKind.IGNORED):
            return None

        if reference.kind is ReferenceKind.EXTERNAL:
            problem = self._external_problem(reference.target)
            if problem is None:
                return None
            return self._broken_link(
                page, reference, f"malformed URL '{reference.target}': {problem}"
            )

        if not reference.target.strip():
            return self._broken_link(page, reference, "empty link target")

        resolved = resolve_target(reference.target, page, self.config)
        if resolved in corpus:
            return None
        return self._broken_link(
            page,
            reference,
            f"link target '{reference.target}' does not resolve "
            f"(looked for '{resolved}')",
        )

    def check_code_samples(self, page: Page) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for block_index, block in enumerate(page.blocks):
            if block.kind != "code":
                continue
            for problem in block.range_problems():
                issues.append(
                    ValidationIssue(
                        kind=IssueKind.MALFORMED_RANGE,
                        source_path=page.path,
                        location=Location(
                            line=block.start_line, column=1, block_index=block_index
                        ),
                        detail=f"code sample: {problem}",
                    )
                )
        return issues

    def _external_problem(self, target: str) -> str | None:
        try:
            parts = urlsplit(target.strip())
            hostname = parts.hostname
        except ValueError as e:
            return str(e)

        if target.strip().startswith("//"):
            return None if hostname else "missing host"
        if not parts.scheme:
            return "missing scheme"
        if parts.scheme.lower() not in self.config.external_schemes:
            return f"unsupported scheme '{parts.scheme}'"
        if not hostname:
            return "missing host"
        return None

    @staticmethod
    def _broken_link(
        page: Page, reference: CrossReference, detail: str
    ) -> ValidationIssue:
        return ValidationIssue(
            kind=IssueKind.BROKEN_LINK,
            source_path=page.path,
            location=reference.location,
            detail=detail,
            target=reference.target,
        )


def validate(
    corpus: CorpusIndex, config: ValidationConfig | None = None
) -> list[ValidationIssue]:
    """Shortcut for `ReferenceValidator(config).validate(corpus)`."""
    return ReferenceValidator(config).validate(corpus)
