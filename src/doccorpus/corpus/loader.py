"""
Build a CorpusIndex from raw content, either from an in-memory mapping of
file path → text or from a content root on disk.
"""

import logging
from pathlib import Path
from typing import Mapping

from doccorpus.config import ValidationConfig
from doccorpus.exceptions import ContentRootError, ParseError
from doccorpus.paths import join_path, page_segments_for_file, split_path
from doccorpus.pages import parse_page
from doccorpus.schema import IssueKind, Location, ValidationIssue
from doccorpus.utils import get_logger

from .index import CorpusIndex

__all__ = [
    "build_corpus",
    "load_corpus",
    "read_contents",
]


def build_corpus(
    contents: Mapping[str, str], config: ValidationConfig | None = None
) -> tuple[CorpusIndex, list[ValidationIssue]]:
    """
    Parse every page file in `contents` and collect them into a new index.

    Files are processed in sorted order, so the first file by name owns a
    contested path. Files without a page extension are skipped.

    Args:
        contents (Mapping[str, str]): File path (relative to the content root) → raw text.
        config (ValidationConfig | None): Run configuration.

    Returns:
        tuple[CorpusIndex, list[ValidationIssue]]: The index and the
            MalformedFrontMatter / DuplicatePath issues found while building it.
    """
    config = config or ValidationConfig()
    logger = get_logger(name="corpus", level=logging.DEBUG)

    corpus = CorpusIndex()
    issues: list[ValidationIssue] = []

    for file_path in sorted(contents):
        derived = page_segments_for_file(file_path, config.page_extensions)
        if derived is None:
            logger.debug("Skipping non-page file: %s", file_path)
            continue
        segments, is_index = derived

        try:
            page = parse_page(
                contents[file_path],
                segments,
                source_file=file_path,
                is_index=is_index,
            )
        except ParseError as e:
            issue = ValidationIssue(
                kind=IssueKind.MALFORMED_FRONT_MATTER,
                source_path=join_path(segments),
                location=Location(line=e.line or 1),
                detail=f"{file_path}: {e.detail}",
            )
            logger.warning("Malformed front-matter in %s: %s", file_path, e.detail)
            issues.append(issue)
            continue

        if page.front_matter is not None and page.front_matter.slug is not None:
            page = page.model_copy(
                update={"segments": split_path(page.front_matter.slug)}
            )

        issue = corpus.add_page(page)
        if issue is not None:
            issues.append(issue)

    logger.info(
        "Built corpus with %d pages from %d files (%d issues)",
        len(corpus),
        len(contents),
        len(issues),
    )
    return corpus, issues


def read_contents(
    content_root: Path, extensions: list[str]
) -> tuple[dict[str, str], list[ValidationIssue]]:
    """
    Read every page file beneath `content_root`.

    A page file that cannot be read or is not valid UTF-8 is reported as a
    MalformedFrontMatter issue and left out; the other files are still read.

    Returns:
        tuple[dict[str, str], list[ValidationIssue]]: POSIX path relative to
            the root → UTF-8 text, and the issues for unreadable files.

    Raises:
        ContentRootError: If the root is missing or not a directory.
    """
    root = Path(content_root)
    if not root.exists():
        raise ContentRootError(root, "does not exist")
    if not root.is_dir():
        raise ContentRootError(root, "is not a directory")

    logger = get_logger(name="corpus", level=logging.DEBUG)
    contents: dict[str, str] = {}
    issues: list[ValidationIssue] = []
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in extensions:
            continue
        relative = path.relative_to(root).as_posix()
        try:
            contents[relative] = path.read_text(encoding="utf-8")
            continue
        except UnicodeDecodeError as e:
            detail = f"{relative}: invalid UTF-8 at byte {e.start}: {e.reason}"
        except OSError as e:
            detail = f"{relative}: cannot read file: {e.strerror or e}"

        segments, _ = page_segments_for_file(relative, extensions)
        logger.warning("Skipping unreadable page file: %s", detail)
        issues.append(
            ValidationIssue(
                kind=IssueKind.MALFORMED_FRONT_MATTER,
                source_path=join_path(segments),
                location=Location(line=1),
                detail=detail,
            )
        )
    return contents, issues


def load_corpus(
    content_root: Path, config: ValidationConfig | None = None
) -> tuple[CorpusIndex, list[ValidationIssue]]:
    """
    Load all pages beneath `content_root` into a new index.

    Raises:
        ContentRootError: If the content root is missing or not a directory.
    """
    config = config or ValidationConfig()
    logger = get_logger(name="corpus", level=logging.DEBUG)

    contents, read_issues = read_contents(Path(content_root), config.page_extensions)
    logger.info("Read %d page files from %s", len(contents), content_root)
    corpus, issues = build_corpus(contents, config)
    return corpus, read_issues + issues
