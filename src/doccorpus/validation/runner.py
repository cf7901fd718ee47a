"""
End-to-end validation of a content root.
"""

import logging
from pathlib import Path

from doccorpus.config import ValidationConfig
from doccorpus.corpus import load_corpus
from doccorpus.schema import ValidationIssue
from doccorpus.utils import get_logger

from .validator import ReferenceValidator, sort_issues

__all__ = ["run_validation"]


def run_validation(
    content_root: Path, config: ValidationConfig | None = None
) -> list[ValidationIssue]:
    """
    Load every page under `content_root` and validate the resulting corpus.

    1. Read and parse all page files, collecting front-matter and duplicate-path issues.
    2. Validate cross-references and code samples.
    3. Merge both issue lists in source path / location order.

    Raises:
        ContentRootError: If the content root is missing or unreadable.
    """
    config = config or ValidationConfig()
    logger = get_logger(name="validator", level=logging.DEBUG)
    logger.info("Starting validation of %s", content_root)

    corpus, issues = load_corpus(Path(content_root), config)
    issues.extend(ReferenceValidator(config).validate(corpus))

    logger.info("Validation of %s finished with %d issues", content_root, len(issues))
    return sort_issues(issues)
