"""
Package 'doccorpus':
    In-memory model of a documentation corpus and a validator for its
    cross-references.
"""

from .schema import Page, CrossReference, ValidationIssue, IssueKind
from .corpus import CorpusIndex, build_corpus, load_corpus
from .validation import ReferenceValidator, validate, run_validation
from .config import ValidationConfig

__version__ = "0.1.0"

__all__ = [
    "Page",
    "CrossReference",
    "ValidationIssue",
    "IssueKind",
    "CorpusIndex",
    "build_corpus",
    "load_corpus",
    "ReferenceValidator",
    "validate",
    "run_validation",
    "ValidationConfig",
]
