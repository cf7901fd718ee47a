"""
Package: 'schema'
"""

from .enums import IssueKind, ReferenceKind, ParseErrorReason
from .reference import Location, CrossReference
from .issue import ValidationIssue
from .page import FrontMatter, LineRange, ProseBlock, CodeSample, Block, Page

__all__ = [
    # enums
    "IssueKind",
    "ReferenceKind",
    "ParseErrorReason",
    # models
    "Location",
    "CrossReference",
    "ValidationIssue",
    "FrontMatter",
    "LineRange",
    "ProseBlock",
    "CodeSample",
    "Block",
    "Page",
]
