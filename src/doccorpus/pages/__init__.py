"""
Package 'pages':
    Parsing raw content into pages and extracting their cross-references.
"""

from .parser import parse_page, parse_front_matter, split_blocks
from .annotations import InfoString, parse_info_string
from .references import extract_references, classify_target

__all__ = [
    "parse_page",
    "parse_front_matter",
    "split_blocks",
    "InfoString",
    "parse_info_string",
    "extract_references",
    "classify_target",
]
