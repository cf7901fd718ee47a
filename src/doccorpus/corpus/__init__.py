"""
Package 'corpus'
"""

from .index import CorpusIndex
from .loader import build_corpus, load_corpus, read_contents

__all__ = [
    "CorpusIndex",
    "build_corpus",
    "load_corpus",
    "read_contents",
]
