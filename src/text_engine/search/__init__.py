"""Directory keyword search and the on-demand keyword index."""

from .index import KeywordIndex
from .models import IndexEntry, IndexStats
from .scanner import FileSearch, contains_keyword

__all__ = [
    "FileSearch",
    "IndexEntry",
    "IndexStats",
    "KeywordIndex",
    "contains_keyword",
]
