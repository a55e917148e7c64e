"""
Content loading for the blog's article and author documents.
"""
from .loader import (
    ContentError,
    FrontMatterError,
    load_articles,
    load_authors,
    parse_article,
    parse_author,
    split_front_matter,
)

__all__ = [
    "ContentError",
    "FrontMatterError",
    "load_articles",
    "load_authors",
    "parse_article",
    "parse_author",
    "split_front_matter",
]
