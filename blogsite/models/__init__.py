"""
Central re-exports for the blog's data models.

This module exposes the canonical models from their dedicated modules to
provide stable import paths as "blogsite.models" without redefining types.
"""
from .article import Article, FrontMatter
from .author import Author
from .link import LinkEntry, LinkKind, Menu
from .site import SiteMetadata

__all__ = [
    "Article",
    "Author",
    "FrontMatter",
    "LinkEntry",
    "LinkKind",
    "Menu",
    "SiteMetadata",
]
