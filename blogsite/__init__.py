"""
strf0x's blog

Site configuration and content schema for a static blog about applying local
language models and retrieval-augmented generation to cybersecurity research.
"""

__version__ = "0.1.0"
__author__ = "strf0x"
__description__ = "Site configuration and content checks for strf0x's blog"
__license__ = "MIT"

# Package level constants
DEFAULT_CONTENT_DIR = "content/blog"
DEFAULT_AUTHORS_DIR = "content/authors"
DEFAULT_PUBLIC_DIR = "public"

# Version info tuple
VERSION_INFO = tuple(map(int, __version__.split('.')))
