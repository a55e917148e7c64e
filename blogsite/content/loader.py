"""
Loader for the blog's Markdown/MDX documents.

This module splits documents into their YAML front-matter block and body,
validates the front-matter against the article (or author) schema, and
collects a directory of documents into date-ordered articles.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import structlog
import yaml
from pydantic import ValidationError

from blogsite.listing import sort_by_date
from blogsite.models.article import Article, FrontMatter
from blogsite.models.author import Author

# Set up structured logger
logger = structlog.get_logger()

DOCUMENT_SUFFIXES = (".md", ".mdx")
FRONT_MATTER_DELIMITER = "---"


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as strings for the schema's date parsing."""


FrontMatterLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", FrontMatterLoader.construct_yaml_str
)


class ContentError(Exception):
    """A content document or directory cannot be used."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class FrontMatterError(ContentError):
    """A document's front-matter is missing, unparseable or violates the schema."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        errors: Optional[List[Tuple[str, str]]] = None,
    ):
        # (field, message) pairs for schema violations
        self.errors = errors or []
        super().__init__(message, path)


def _describe_validation_error(error: ValidationError) -> List[Tuple[str, str]]:
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "<document>"
        if err["type"] == "missing":
            problems.append((field, "required field is missing"))
        elif err["type"] == "extra_forbidden":
            problems.append((field, "unknown field"))
        else:
            problems.append((field, err["msg"]))
    return problems


def split_front_matter(text: str, path: Optional[Path] = None) -> Tuple[Dict[str, Any], str]:
    """
    Split a document into its front-matter mapping and its body.

    The front-matter is the YAML block between a first line of ``---`` and
    the next line of ``---``.

    Args:
        text: Full document text
        path: Document path, used in error messages

    Returns:
        Tuple of (front-matter mapping, body text)

    Raises:
        FrontMatterError: If the block is missing, unterminated, not valid
            YAML, or not a mapping
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise FrontMatterError("document does not start with a front-matter block", path)

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            break
    else:
        raise FrontMatterError("front-matter block is not terminated", path)

    try:
        data = yaml.load("\n".join(lines[1:end]), Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"front-matter is not valid YAML: {e}", path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("front-matter must be a mapping", path)

    body = "\n".join(lines[end + 1:]).strip("\n")
    return data, body


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FrontMatterError("document is not valid UTF-8", path) from e


def slug_for(path: Path) -> str:
    """Derive an article slug from its file name (folder name for index files)."""
    if path.stem == "index":
        return path.parent.name
    return path.stem


def find_documents(directory: Path) -> List[Path]:
    """All Markdown/MDX documents below ``directory``, skipping ``_``-prefixed files."""
    return sorted(
        p for p in directory.rglob("*")
        if p.is_file()
        and p.suffix.lower() in DOCUMENT_SUFFIXES
        and not p.name.startswith("_")
    )


def parse_article(path: Path) -> Article:
    """
    Parse and validate a single article document.

    Args:
        path: Path to a ``.md`` or ``.mdx`` file

    Returns:
        Article: The validated article

    Raises:
        FrontMatterError: If the front-matter is unusable or violates the schema
    """
    path = Path(path)
    data, body = split_front_matter(read_document(path), path)

    try:
        front_matter = FrontMatter.model_validate(data)
    except ValidationError as e:
        errors = _describe_validation_error(e)
        summary = "; ".join(f"{field}: {msg}" for field, msg in errors)
        raise FrontMatterError(f"invalid front-matter ({summary})", path, errors) from e

    return Article(
        slug=slug_for(path),
        front_matter=front_matter,
        body=body,
        source_path=path,
    )


def load_articles(content_dir: Path) -> List[Article]:
    """
    Load every article below a content directory.

    Args:
        content_dir: Directory holding the article documents

    Returns:
        List[Article]: Articles ordered newest first

    Raises:
        ContentError: If the directory does not exist or two documents share a slug
        FrontMatterError: If any document fails validation
    """
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise ContentError("content directory does not exist", content_dir)

    articles: Dict[str, Article] = {}
    for path in find_documents(content_dir):
        article = parse_article(path)
        if article.slug in articles:
            other = articles[article.slug].source_path
            raise ContentError(f"duplicate slug {article.slug!r} (also used by {other})", path)
        articles[article.slug] = article
        logger.debug("Loaded article", slug=article.slug, path=str(path))

    logger.info("Loaded articles", count=len(articles), content_dir=str(content_dir))
    return sort_by_date(articles.values())


def parse_author(path: Path) -> Author:
    """Parse an author profile; the identifier defaults to the file stem."""
    path = Path(path)
    data, _body = split_front_matter(read_document(path), path)
    data.setdefault("id", path.stem)

    try:
        return Author.model_validate(data)
    except ValidationError as e:
        errors = _describe_validation_error(e)
        summary = "; ".join(f"{field}: {msg}" for field, msg in errors)
        raise FrontMatterError(f"invalid author profile ({summary})", path, errors) from e


def load_authors(authors_dir: Path) -> Dict[str, Author]:
    """
    Load every author profile below a directory, keyed by identifier.

    Raises:
        ContentError: If the directory does not exist or an identifier repeats
        FrontMatterError: If a profile fails validation
    """
    authors_dir = Path(authors_dir)
    if not authors_dir.is_dir():
        raise ContentError("authors directory does not exist", authors_dir)

    authors: Dict[str, Author] = {}
    for path in find_documents(authors_dir):
        author = parse_author(path)
        if author.id in authors:
            raise ContentError(f"duplicate author id {author.id!r}", path)
        authors[author.id] = author

    logger.info("Loaded authors", count=len(authors), authors_dir=str(authors_dir))
    return authors
