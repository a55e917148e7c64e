"""
Build-time checks for the site configuration and content.

The checks collect issues instead of stopping at the first problem so a
single run reports everything an author has to fix before deploying.
"""
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence
from urllib.parse import urlparse

import structlog
from pydantic import BaseModel, Field

from blogsite.consts import NAV_LINKS, SITE, SOCIAL_LINKS
from blogsite.content.loader import (
    ContentError,
    FrontMatterError,
    find_documents,
    load_authors,
    parse_article,
)
from blogsite.models.article import Article
from blogsite.models.link import LinkEntry
from blogsite.models.site import SiteMetadata

# Set up structured logger
logger = structlog.get_logger()


class Severity(str, Enum):
    """How serious an issue is; only errors fail a check."""
    ERROR = "error"
    WARNING = "warning"


class Issue(BaseModel):
    """A single problem found by a check."""
    severity: Severity = Severity.ERROR
    message: str
    path: Optional[str] = None
    field: Optional[str] = None

    def __str__(self) -> str:
        location = self.path or "<config>"
        if self.field:
            location = f"{location} [{self.field}]"
        return f"{self.severity.value}: {location}: {self.message}"


class CheckReport(BaseModel):
    """Result of checking the content tree."""
    issues: List[Issue] = Field(default_factory=list)
    articles: List[Article] = Field(default_factory=list)
    documents_checked: int = 0

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors


def _check_menu(name: str, menu: Sequence[LinkEntry]) -> List[Issue]:
    issues = []
    seen_labels = set()
    seen_targets = set()
    for index, link in enumerate(menu):
        field = f"{name}[{index}]"
        if not link.label or not link.label.strip():
            issues.append(Issue(field=field, message="link label is empty"))
        if not link.target or not link.target.strip():
            issues.append(Issue(field=field, message="link target is empty"))
        if link.label in seen_labels:
            issues.append(Issue(
                severity=Severity.WARNING, field=field,
                message=f"duplicate label {link.label!r}",
            ))
        if link.target in seen_targets:
            issues.append(Issue(
                severity=Severity.WARNING, field=field,
                message=f"duplicate target {link.target!r}",
            ))
        seen_labels.add(link.label)
        seen_targets.add(link.target)
    return issues


def check_site(
    site: SiteMetadata = SITE,
    nav_links: Sequence[LinkEntry] = NAV_LINKS,
    social_links: Sequence[LinkEntry] = SOCIAL_LINKS,
) -> List[Issue]:
    """
    Check the site configuration.

    The models already validate on construction; this re-states the
    invariants so values built without validation are caught as well.
    """
    issues = []
    if site.posts_on_homepage < 1:
        issues.append(Issue(field="postsOnHomepage", message="must be at least 1"))
    if site.posts_per_page < 1:
        issues.append(Issue(field="postsPerPage", message="must be at least 1"))

    parsed = urlparse(site.canonical_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        issues.append(Issue(
            field="canonicalUrl",
            message=f"not an absolute URL: {site.canonical_url!r}",
        ))

    issues.extend(_check_menu("primaryNav", nav_links))
    issues.extend(_check_menu("socialLinks", social_links))
    return issues


def _issues_from_error(error: ContentError) -> List[Issue]:
    path = str(error.path) if error.path else None
    if isinstance(error, FrontMatterError) and error.errors:
        return [Issue(path=path, field=field, message=msg) for field, msg in error.errors]
    return [Issue(path=path, message=error.message)]


def _image_exists(article: Article, public_dir: Optional[Path]) -> bool:
    image = article.image_path()
    if image is not None and image.exists():
        return True
    if public_dir is not None:
        return (public_dir / article.front_matter.image).exists()
    return False


def check_content(
    content_dir: Path,
    authors_dir: Optional[Path] = None,
    public_dir: Optional[Path] = None,
) -> CheckReport:
    """
    Check every article document below ``content_dir``.

    Args:
        content_dir: Directory holding the articles
        authors_dir: Directory holding author profiles; when given, every
            front-matter author must resolve to a profile
        public_dir: Fallback directory for article images

    Returns:
        CheckReport: All issues found plus the articles that parsed cleanly
    """
    report = CheckReport()
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        report.issues.append(Issue(path=str(content_dir), message="content directory does not exist"))
        return report

    by_slug: Dict[str, Article] = {}
    for path in find_documents(content_dir):
        report.documents_checked += 1
        try:
            article = parse_article(path)
        except ContentError as e:
            report.issues.extend(_issues_from_error(e))
            continue

        if article.slug in by_slug:
            report.issues.append(Issue(
                path=str(path), field="slug",
                message=f"duplicate slug {article.slug!r} (also used by {by_slug[article.slug].source_path})",
            ))
            continue
        by_slug[article.slug] = article

        if not _image_exists(article, public_dir):
            report.issues.append(Issue(
                severity=Severity.WARNING, path=str(path), field="image",
                message=f"image file not found: {article.front_matter.image}",
            ))

    report.articles = list(by_slug.values())

    if authors_dir is not None:
        report.issues.extend(_check_authors(report.articles, Path(authors_dir)))

    logger.info(
        "Content check finished",
        documents=report.documents_checked,
        errors=len(report.errors),
        warnings=len(report.warnings),
    )
    return report


def _check_authors(articles: List[Article], authors_dir: Path) -> List[Issue]:
    if not authors_dir.is_dir():
        return [Issue(
            severity=Severity.WARNING, path=str(authors_dir),
            message="authors directory does not exist; author identifiers not checked",
        )]

    try:
        authors = load_authors(authors_dir)
    except ContentError as e:
        return _issues_from_error(e)

    issues = []
    for article in articles:
        for author_id in article.authors:
            if author_id not in authors:
                issues.append(Issue(
                    path=str(article.source_path), field="authors",
                    message=f"unknown author {author_id!r}",
                ))
    return issues
