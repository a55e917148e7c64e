"""
Listing helpers for the article collection.

These are the ordering, pagination and grouping rules the renderer's listing
pages follow: the blog index is paged with ``posts_per_page``, the landing
page shows ``posts_on_homepage`` articles, and tag and author index pages
group articles by front-matter values. Everything is newest first.
"""
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from blogsite.consts import SITE
from blogsite.models.article import Article
from blogsite.models.site import SiteMetadata


class Page(BaseModel):
    """One page of a paginated listing. ``number`` is 1-based."""
    number: int
    items: List[Any]
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    def __len__(self) -> int:
        return len(self.items)


def sort_by_date(articles: Iterable[Article]) -> List[Article]:
    """Order articles newest first; same-day articles are ordered by slug."""
    ordered = sorted(articles, key=lambda a: a.slug)
    return sorted(ordered, key=lambda a: a.date, reverse=True)


def paginate(items: Sequence[Any], per_page: int) -> List[Page]:
    """
    Split a sequence into consecutive pages.

    Args:
        items: Items in display order
        per_page: Page size, at least 1

    Returns:
        List[Page]: Pages in order; empty when there are no items
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    items = list(items)
    total_pages = math.ceil(len(items) / per_page)
    return [
        Page(
            number=index + 1,
            items=items[index * per_page:(index + 1) * per_page],
            total_pages=total_pages,
            total_items=len(items),
        )
        for index in range(total_pages)
    ]


def paginate_articles(articles: Iterable[Article], site: SiteMetadata = SITE) -> List[Page]:
    """Paginate articles in publication order with the site's page size."""
    return paginate(sort_by_date(articles), site.posts_per_page)


def homepage_articles(articles: Iterable[Article], site: SiteMetadata = SITE) -> List[Article]:
    """The newest articles surfaced on the landing page."""
    return sort_by_date(articles)[:site.posts_on_homepage]


def _group(articles: Iterable[Article], keys_of) -> Dict[str, List[Article]]:
    groups: Dict[str, List[Article]] = {}
    for article in sort_by_date(articles):
        for key in keys_of(article):
            groups.setdefault(key, []).append(article)
    return {key: groups[key] for key in sorted(groups, key=lambda k: (k.lower(), k))}


def group_by_tag(articles: Iterable[Article]) -> Dict[str, List[Article]]:
    """Map each tag to its articles, newest first; tags sorted case-insensitively."""
    return _group(articles, lambda a: a.tags)


def group_by_author(articles: Iterable[Article]) -> Dict[str, List[Article]]:
    """Map each author identifier to their articles, newest first."""
    return _group(articles, lambda a: a.authors)


def adjacent_articles(
    articles: Iterable[Article], slug: str
) -> Tuple[Optional[Article], Optional[Article]]:
    """
    Find the neighbours of an article in publication order.

    Returns:
        Tuple of (newer article, older article); either may be None

    Raises:
        KeyError: If no article has the given slug
    """
    ordered = sort_by_date(articles)
    for index, article in enumerate(ordered):
        if article.slug == slug:
            newer = ordered[index - 1] if index > 0 else None
            older = ordered[index + 1] if index + 1 < len(ordered) else None
            return newer, older
    raise KeyError(slug)
