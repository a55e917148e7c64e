import datetime
import random

import pytest

from blogsite.listing import (
    adjacent_articles,
    group_by_author,
    group_by_tag,
    homepage_articles,
    paginate,
    paginate_articles,
    sort_by_date,
)
from blogsite.models.site import SiteMetadata

from conftest import make_article


@pytest.fixture
def seven_articles():
    articles = [
        make_article(f"post-{day}", datetime.date(2024, 1, day))
        for day in range(1, 8)
    ]
    random.Random(7).shuffle(articles)
    return articles


@pytest.fixture
def site():
    return SiteMetadata(
        title="Test blog",
        description="A blog",
        contact_email="me@example.com",
        posts_on_homepage=2,
        posts_per_page=3,
        canonical_url="https://example.com/blog/",
    )


def test_paginate_seven_articles_by_three(seven_articles, site):
    pages = paginate_articles(seven_articles, site)
    assert [len(page) for page in pages] == [3, 3, 1]
    slugs = [a.slug for page in pages for a in page.items]
    assert slugs == [f"post-{day}" for day in range(7, 0, -1)]
    assert [page.number for page in pages] == [1, 2, 3]
    assert all(page.total_pages == 3 and page.total_items == 7 for page in pages)


def test_page_navigation_flags():
    first, middle, last = paginate(list(range(7)), 3)
    assert not first.has_previous and first.has_next
    assert middle.has_previous and middle.has_next
    assert last.has_previous and not last.has_next


def test_paginate_edges():
    assert paginate([], 3) == []
    assert [len(p) for p in paginate(list(range(6)), 3)] == [3, 3]
    assert [len(p) for p in paginate(list(range(2)), 3)] == [2]
    with pytest.raises(ValueError):
        paginate([1, 2], 0)


def test_page_count_matches_pagination(seven_articles, site):
    assert site.page_count(len(seven_articles)) == len(paginate_articles(seven_articles, site))


def test_homepage_articles(seven_articles, site):
    assert [a.slug for a in homepage_articles(seven_articles, site)] == ["post-7", "post-6"]
    assert homepage_articles([], site) == []


def test_sort_by_date_breaks_ties_by_slug():
    day = datetime.date(2024, 2, 2)
    articles = [make_article("b", day), make_article("c", datetime.date(2024, 3, 1)), make_article("a", day)]
    assert [a.slug for a in sort_by_date(articles)] == ["c", "a", "b"]


def test_group_by_tag():
    articles = [
        make_article("one", datetime.date(2024, 1, 1), tags=("rag", "LLM")),
        make_article("two", datetime.date(2024, 2, 1), tags=("rag",)),
        make_article("three", datetime.date(2024, 3, 1), tags=("opsec",)),
    ]
    groups = group_by_tag(articles)
    assert list(groups) == ["LLM", "opsec", "rag"]
    assert [a.slug for a in groups["rag"]] == ["two", "one"]


def test_group_by_author():
    articles = [
        make_article("one", datetime.date(2024, 1, 1), authors=("strf0x",)),
        make_article("two", datetime.date(2024, 2, 1), authors=("strf0x", "guest")),
    ]
    groups = group_by_author(articles)
    assert list(groups) == ["guest", "strf0x"]
    assert [a.slug for a in groups["strf0x"]] == ["two", "one"]


def test_adjacent_articles(seven_articles):
    newer, older = adjacent_articles(seven_articles, "post-4")
    assert newer.slug == "post-5"
    assert older.slug == "post-3"
    assert adjacent_articles(seven_articles, "post-7")[0] is None
    assert adjacent_articles(seven_articles, "post-1")[1] is None
    with pytest.raises(KeyError):
        adjacent_articles(seven_articles, "missing")
