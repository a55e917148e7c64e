import datetime
import textwrap
from pathlib import Path

import pytest

from blogsite.models.article import Article, FrontMatter

ARTICLE_TEMPLATE = """\
---
title: {title}
description: {description}
date: {date}
tags: [{tags}]
image: {image}
authors: [{authors}]
---

{body}
"""


@pytest.fixture
def write_article(tmp_path: Path):
    """Write an article document under tmp_path/blog and return its path."""
    blog_dir = tmp_path / "blog"
    blog_dir.mkdir(exist_ok=True)

    def _write(
        name: str = "post",
        title: str = "A post",
        description: str = "About something",
        date: str = "2024-03-01",
        tags: str = "rag, llm",
        image: str = "cover.png",
        authors: str = "strf0x",
        body: str = "Some words in the body.",
        raw: str = None,
        suffix: str = ".mdx",
    ) -> Path:
        path = blog_dir / f"{name}{suffix}"
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is None:
            raw = ARTICLE_TEMPLATE.format(
                title=title, description=description, date=date, tags=tags,
                image=image, authors=authors, body=body,
            )
        path.write_text(textwrap.dedent(raw), encoding="utf-8")
        return path

    return _write


def make_article(slug: str, date: datetime.date, tags=("rag",), authors=("strf0x",), body="") -> Article:
    return Article(
        slug=slug,
        front_matter=FrontMatter(
            title=slug.replace("-", " ").title(),
            description=f"About {slug}",
            date=date,
            tags=tags,
            image="cover.png",
            authors=authors,
        ),
        body=body,
    )
