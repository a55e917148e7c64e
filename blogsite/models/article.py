"""
Front-matter and Article models for the blog's MDX documents.

This module defines the front-matter schema every article must satisfy and
the Article model that pairs validated front-matter with the document body.
The external site generator accepts exactly this shape.
"""
import datetime
import html
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

import bleach
from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

REQUIRED_FIELDS = ("title", "description", "date", "tags", "image", "authors")

# Average reading speed is about 200-250 words per minute
WORDS_PER_MINUTE = 225

_MDX_STATEMENT_RE = re.compile(r"^\s*(import|export)\s.*$", re.MULTILINE)
_TAG_RE = re.compile(r"<[^>]+>")


def _unique(values: List[str]) -> Tuple[str, ...]:
    """Strip values, drop empties and duplicates, keep first-seen order."""
    seen = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return tuple(seen)


class FrontMatter(BaseModel):
    """
    The metadata block at the head of an article.

    All six fields are required and unknown keys are rejected, so a typo in
    a field name surfaces as a schema violation instead of a silently
    missing value.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    title: str
    description: str
    date: datetime.date
    tags: Tuple[str, ...]
    image: str
    authors: Tuple[str, ...]

    @field_validator("title", "description")
    @classmethod
    def clean_display_text(cls, v: str) -> str:
        """Strip markup from strings that end up in meta tags; keep plain text."""
        v = html.unescape(bleach.clean(v, tags=[], strip=True)).strip()
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        """Accept YAML dates, datetimes and free-form date strings."""
        if isinstance(v, datetime.datetime):
            return v.date()
        if isinstance(v, str):
            try:
                return date_parser.parse(v).date()
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Unrecognised date: {v!r}") from e
        return v

    @field_validator("tags", "authors")
    @classmethod
    def normalize_list(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Remove blanks and duplicates; the sequence must not end up empty."""
        v = _unique(list(v))
        if not v:
            raise ValueError("must contain at least one entry")
        return v

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        """The image is a file path relative to the article."""
        if not v:
            raise ValueError("must be a non-empty path")
        if urlparse(v).scheme or v.startswith("/"):
            raise ValueError(f"Image must be a relative file path: {v}")
        return v


class Article(BaseModel):
    """
    A parsed article document.

    Pairs validated front-matter with the raw MDX body and derives the
    word count and reading time from the body.
    """
    slug: str
    front_matter: FrontMatter
    body: str = ""
    source_path: Optional[Path] = None
    word_count: int = 0
    reading_time_minutes: int = 0

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v:
            raise ValueError(f"Invalid slug: {v!r}")
        return v

    @model_validator(mode='after')
    def calculate_reading_time(self) -> 'Article':
        """Count prose words and estimate the reading time in whole minutes."""
        text = _MDX_STATEMENT_RE.sub("", self.body)
        text = _TAG_RE.sub(" ", text)
        self.word_count = len(text.split())
        if self.word_count:
            self.reading_time_minutes = max(1, math.ceil(self.word_count / WORDS_PER_MINUTE))
        else:
            self.reading_time_minutes = 0
        return self

    @property
    def title(self) -> str:
        return self.front_matter.title

    @property
    def date(self) -> datetime.date:
        return self.front_matter.date

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.front_matter.tags

    @property
    def authors(self) -> Tuple[str, ...]:
        return self.front_matter.authors

    @property
    def url_path(self) -> str:
        """Site-relative path the renderer publishes this article under."""
        return f"/blog/{self.slug}"

    def image_path(self) -> Optional[Path]:
        """Resolve the front-matter image against the article's directory."""
        if self.source_path is None:
            return None
        return (self.source_path.parent / self.front_matter.image).resolve()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the article metadata (without body) to a dictionary."""
        data = self.front_matter.model_dump(mode='json')
        data.update(
            slug=self.slug,
            url=self.url_path,
            wordCount=self.word_count,
            readingTimeMinutes=self.reading_time_minutes,
        )
        return data
