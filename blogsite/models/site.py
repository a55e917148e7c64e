"""
SiteMetadata model for the site-wide settings the renderer reads.

This module defines the immutable SiteMetadata record: display strings,
contact address, pagination limits and the canonical URL of the deployed
site root.
"""
import math
from typing import Any, Dict
from urllib.parse import urljoin, urlparse

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from blogsite.models.link import EMAIL_RE


class SiteMetadata(BaseModel):
    """
    Site-wide metadata.

    Constructed once from literals at import time and never mutated; a
    configuration change means a new process (a redeploy).
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    title: str
    description: str
    contact_email: str
    posts_on_homepage: int
    posts_per_page: int
    canonical_url: str

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("contact_email")
    @classmethod
    def validate_contact_email(cls, v: str) -> str:
        if not EMAIL_RE.match(v):
            raise ValueError(f"Invalid e-mail address: {v}")
        return v

    @field_validator("posts_on_homepage", "posts_per_page")
    @classmethod
    def positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("canonical_url")
    @classmethod
    def validate_canonical_url(cls, v: str) -> str:
        """Validate that the canonical URL is an absolute http(s) URL."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid canonical URL: {v}")
        return v

    def page_count(self, total_posts: int) -> int:
        """Number of listing pages needed for ``total_posts`` articles."""
        if total_posts < 0:
            raise ValueError("total_posts must not be negative")
        return math.ceil(total_posts / self.posts_per_page)

    def absolute_url(self, path: str = "") -> str:
        """Resolve a site-relative path against the canonical URL."""
        parsed = urlparse(path)
        if parsed.scheme or parsed.netloc:
            raise ValueError(f"Expected a site-relative path, got: {path}")
        base = self.canonical_url if self.canonical_url.endswith("/") else self.canonical_url + "/"
        return urljoin(base, path.lstrip("/"))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a dictionary with camelCase keys."""
        return self.model_dump(by_alias=True, mode='json')
