"""
Site-wide configuration constants.

The values below are the single source of truth for the site's metadata and
menus. They are validated when this module is imported, so a malformed
literal fails the build instead of reaching the renderer.
"""
from typing import Any, Dict

from blogsite.models.link import LinkEntry, Menu
from blogsite.models.site import SiteMetadata

SITE = SiteMetadata(
    title="strf0x's blog",
    description="blog on my cyber to ai journey",
    contact_email="str.f0x@protonmail.com",
    posts_on_homepage=2,
    posts_per_page=3,
    canonical_url="https://voluble-figolla-716fdd.netlify.app/blog/",
)

NAV_LINKS: Menu = (
    LinkEntry(target="/blog", label="blog"),
    LinkEntry(target="/authors", label="authors"),
    LinkEntry(target="/about", label="about"),
    LinkEntry(target="/tags", label="tags"),
)

SOCIAL_LINKS: Menu = (
    LinkEntry(target="https://github.com/strf0x1", label="GitHub"),
    LinkEntry(target="https://twitter.com/strf0x1", label="Twitter"),
    LinkEntry(target="str.f0x@protonmail.com", label="Email"),
    LinkEntry(target="/rss.xml", label="RSS"),
)


def get_site() -> SiteMetadata:
    return SITE


def get_nav_links() -> Menu:
    return NAV_LINKS


def get_social_links() -> Menu:
    return SOCIAL_LINKS


def export_config() -> Dict[str, Any]:
    """Configuration as plain JSON-ready data for the site generator."""
    return {
        "site": SITE.to_dict(),
        "primaryNav": [link.to_dict() for link in NAV_LINKS],
        "socialLinks": [link.to_dict() for link in SOCIAL_LINKS],
    }
