"""
LinkEntry model for navigation and social menus.

A menu is an ordered tuple of LinkEntry values; the order is the display
order used by the renderer.
"""
import re
from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

EMAIL_RE = re.compile(r"^[^@\s/]+@[^@\s/]+\.[^@\s/]+$")


class LinkKind(str, Enum):
    """Where a link points to."""
    INTERNAL = "internal"
    EXTERNAL = "external"
    EMAIL = "email"

    @classmethod
    def from_target(cls, target: str) -> 'LinkKind':
        """
        Classify a link target.

        Args:
            target: Relative path, absolute URL or e-mail address

        Returns:
            EXTERNAL for http(s) URLs, EMAIL for mailto: links and bare
            addresses, INTERNAL for everything else
        """
        lowered = target.lower()
        if lowered.startswith(("http://", "https://", "//")):
            return cls.EXTERNAL
        if lowered.startswith("mailto:") or EMAIL_RE.match(target):
            return cls.EMAIL
        return cls.INTERNAL


class LinkEntry(BaseModel):
    """A single (target, label) pair in a menu."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    target: str
    label: str

    @field_validator("target", "label")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @property
    def kind(self) -> LinkKind:
        return LinkKind.from_target(self.target)

    @property
    def is_external(self) -> bool:
        """True when the link leaves the site (including mail links)."""
        return self.kind is not LinkKind.INTERNAL

    @property
    def href(self) -> str:
        """The target as it belongs in an anchor's href attribute."""
        if self.kind is LinkKind.EMAIL and not self.target.lower().startswith("mailto:"):
            return f"mailto:{self.target}"
        return self.target

    def to_dict(self) -> Dict[str, Any]:
        return {"target": self.target, "label": self.label}


Menu = Tuple[LinkEntry, ...]
