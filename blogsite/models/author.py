"""
Author model for the profiles that articles reference by identifier.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Author(BaseModel):
    """An author profile; ``id`` is the identifier used in article front-matter."""
    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    id: str
    name: str
    pronouns: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    website: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    mail: Optional[str] = None

    @field_validator("id", "name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must be a non-empty string")
        return v

    @property
    def url_path(self) -> str:
        return f"/authors/{self.id}"

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', exclude_none=True)
