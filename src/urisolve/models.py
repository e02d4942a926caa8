"""
Pydantic models for URI components and resolution results.

Provides typed, serialisable views over the offset-based core.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReferenceKind(str, Enum):
    """How a reference is combined with its base, in order of precedence."""

    ABSOLUTE = "absolute"
    FRAGMENT = "fragment"
    QUERY = "query"
    NETWORK_PATH = "network_path"
    ABSOLUTE_PATH = "absolute_path"
    RELATIVE_PATH = "relative_path"


class UriComponents(BaseModel):
    """The five RFC 3986 components of a URI reference."""

    scheme: Optional[str] = Field(None, description="Scheme without the ':'")
    authority: Optional[str] = Field(None, description="Authority without the leading '//'")
    path: str = Field("", description="Path, possibly empty")
    query: Optional[str] = Field(None, description="Query without the '?'")
    fragment: Optional[str] = Field(None, description="Fragment without the '#'")
    is_absolute: bool = Field(False, description="Whether a scheme is present")

    model_config = ConfigDict(extra="forbid")

    def to_string(self) -> str:
        """Recompose the reference (RFC 3986 section 5.3)."""
        parts = []
        if self.scheme is not None:
            parts.append(f"{self.scheme}:")
        if self.authority is not None:
            parts.append(f"//{self.authority}")
        parts.append(self.path)
        if self.query is not None:
            parts.append(f"?{self.query}")
        if self.fragment is not None:
            parts.append(f"#{self.fragment}")
        return "".join(parts)


class Resolution(BaseModel):
    """A reference resolved against a base."""

    base: str = Field("", description="Base URI")
    reference: str = Field("", description="Reference that was resolved")
    target: str = Field(..., description="Resolved target URI")
    kind: ReferenceKind = Field(..., description="Which resolution rule applied")

    model_config = ConfigDict(use_enum_values=True)
