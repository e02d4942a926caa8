"""URI service — thin Flask wrapper.

All core logic lives in :mod:`urisolve.resolver` and :mod:`urisolve.api`.
"""

from __future__ import annotations

from urisolve.api import describe_uri, resolve_reference
from urisolve.dot_segments import normalize_path
from urisolve.models import Resolution, UriComponents
from urisolve.params import remove_query_parameter
from urisolve.resolver import is_absolute


class UriService:
    """Resolve and inspect URI references."""

    def resolve(self, base: str, reference: str) -> Resolution:
        """Resolve one reference against *base*."""
        return resolve_reference(base, reference)

    def resolve_all(self, base: str, references: list[str]) -> list[Resolution]:
        """Resolve each reference against *base*, preserving order."""
        return [resolve_reference(base, ref) for ref in references]

    def is_absolute(self, uri: str) -> bool:
        return is_absolute(uri)

    def normalize(self, path: str) -> str:
        return normalize_path(path)

    def components(self, uri: str) -> UriComponents:
        return describe_uri(uri)

    def strip_param(self, uri: str, name: str) -> str:
        return remove_query_parameter(uri, name)
