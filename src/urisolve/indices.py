"""Component boundaries of a URI reference.

A URI reference is partitioned as::

    [scheme ":"] hier-part ["?" query] ["#" fragment]

:func:`locate` scans the string once and reports where each part starts,
as plain integer offsets into the original string.  Nothing is copied
until a caller slices.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from .models import UriComponents


class UriIndices(NamedTuple):
    """Offsets of the syntactic parts of a URI reference.

    scheme_colon:
        Index of the ``:`` after the scheme, or ``-1`` for a relative
        reference.  The hier-part always starts at ``scheme_colon + 1``.
    path:
        Index of the first path character.  Equals ``scheme_colon + 1``
        without an authority, and ``query`` when the path is empty.
    query:
        Index of the ``?``, or ``fragment`` when there is no query.
    fragment:
        Index of the ``#``, or the string length when there is no
        fragment.
    """

    scheme_colon: int
    path: int
    query: int
    fragment: int

    @property
    def has_authority(self) -> bool:
        return self.path > self.scheme_colon + 1


EMPTY_INDICES = UriIndices(-1, 0, 0, 0)


def locate(uri: str) -> UriIndices:
    """Calculate the component offsets of *uri*.

    For an empty string only ``scheme_colon`` (``-1``) is meaningful;
    the remaining offsets are zero.
    """
    if not uri:
        return EMPTY_INDICES

    # Outer structure, right to left.
    length = len(uri)
    fragment = uri.find("#")
    if fragment == -1:
        fragment = length
    query = uri.find("?")
    if query == -1 or query > fragment:
        # '?' inside the fragment
        query = fragment

    # A colon after the first slash belongs to the hier-part.
    scheme_limit = uri.find("/")
    if scheme_limit == -1 or scheme_limit > query:
        scheme_limit = query
    scheme_colon = uri.find(":")
    if scheme_colon > scheme_limit:
        scheme_colon = -1

    # hier-part = "//" authority path / path  (also works for scheme_colon == -1)
    has_authority = (
        scheme_colon + 2 < query
        and uri[scheme_colon + 1] == "/"
        and uri[scheme_colon + 2] == "/"
    )
    if has_authority:
        path = uri.find("/", scheme_colon + 3)
        if path == -1 or path > query:
            path = query
    else:
        path = scheme_colon + 1

    return UriIndices(scheme_colon, path, query, fragment)


def split(uri: Optional[str]) -> UriComponents:
    """Slice *uri* into its components at the located offsets.

    Examples::

        >>> split("http://a/b?q#f").authority
        'a'
        >>> split("g;x").scheme is None
        True
    """
    uri = uri or ""
    scheme_colon, path, query, fragment = locate(uri)
    authority = None
    if path > scheme_colon + 1:
        authority = uri[scheme_colon + 3:path]
    return UriComponents(
        scheme=uri[:scheme_colon] if scheme_colon != -1 else None,
        authority=authority,
        path=uri[path:query],
        query=uri[query + 1:fragment] if query < fragment else None,
        fragment=uri[fragment + 1:] if fragment < len(uri) else None,
        is_absolute=scheme_colon != -1,
    )
