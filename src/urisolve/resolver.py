"""Reference resolution — pure-library module (no Flask dependency).

Implements the syntax-only resolution of RFC 3986 section 5.2 without
building a parsed URI object: both strings are scanned once by
:func:`~urisolve.indices.locate`, the target is assembled from slices of
base and reference, and dot segments are removed from the resulting path
span in place.
"""

from __future__ import annotations

import logging
from typing import Optional

from rdflib import URIRef

from .dot_segments import remove_dot_segments
from .indices import UriIndices, locate
from .models import ReferenceKind

__all__ = [
    "ReferenceKind",
    "classify_reference",
    "is_absolute",
    "resolve",
    "resolve_to_uri",
]

logger = logging.getLogger(__name__)


# ── Classification ───────────────────────────────────────────────


def _classify(reference: str, ref: UriIndices) -> ReferenceKind:
    if ref.scheme_colon != -1:
        return ReferenceKind.ABSOLUTE
    if ref.fragment == 0:
        return ReferenceKind.FRAGMENT
    if ref.query == 0:
        return ReferenceKind.QUERY
    if ref.path != 0:
        return ReferenceKind.NETWORK_PATH
    if reference[ref.path] == "/":
        return ReferenceKind.ABSOLUTE_PATH
    return ReferenceKind.RELATIVE_PATH


def classify_reference(reference: Optional[str]) -> ReferenceKind:
    """Return which resolution rule :func:`resolve` applies to *reference*.

    The rules are mutually exclusive and checked in order of
    specificity: absolute, fragment-only (including the empty
    reference), query-only, network-path (``//authority``), absolute
    path, relative path.
    """
    reference = reference or ""
    return _classify(reference, locate(reference))


# ── Public functions ─────────────────────────────────────────────


def resolve(base_uri: Optional[str], reference_uri: Optional[str]) -> str:
    """Resolve *reference_uri* against *base_uri*.

    Parameters
    ----------
    base_uri:
        The base URI.  ``None`` is treated as ``""``.
    reference_uri:
        The reference to resolve.  ``None`` is treated as ``""``.

    Returns
    -------
    str
        The target URI.  No validation is performed; malformed input
        yields whatever the component offsets produce.

    Examples::

        >>> resolve("http://a/b/c/d;p?q", "../g")
        'http://a/b/g'
        >>> resolve("http://a", "b")
        'http://a/b'
    """
    base = base_uri or ""
    reference = reference_uri or ""

    ref = locate(reference)
    kind = _classify(reference, ref)
    logger.debug("Resolving %r against %r as %s reference", reference, base, kind.value)

    if kind is ReferenceKind.ABSOLUTE:
        return remove_dot_segments(list(reference), ref.path, ref.query)

    b = locate(base)
    if kind is ReferenceKind.FRAGMENT:
        # Base without its fragment, plus the reference.
        return base[:b.fragment] + reference
    if kind is ReferenceKind.QUERY:
        # Base up to (excluding) its query, plus the reference.
        return base[:b.query] + reference
    if kind is ReferenceKind.NETWORK_PATH:
        # Base scheme plus the reference.
        base_limit = b.scheme_colon + 1
        buffer = list(base[:base_limit] + reference)
        return remove_dot_segments(buffer, base_limit + ref.path, base_limit + ref.query)
    if kind is ReferenceKind.ABSOLUTE_PATH:
        # Base scheme and authority plus the reference.
        buffer = list(base[:b.path] + reference)
        return remove_dot_segments(buffer, b.path, b.path + ref.query)

    if b.scheme_colon + 2 < b.path and b.path == b.query:
        # Authority with an empty path: a '/' is needed before the reference.
        buffer = list(base[:b.path] + "/" + reference)
        return remove_dot_segments(buffer, b.path, b.path + ref.query + 1)

    # Replace the last segment of the base path.  Without any '/' the whole
    # hier-part is dropped and the reference follows the scheme colon.
    last_slash = base.rfind("/", 0, b.query)
    base_limit = b.path if last_slash == -1 else last_slash + 1
    buffer = list(base[:base_limit] + reference)
    return remove_dot_segments(buffer, b.path, base_limit + ref.query)


def resolve_to_uri(base_uri: Optional[str], reference_uri: Optional[str]) -> URIRef:
    """Like :func:`resolve`, but returns an :class:`rdflib.URIRef`."""
    return URIRef(resolve(base_uri, reference_uri))


def is_absolute(uri: Optional[str]) -> bool:
    """Return True if *uri* starts with a scheme component."""
    return uri is not None and locate(uri).scheme_colon != -1
