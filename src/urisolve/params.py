"""Query-parameter helpers."""

from __future__ import annotations

import logging
from urllib.parse import quote, unquote

from .indices import locate

logger = logging.getLogger(__name__)


def remove_query_parameter(uri: str, name: str) -> str:
    """Remove every occurrence of query parameter *name* from *uri*.

    The query is rebuilt from the remaining parameters, grouped by name
    in order of first appearance.  Names and values are percent-decoded
    and re-encoded, so equivalent encodings may change form; ``+`` is a
    literal character, not a space.  The fragment is left untouched.

    Args:
        uri: The URI.
        name: The (decoded) name of the parameter to drop.

    Returns:
        The URI without the query parameter.
    """
    _, _, query, fragment = locate(uri)
    if query == fragment:
        return uri

    grouped: dict[str, list[str]] = {}
    for pair in uri[query + 1:fragment].split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        key = unquote(key)
        if key != name:
            grouped.setdefault(key, []).append(unquote(value))

    pairs = [
        f"{quote(key, safe='')}={quote(value, safe='')}"
        for key, values in grouped.items()
        for value in values
    ]
    logger.debug("Kept %d query parameters of %s", len(pairs), uri)

    target = uri[:query]
    if pairs:
        target += "?" + "&".join(pairs)
    return target + uri[fragment:]
