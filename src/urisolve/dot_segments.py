"""Removal of ``.`` and ``..`` path segments (RFC 3986 section 5.2.4).

The work happens in place on a list of characters so that the parts of
the buffer outside the path span (scheme, authority, query, fragment)
never need to be split off and re-joined.
"""

from __future__ import annotations

from typing import List


def remove_dot_segments(buffer: List[str], offset: int, limit: int) -> str:
    """Remove dot segments from the path held in ``buffer[offset:limit]``.

    Parameters
    ----------
    buffer:
        The whole URI as a list of characters.  It is modified in place.
    offset:
        Index of the start of the path in *buffer*.
    limit:
        Index one past the end of the path in *buffer*.

    Returns
    -------
    str
        The complete contents of *buffer* after normalization.
    """
    if offset >= limit:
        return "".join(buffer)
    if buffer[offset] == "/":
        # A leading slash is always kept.
        offset += 1

    # First character of the current segment.
    segment_start = offset
    i = offset
    while i <= limit:
        if i == limit:
            next_segment_start = i
        elif buffer[i] == "/":
            next_segment_start = i + 1
        else:
            i += 1
            continue

        # End of a segment or of the path.
        if i == segment_start + 1 and buffer[segment_start] == ".":
            # "abc/def/./ghi" -> "abc/def/ghi"
            del buffer[segment_start:next_segment_start]
            limit -= next_segment_start - segment_start
            i = segment_start
        elif (
            i == segment_start + 2
            and buffer[segment_start] == "."
            and buffer[segment_start + 1] == "."
        ):
            # "abc/def/../ghi" -> "abc/ghi"
            prev_segment_start = _last_slash(buffer, segment_start - 2) + 1
            remove_from = max(prev_segment_start, offset)
            del buffer[remove_from:next_segment_start]
            limit -= next_segment_start - remove_from
            segment_start = i = remove_from
        else:
            i += 1
            segment_start = i

    return "".join(buffer)


def normalize_path(path: str) -> str:
    """Remove dot segments from a standalone path.

    Examples::

        >>> normalize_path("/a/b/c/./../../g")
        '/a/g'
        >>> normalize_path("mid/content=5/../6")
        'mid/6'
    """
    return remove_dot_segments(list(path), 0, len(path))


def _last_slash(buffer: List[str], start: int) -> int:
    """Index of the last ``/`` at or before *start*, or ``-1``."""
    for i in range(start, -1, -1):
        if buffer[i] == "/":
            return i
    return -1
