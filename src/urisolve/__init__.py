"""urisolve: syntax-only resolution of URI references (RFC 3986 section 5).

Main modules:
- resolver: resolve references against a base, absoluteness check
- indices: locate the component boundaries of a URI reference
- dot_segments: remove "." and ".." path segments
- params: query-parameter helpers
"""

from .dot_segments import normalize_path, remove_dot_segments
from .indices import UriIndices, locate, split
from .models import ReferenceKind, Resolution, UriComponents
from .params import remove_query_parameter
from .resolver import classify_reference, is_absolute, resolve, resolve_to_uri

# Import version information
from .version import VERSION

__all__ = [
    "VERSION",
    "ReferenceKind",
    "Resolution",
    "UriComponents",
    "UriIndices",
    "classify_reference",
    "is_absolute",
    "locate",
    "normalize_path",
    "remove_dot_segments",
    "remove_query_parameter",
    "resolve",
    "resolve_to_uri",
    "split",
]
