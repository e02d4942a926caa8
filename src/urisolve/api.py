"""Main urisolve functionalities for resolving and inspecting URI references."""

from typing import Iterable, Optional

import pandas as pd

from .indices import split
from .models import Resolution, UriComponents
from .resolver import classify_reference, resolve

__all__ = [
    "describe_uri",
    "resolve_many",
    "resolve_reference",
]


def resolve_reference(base: Optional[str], reference: Optional[str]) -> Resolution:
    """Resolve a reference and report which rule produced the target.

    Args:
        base: Base URI (``None`` is treated as empty)
        reference: Reference to resolve (``None`` is treated as empty)

    Returns:
        Resolution model with base, reference, target and kind
    """
    return Resolution(
        base=base or "",
        reference=reference or "",
        target=resolve(base, reference),
        kind=classify_reference(reference),
    )


def resolve_many(base: Optional[str], references: Iterable[Optional[str]]) -> pd.DataFrame:
    """Resolve several references against one base.

    Args:
        base: Base URI shared by all references
        references: References to resolve, in order

    Returns:
        DataFrame with columns ``reference``, ``kind`` and ``target``,
        one row per reference
    """
    rows = []
    for reference in references:
        resolution = resolve_reference(base, reference)
        rows.append(
            {
                "reference": resolution.reference,
                "kind": resolution.kind,
                "target": resolution.target,
            }
        )
    return pd.DataFrame(rows, columns=["reference", "kind", "target"])


def describe_uri(uri: Optional[str]) -> UriComponents:
    """Split a URI reference into its components.

    Args:
        uri: URI or relative reference

    Returns:
        UriComponents model
    """
    return split(uri)
