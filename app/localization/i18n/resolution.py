"""Nested key resolution against a translation tree."""

from typing import Any, List, Mapping, Optional, Sequence, Union

Scope = Union[str, Sequence[str]]


def split_scope(scope: Optional[Scope]) -> List[str]:
    """Split a scope into key segments.

    Accepts a dotted string ("dates.outOfRange") or a pre-split sequence of
    segments. A blank scope yields no segments.
    """
    if scope is None:
        return []
    if isinstance(scope, str):
        scope = scope.strip()
        return scope.split(".") if scope else []
    return [str(segment) for segment in scope]


def get_nested_translation(
    translations: Mapping[str, Any], scope: Optional[Scope], locale: Optional[str]
) -> Optional[Any]:
    """Walk the tree of one locale segment by segment.

    Args:
        translations: Translation tree keyed by locale.
        scope: Dotted string or sequence of segments.
        locale: Locale whose subtree is walked.

    Returns:
        The leaf (string, plural record or nested mapping), or None when any
        segment is missing or an intermediate value is not a mapping.
    """
    segments = split_scope(scope)
    if not segments or not locale:
        return None

    current: Any = translations.get(locale)
    for segment in segments:
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
    return current
