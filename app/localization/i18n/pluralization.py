"""Plural record detection, bucket selection and locale-aware count formatting."""

import re
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

# Placeholder the formatted count is exposed under when a plural record is rendered.
COUNT_STR_PARAM = "countStr"

# Separators per language; unknown languages use "en".
NUMBER_FORMATS: Dict[str, Dict[str, str]] = {
    "en": {"decimal": ".", "group": ","},
    "de": {"decimal": ",", "group": "."},
    "es": {"decimal": ",", "group": "."},
    "it": {"decimal": ",", "group": "."},
    "pt": {"decimal": ",", "group": "."},
    "fr": {"decimal": ",", "group": " "},
}

GROUP_SIZE = 3


def is_count(value: Any) -> bool:
    """Return True when value is a number usable as a plural count."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_plural_record(value: Any) -> bool:
    """Return True when value has both a string ``one`` and a string ``other``.

    ``zero`` is optional.
    """
    return (
        isinstance(value, Mapping)
        and isinstance(value.get("one"), str)
        and isinstance(value.get("other"), str)
    )


def plural_keys(count: Any) -> List[str]:
    """Bucket names to try, in order, for a count."""
    if count == 0:
        return ["zero", "other"]
    if abs(count) == 1:
        return ["one"]
    return ["other"]


def select_plural(record: Mapping[str, Any], count: Any) -> Optional[Any]:
    """Pick the variant of a plural record matching count, or None."""
    for key in plural_keys(count):
        if key in record:
            return record[key]
    return None


def _number_format(locale: Optional[str]) -> Dict[str, str]:
    if not locale:
        return NUMBER_FORMATS["en"]
    language = re.split(r"[-_]", locale)[0].lower()
    return NUMBER_FORMATS.get(language, NUMBER_FORMATS["en"])


def format_count(count: Any, locale: Optional[str] = None) -> str:
    """Format a count with the grouping conventions of a locale.

    Non-finite counts are returned as str(count).

    Example:
        >>> format_count(1234567, "en")
        '1,234,567'
        >>> format_count(1234.5, "de")
        '1.234,5'
    """
    number = Decimal(str(count))
    if not number.is_finite():
        return str(count)

    number_format = _number_format(locale)
    text = format(abs(number), "f")
    int_part, _, dec_part = text.partition(".")

    groups = []
    while len(int_part) > GROUP_SIZE:
        groups.append(int_part[-GROUP_SIZE:])
        int_part = int_part[:-GROUP_SIZE]
    groups.append(int_part)
    int_part = number_format["group"].join(reversed(groups))

    sign = "-" if count < 0 else ""
    if dec_part:
        return f"{sign}{int_part}{number_format['decimal']}{dec_part}"
    return f"{sign}{int_part}"
