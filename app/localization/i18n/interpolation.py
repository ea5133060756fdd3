"""String interpolation for translation templates.

Placeholders use the ``%{name}`` syntax. Nested parameter objects are
flattened into dotted paths so ``%{user.name}`` resolves against
``{"user": {"name": "Ada"}}``; sequences are also addressable by index
(``%{items[0]}`` or ``%{items.0}``).
"""

import json
import re
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping, Optional

PLACEHOLDER_PATTERN = re.compile(r"%\{([^{}]*)\}")

_SCALAR_TYPES = (str, int, float, bool, Decimal)


def stringify(value: Any) -> str:
    """Convert any value to its textual form.

    Mappings and sequences are rendered as JSON; anything JSON cannot encode
    falls back to str().
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, _SCALAR_TYPES):
        return str(value)
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def flatten_params(params: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Collapse nested parameters into a flat mapping of dotted paths.

    Intermediate objects stay addressable under their own path.

    Args:
        params: Parameters, possibly nested.
        prefix: Path of params inside the outermost mapping.

    Returns:
        Flat mapping of path -> value.

    Example:
        >>> flatten_params({"user": {"name": "Ada"}, "ids": [7]})
        {'user': {'name': 'Ada'}, 'user.name': 'Ada', 'ids': [7], 'ids[0]': 7, 'ids.0': 7}
    """
    flat: Dict[str, Any] = {}
    for key, value in params.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        flat[path] = value
        if isinstance(value, Mapping):
            flat.update(flatten_params(value, path))
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                for item_path in (f"{path}[{index}]", f"{path}.{index}"):
                    flat[item_path] = item
                    if isinstance(item, Mapping):
                        flat.update(flatten_params(item, item_path))
    return flat


def interpolate(
    value: Any,
    params: Optional[Mapping[str, Any]] = None,
    on_missing: Optional[Callable[[str], str]] = None,
) -> str:
    """Substitute ``%{key}`` placeholders in a template.

    Args:
        value: Template. None renders as an empty string; values that are not
            scalars are stringified and returned without substitution.
        params: Parameter mapping. When omitted the template is returned as is.
        on_missing: Renders a placeholder whose key is absent from params.
            Receives the full placeholder text (e.g. "%{name}"). Defaults to
            the textual form of None.

    Returns:
        Interpolated string.
    """
    if value is None:
        return ""
    if not isinstance(value, _SCALAR_TYPES):
        return stringify(value)
    text = str(value)
    if not isinstance(params, Mapping):
        return text

    flat = flatten_params(params)

    def _replace(match: "re.Match[str]") -> str:
        key = match.group(1).strip()
        if key not in flat and on_missing is not None:
            return on_missing(match.group(0))
        return stringify(flat.get(key))

    return PLACEHOLDER_PATTERN.sub(_replace, text)
