"""Declarative member-to-translation-key bindings.

Bindings live in an explicit registry populated at class-definition time:

    @translatable(greeting="greeting", nested_example="nested.example")
    class Labels:
        def __init__(self):
            self.greeting = ""
            self.nested_example = ""

    labels = Labels()
    resolve_translations(labels, i18n.translate)
    # labels.greeting == "Hello!"

    translate_target(Labels, i18n.translate)
    # {"greeting": "Hello!", "nested_example": "Nested Example"}
"""

import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional

from localization.i18n.errors import ResolutionError
from localization.i18n.models import TranslationKeyBinding
from localization.logging import get_module_logger

logger = get_module_logger()

TranslateFn = Callable[..., str]


class TranslationRegistry:
    """Registry of (class, member) -> translation key bindings."""

    def __init__(self):
        self._bindings: Dict[type, Dict[str, TranslationKeyBinding]] = {}

    def bind(self, owner: type, member: str, key: str) -> TranslationKeyBinding:
        """Bind a member of a class to a translation key.

        Re-binding the same member replaces the previous key.

        Raises:
            TypeError: If owner is not a class.
            ValueError: If member or key is blank.
        """
        if not isinstance(owner, type):
            raise TypeError(f"Bindings are declared on classes, got {owner!r}")
        if not isinstance(member, str) or not member.strip():
            raise ValueError("Binding member name must be a non-empty string")
        if not isinstance(key, str) or not key.strip():
            raise ValueError(f"Translation key for {owner.__name__}.{member} is blank")

        binding = TranslationKeyBinding(owner=owner, member=member, key=key)
        self._bindings.setdefault(owner, {})[member] = binding
        logger.debug(
            "translation_key_bound",
            owner=owner.__qualname__,
            member=member,
            key=key,
        )
        return binding

    def lookup(self, owner: type, member: str) -> Optional[str]:
        """Find the key bound to member on owner or its base classes."""
        for cls in inspect.getmro(owner):
            binding = self._bindings.get(cls, {}).get(member)
            if binding is not None:
                return binding.key
        return None

    def bindings_for(self, owner: type) -> Dict[str, str]:
        """All member -> key bindings visible on owner, subclasses winning."""
        merged: Dict[str, str] = {}
        for cls in reversed(inspect.getmro(owner)):
            for member, binding in self._bindings.get(cls, {}).items():
                merged[member] = binding.key
        return merged

    def clear(self) -> None:
        self._bindings.clear()


translation_registry = TranslationRegistry()


def translatable(registry: Optional[TranslationRegistry] = None, **member_keys: str):
    """Class decorator binding members to translation keys.

    Args:
        registry: Registry to record bindings in (default: translation_registry).
        **member_keys: member name -> translation key.

    Returns:
        Decorator returning the class unchanged.
    """

    def decorator(cls: type) -> type:
        target_registry = registry or translation_registry
        for member, key in member_keys.items():
            target_registry.bind(cls, member, key)
        return cls

    return decorator


def _own_members(target: Any) -> List[str]:
    members = list(getattr(target, "__dict__", {}))
    for cls in inspect.getmro(type(target)):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        members.extend(
            slot for slot in slots if slot not in members and hasattr(target, slot)
        )
    return members


def _resolve_member(
    translate: TranslateFn,
    member: str,
    key: str,
    options: Optional[Mapping[str, Any]],
) -> str:
    try:
        return translate(key, options)
    except Exception as e:
        raise ResolutionError(
            f'Could not resolve "{key}" for member "{member}": {e}',
            member=member,
            key=key,
        ) from e


def resolve_translations(
    target: Any,
    translate: TranslateFn,
    registry: Optional[TranslationRegistry] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> List[str]:
    """Overwrite bound members of an instance with their translations.

    Only members present on the instance are considered. A member that
    fails to resolve is logged and skipped.

    Args:
        target: Object instance.
        translate: Callable rendering (key, options) to a string.
        registry: Registry holding the bindings (default: translation_registry).
        options: Options passed to every translate call.

    Returns:
        Names of the members that were updated.
    """
    if target is None:
        logger.warning("translation_target_missing")
        return []

    registry = registry or translation_registry
    resolved = []
    for member in _own_members(target):
        key = registry.lookup(type(target), member)
        if not key:
            continue
        try:
            setattr(target, member, _resolve_member(translate, member, key, options))
            resolved.append(member)
        except Exception as e:
            logger.error(
                "translation_binding_failed",
                target=type(target).__qualname__,
                member=member,
                key=key,
                error=str(e),
            )
    return resolved


def translate_target(
    target_cls: type,
    translate: TranslateFn,
    registry: Optional[TranslationRegistry] = None,
    options: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Translate every binding declared on a class.

    Returns:
        New mapping of member name -> translated string. Members that fail to
        resolve are logged and left out.
    """
    if not isinstance(target_cls, type):
        logger.warning("translation_target_not_a_class", target=repr(target_cls))
        return {}

    registry = registry or translation_registry
    translated: Dict[str, str] = {}
    for member, key in registry.bindings_for(target_cls).items():
        try:
            translated[member] = _resolve_member(translate, member, key, options)
        except ResolutionError as e:
            logger.error(
                "translation_binding_failed",
                target=target_cls.__qualname__,
                member=member,
                key=key,
                error=str(e),
            )
    return translated
