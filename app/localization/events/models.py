"""Event models for the localization event bus."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

WILDCARD_EVENT = "*"


class I18nEvent(str, Enum):
    """Notifications emitted by the translation engine."""

    TRANSLATIONS_CHANGED = "translations-changed"
    NAMESPACES_BEFORE_LOAD = "namespaces-before-load"
    NAMESPACE_LOADED = "namespace-loaded"
    NAMESPACES_LOADED = "namespaces-loaded"
    LOCALE_CHANGED = "locale-changed"


def event_name(event: Any) -> str:
    """Normalize an event identifier (enum member or plain string) to a string."""
    if isinstance(event, Enum):
        return str(event.value)
    return str(event)


@dataclass(eq=False)
class Subscription:
    """Handle returned when a handler is subscribed to an event.

    Attributes:
        event: Event name the handler listens to.
        handler: The subscribed callable.
        once: Whether the handler is removed after its first call.
    """

    event: str
    handler: Callable[..., Any]
    once: bool = False
    _unsubscribe: Optional[Callable[["Subscription"], None]] = field(
        default=None, repr=False
    )

    def remove(self) -> None:
        """Unsubscribe the handler. Safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe(self)
            self._unsubscribe = None
