"""Event system - instance-scoped pub-sub bus.

Usage:

    from localization.events import EventBus, I18nEvent

    bus = EventBus()

    def handle_locale_changed(locale, translations):
        ...

    bus.on(I18nEvent.LOCALE_CHANGED, handle_locale_changed)
    bus.trigger(I18nEvent.LOCALE_CHANGED, "fr", {"fr": {}})
"""

from localization.events.dispatcher import EventBus
from localization.events.models import (
    WILDCARD_EVENT,
    I18nEvent,
    Subscription,
    event_name,
)

__all__ = [
    "EventBus",
    "I18nEvent",
    "Subscription",
    "WILDCARD_EVENT",
    "event_name",
]
