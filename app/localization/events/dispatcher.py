"""Instance-scoped event bus.

Handlers are registered per event name and called synchronously, in
registration order, when the event is triggered. Handlers registered on
the "*" wildcard receive the event name as their first argument.
"""

from typing import Any, Callable, Dict, List

from localization.events.models import WILDCARD_EVENT, Subscription, event_name
from localization.logging import get_module_logger

logger = get_module_logger()


class EventBus:
    """Pub-sub bus used by the engine to announce locale and translation changes.

    Usage:
        bus = EventBus()
        subscription = bus.on(I18nEvent.LOCALE_CHANGED, handle_locale_changed)
        bus.trigger(I18nEvent.LOCALE_CHANGED, "fr", translations)
        subscription.remove()
    """

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = {}

    def on(self, event: Any, handler: Callable[..., Any]) -> Subscription:
        """Subscribe a handler to an event.

        Args:
            event: Event name or I18nEvent member.
            handler: Callable invoked with the trigger arguments.

        Returns:
            Subscription whose remove() unsubscribes the handler.
        """
        return self._subscribe(event, handler, once=False)

    def once(self, event: Any, handler: Callable[..., Any]) -> Subscription:
        """Subscribe a handler that is removed after its first invocation."""
        return self._subscribe(event, handler, once=True)

    def off(self, event: Any, handler: Callable[..., Any]) -> None:
        """Unsubscribe every registration of handler for event."""
        name = event_name(event)
        remaining = [
            sub for sub in self._subscriptions.get(name, []) if sub.handler != handler
        ]
        if remaining:
            self._subscriptions[name] = remaining
        else:
            self._subscriptions.pop(name, None)

    def off_all(self) -> None:
        """Unsubscribe all handlers for all events."""
        self._subscriptions.clear()

    def get_handlers(self, event: Any) -> List[Callable[..., Any]]:
        """Get handlers currently registered for an event.

        Returns:
            List of handler callables in registration order.
        """
        return [sub.handler for sub in self._subscriptions.get(event_name(event), [])]

    def get_registered_events(self) -> List[str]:
        """Get list of event names with at least one handler."""
        return list(self._subscriptions.keys())

    def trigger(self, event: Any, *args: Any) -> List[Any]:
        """Trigger an event synchronously.

        If a handler raises an exception, it is caught and logged, and
        processing continues with remaining handlers.

        Args:
            event: Event name or I18nEvent member.
            *args: Arguments passed to every handler.

        Returns:
            List of return values from handlers that completed.
        """
        name = event_name(event)
        targets = [(sub, args) for sub in self._subscriptions.get(name, [])]
        if name != WILDCARD_EVENT:
            targets += [
                (sub, (name, *args))
                for sub in self._subscriptions.get(WILDCARD_EVENT, [])
            ]

        logger.debug("triggering_event", event_type=name, handler_count=len(targets))

        results = []
        for subscription, handler_args in targets:
            if subscription.once:
                subscription.remove()
            try:
                results.append(subscription.handler(*handler_args))
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    handler=getattr(subscription.handler, "__name__", "unknown"),
                    event_type=name,
                    error=str(e),
                )
        return results

    def _subscribe(
        self, event: Any, handler: Callable[..., Any], once: bool
    ) -> Subscription:
        if not callable(handler):
            raise TypeError(f"Event handler must be callable, got {type(handler)!r}")
        name = event_name(event)
        subscription = Subscription(
            event=name, handler=handler, once=once, _unsubscribe=self._remove
        )
        self._subscriptions.setdefault(name, []).append(subscription)
        logger.debug(
            "registered_event_handler",
            handler=getattr(handler, "__name__", "unknown"),
            event_type=name,
            total_handlers=len(self._subscriptions[name]),
        )
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions.get(subscription.event, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
        if not subscriptions:
            self._subscriptions.pop(subscription.event, None)
