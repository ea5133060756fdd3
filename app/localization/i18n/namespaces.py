"""Namespace resolver registry and loading protocol.

A namespace is a named bundle of translations fetched for one locale by a
resolver: any callable taking a locale and returning a mapping, either
directly or as an awaitable.

Usage:
    async def load_common(locale: str) -> dict:
        return await fetch_json(f"/i18n/{locale}/common.json")

    loader.register("common", load_common)
    dictionary = await loader.load("common", "en")
    report = await loader.load_all("en")
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from localization.configuration import I18nSettings
from localization.events import EventBus, I18nEvent
from localization.i18n.errors import InvalidLocaleError, InvalidNamespaceError
from localization.i18n.models import NamespaceLoadReport, TranslationTree
from localization.logging import get_module_logger
from localization.operations import OperationResult

logger = get_module_logger()

NamespaceResolver = Callable[
    [str], Union[Mapping[str, Any], Awaitable[Mapping[str, Any]]]
]


class NamespaceLoader:
    """Loads registered namespaces and merges them into the translation tree.

    Attributes:
        settings: Engine settings (concurrency bound, timeout, emit delay).
        events: Bus receiving namespace-loaded and namespaces-loaded.
    """

    def __init__(
        self,
        store: Callable[[TranslationTree], None],
        events: EventBus,
        settings: I18nSettings,
    ):
        """Initialize the loader.

        Args:
            store: Callable merging a {locale: fragment} dictionary into the tree.
            events: Event bus used for load notifications.
            settings: Engine settings.
        """
        self._store = store
        self._resolvers: Dict[str, NamespaceResolver] = {}
        self.events = events
        self.settings = settings

    @property
    def names(self) -> List[str]:
        """Registered namespace names, in registration order."""
        return list(self._resolvers)

    def has_resolver(self, name: str) -> bool:
        return name in self._resolvers

    def register(self, name: str, resolver: NamespaceResolver) -> bool:
        """Register or replace the resolver of a namespace.

        Invalid arguments are logged and ignored.

        Returns:
            True if the resolver was registered.
        """
        if not isinstance(name, str) or not name.strip() or not callable(resolver):
            logger.warning(
                "invalid_namespace_resolver",
                namespace=repr(name),
                resolver=repr(resolver),
            )
            return False
        if name in self._resolvers:
            logger.info("namespace_resolver_replaced", namespace=name)
        self._resolvers[name] = resolver
        return True

    async def load(
        self, name: str, locale: Optional[str], update_translations: bool = True
    ) -> TranslationTree:
        """Fetch one namespace for a locale.

        Args:
            name: Registered namespace name.
            locale: Locale to fetch.
            update_translations: Merge the result into the tree.

        Returns:
            Dictionary {locale: fragment}.

        Raises:
            InvalidNamespaceError: If no resolver is registered under name.
            InvalidLocaleError: If locale is blank.
        """
        if not isinstance(name, str) or name not in self._resolvers:
            raise InvalidNamespaceError(
                f'Invalid namespace or resolver for namespace "{name}".'
            )
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidLocaleError(
                f'Locale is not set. Cannot load namespace "{name}".'
            )

        fragment = await self._fetch(name, locale)
        dictionary = {locale: dict(fragment or {})}
        if fragment is not None:
            if update_translations:
                self._store(dictionary)
            self.events.trigger(I18nEvent.NAMESPACE_LOADED, name, locale, dictionary)
            logger.info(
                "namespace_loaded",
                namespace=name,
                locale=locale,
                key_count=len(dictionary[locale]),
            )
        return dictionary

    async def load_all(
        self, locale: Optional[str], update_translations: bool = True
    ) -> NamespaceLoadReport:
        """Fetch every registered namespace for a locale concurrently.

        At most settings.namespace_max_concurrency resolvers run at once.
        Resolvers still running when settings.namespace_load_timeout_seconds
        elapses are cancelled. A failing resolver does not stop the others;
        its failure, like a resolver returning no mapping, is recorded in the
        report. Successful fragments are merged in registration order.

        Args:
            locale: Locale to fetch.
            update_translations: Merge the aggregate into the tree.

        Returns:
            NamespaceLoadReport with the aggregate and per-namespace results.

        Raises:
            InvalidLocaleError: If locale is blank.
        """
        if not isinstance(locale, str) or not locale.strip():
            raise InvalidLocaleError("Locale is not set. Cannot load namespaces.")

        names = self.names
        semaphore = asyncio.Semaphore(self.settings.namespace_max_concurrency)

        async def _bounded_fetch(name: str) -> Optional[Mapping[str, Any]]:
            async with semaphore:
                return await self._fetch(name, locale)

        tasks = {name: asyncio.ensure_future(_bounded_fetch(name)) for name in names}
        if tasks:
            try:
                _, pending = await asyncio.wait(
                    tasks.values(),
                    timeout=self.settings.namespace_load_timeout_seconds,
                )
            finally:
                for task in tasks.values():
                    if not task.done():
                        task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        results = {name: self._outcome(name, locale, task) for name, task in tasks.items()}

        aggregate: Dict[str, Any] = {}
        for name in names:
            if results[name].is_success:
                aggregate.update(results[name].data or {})
        dictionary = {locale: aggregate}

        if update_translations:
            self._store(dictionary)

        report = NamespaceLoadReport(
            locale=locale, translations=dictionary, results=results
        )
        logger.info(
            "namespaces_loaded",
            locale=locale,
            loaded=report.loaded,
            failed=list(report.failed),
        )

        await asyncio.sleep(self.settings.namespaces_loaded_delay_seconds)
        self.events.trigger(I18nEvent.NAMESPACES_LOADED, locale, dictionary)
        return report

    async def _fetch(self, name: str, locale: str) -> Optional[Mapping[str, Any]]:
        result = self._resolvers[name](locale)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, Mapping):
            logger.warning(
                "invalid_namespace_fragment",
                namespace=name,
                locale=locale,
                expected="dict",
                received=type(result).__name__,
            )
            return None
        return result

    def _outcome(self, name: str, locale: str, task: "asyncio.Future") -> OperationResult:
        if task.cancelled():
            logger.warning(
                "namespace_load_timed_out",
                namespace=name,
                locale=locale,
                timeout_seconds=self.settings.namespace_load_timeout_seconds,
            )
            return OperationResult.transient_error(
                f'Namespace "{name}" did not load within '
                f"{self.settings.namespace_load_timeout_seconds}s",
                error_code="namespace_load_timeout",
            )
        error = task.exception()
        if error is not None:
            logger.error(
                "namespace_load_failed",
                namespace=name,
                locale=locale,
                error=str(error),
            )
            return OperationResult.from_exception(
                error,
                error_code="namespace_load_failed",
                message=f'Namespace "{name}" failed to load',
            )
        fragment = task.result()
        if fragment is None:
            return OperationResult.permanent_error(
                f'Namespace "{name}" did not resolve to a mapping',
                error_code="namespace_invalid_fragment",
            )
        return OperationResult.success(
            data=dict(fragment), message=f'Namespace "{name}" loaded'
        )
