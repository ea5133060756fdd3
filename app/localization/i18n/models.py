"""Data structures shared by the translation engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from localization.operations import OperationResult

# Locale guaranteed to be part of the supported locales.
BASE_LOCALE = "en"

TranslationTree = Dict[str, Dict[str, Any]]


@dataclass(frozen=True)
class LocaleState:
    """Snapshot of the engine's locale state.

    Attributes:
        current_locale: Locale translations are rendered in.
        is_loading: True while a locale switch or namespace load is in flight.
        supported_locales: Locales the active locale may be persisted for.
    """

    current_locale: str
    is_loading: bool
    supported_locales: Tuple[str, ...]


@dataclass(frozen=True)
class TranslationKeyBinding:
    """Association of a class member with a translation key.

    Frozen to ensure immutability and hashability.

    Attributes:
        owner: Class declaring the member.
        member: Attribute name on instances of owner.
        key: Dotted translation scope resolved into the member.
    """

    owner: type
    member: str
    key: str


@dataclass
class NamespaceLoadReport:
    """Outcome of loading every registered namespace for a locale.

    Attributes:
        locale: Locale the namespaces were loaded for.
        translations: Aggregate dictionary {locale: merged fragments}.
        results: Per-namespace OperationResult, keyed by namespace name.
    """

    locale: str
    translations: TranslationTree
    results: Dict[str, OperationResult] = field(default_factory=dict)

    @property
    def loaded(self) -> List[str]:
        """Names of namespaces whose resolver succeeded."""
        return [name for name, result in self.results.items() if result.is_success]

    @property
    def failed(self) -> Dict[str, OperationResult]:
        """Failed namespaces and their error results."""
        return {
            name: result
            for name, result in self.results.items()
            if not result.is_success
        }

    @property
    def is_complete(self) -> bool:
        """True when every namespace loaded."""
        return not self.failed
