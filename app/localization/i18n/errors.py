"""Exceptions raised by the translation engine.

Configuration errors are raised from coroutines, so callers observe them
when awaiting load_namespace()/load_namespaces()/set_locale(). Resolution
errors are caught and logged by the translation binder.
"""


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            await i18n.load_namespace("common")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ConfigurationError(I18nError):
    """Raised when the engine is asked to do something it is not set up for."""

    pass


class InvalidNamespaceError(ConfigurationError):
    """Raised when no resolver is registered under a namespace name.

    Example:
        >>> await i18n.load_namespace("missing", "en")
        Traceback (most recent call last):
        ...
        InvalidNamespaceError: Invalid namespace or resolver for namespace "missing".
    """

    pass


class InvalidLocaleError(ConfigurationError):
    """Raised when no locale can be determined for an operation."""

    pass


class ResolutionError(I18nError):
    """Raised when a bound member cannot be resolved to a translation.

    Attributes:
        member: Name of the member being resolved.
        key: Translation key bound to the member.
    """

    def __init__(self, message: str, member: str = "", key: str = ""):
        super().__init__(message)
        self.member = member
        self.key = key
