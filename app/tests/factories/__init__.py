"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_failing_resolver,
    make_i18n,
    make_i18n_settings,
    make_resolver,
    make_slow_resolver,
    make_translations,
)

__all__ = [
    "make_failing_resolver",
    "make_i18n",
    "make_i18n_settings",
    "make_resolver",
    "make_slow_resolver",
    "make_translations",
]
