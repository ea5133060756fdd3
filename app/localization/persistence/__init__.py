"""Preference persistence for the active locale."""

from localization.persistence.preferences import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)

__all__ = [
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
]
