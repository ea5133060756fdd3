"""Localization engine - locale switching, namespace loading and translation.

Subpackages:
- configuration: pydantic settings for the engine
- logging: structlog configuration and module loggers
- events: instance-scoped pub-sub bus used for change notifications
- operations: uniform result types for load outcomes
- persistence: preference stores for the active locale
- i18n: the translation engine
"""
