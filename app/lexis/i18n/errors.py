"""Exceptions for the i18n system.

Every failure surfaced by loading, building, resolving or interpolating is a
subclass of I18nError, so callers can catch the whole family at once:

    try:
        message = dictionary.translate("incident.created", opts)
    except I18nError as e:
        logger.error("translation_failed", error=str(e))
"""

from typing import Sequence, Tuple


class I18nError(Exception):
    """Base exception for all i18n errors."""

    pass


class SourceError(I18nError):
    """Raised when a translation source cannot be read or parsed.

    Belongs to the file adapter, never to resolution: the builder only ever
    receives already-parsed trees.

    Attributes:
        source_id: Path or name of the offending source.
        reason: Human readable cause.
    """

    def __init__(self, source_id: str, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"Failed to load translation source {source_id}: {reason}")


class BuildError(I18nError):
    """Raised when loaded sources cannot be merged into a dictionary."""

    pass


class TypeConflictError(BuildError):
    """Raised when a path is a message in one source and a group in another.

    Example:
        >>> build([("en", from_data({"greeting": "Hi"})),
        ...        ("en", from_data({"greeting": {"sub": "Hey"}}))], "en")
        Traceback (most recent call last):
        ...
        TypeConflictError: Type conflict in locale 'en' at 'greeting'
    """

    def __init__(self, locale: str, path: Sequence[str]):
        self.locale = locale
        self.path: Tuple[str, ...] = tuple(path)
        super().__init__(
            f"Type conflict in locale '{locale}' at '{'.'.join(self.path) or '<root>'}'"
        )


class ResolveError(I18nError):
    """Raised when a key cannot be resolved to a template."""

    pass


class MalformedKeyError(ResolveError, ValueError):
    """Raised when a key contains an empty segment."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Malformed translation key: '{key}'")


class KeyNotFoundError(ResolveError, KeyError):
    """Raised when no locale of the fallback chain holds the key.

    Attributes:
        key: The key that was requested.
        locales_tried: Locales searched, in order.
    """

    def __init__(self, key: str, locales_tried: Sequence[str], detail: str = ""):
        self.key = key
        self.locales_tried = list(locales_tried)
        self.message = (
            f"Translation not found for key '{key}'{detail} "
            f"in locales {self.locales_tried}"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InterpolateError(I18nError):
    """Raised when a template cannot be interpolated."""

    pass


class MissingVariableError(InterpolateError, ValueError):
    """Raised when a placeholder has no supplied value."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing interpolation variable: {name}")
