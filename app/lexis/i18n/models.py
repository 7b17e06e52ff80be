"""Value objects for configuring dictionaries and translate calls."""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Tuple, Union

from lexis.i18n.keys import KeyLike

if TYPE_CHECKING:
    from lexis.configuration import Settings


class SourceKind(str, Enum):
    """Where a translation source comes from."""

    PATTERN = "pattern"
    PATH = "path"
    TREE = "tree"


@dataclass(frozen=True)
class Source:
    """One entry of a Config's source list.

    Attributes:
        kind: Glob pattern, explicit file path, or in-memory tree.
        location: Glob pattern or file path (unused for trees).
        locale: Locale the source belongs to. None lets the loader derive it
            (file stem for patterns) or the builder assign it (trees).
        data: Parsed data for in-memory trees.
    """

    kind: SourceKind
    location: Optional[str] = None
    locale: Optional[str] = None
    data: Any = None

    @property
    def source_id(self) -> str:
        if self.kind == SourceKind.TREE:
            return f"<tree:{self.locale or '*'}>"
        return str(self.location)


@dataclass(frozen=True)
class Config:
    """Immutable configuration for building a Dictionary.

    Sources are loaded in the order they were added; later sources win
    when they define the same key.

    Attributes:
        sources: Ordered translation sources.
        default_locale: Locale used when a call does not request one.
        fallback_locale: Locale tried last before giving up.

    Example:
        config = (
            Config(default_locale="en", fallback_locale="de")
            .with_path_pattern("config/locales/*.yml")
            .with_localized_path("fr", "extra/french.json")
        )
    """

    sources: Tuple[Source, ...] = ()
    default_locale: str = "en"
    fallback_locale: Optional[str] = None

    def with_path_pattern(self, pattern: str) -> "Config":
        """Add every file matching a glob pattern.

        The locale of each file is the last dot-separated part of its stem:
        "en.yml" -> "en", "incident.fr-FR.yml" -> "fr-FR".
        """
        return self._add(Source(SourceKind.PATTERN, location=str(pattern)))

    def with_localized_path(self, locale: str, path: Union[str, Path]) -> "Config":
        """Add messages for a specific locale from a specific file."""
        return self._add(Source(SourceKind.PATH, location=str(path), locale=locale))

    def with_tree(self, data: Any, locale: Optional[str] = None) -> "Config":
        """Add already-parsed translations.

        Without a locale the tree applies to every locale loaded before it,
        or to the default locale when none has been loaded yet.
        """
        return self._add(Source(SourceKind.TREE, locale=locale, data=data))

    def with_default_locale(self, locale: str) -> "Config":
        return replace(self, default_locale=locale)

    def with_fallback_locale(self, locale: Optional[str]) -> "Config":
        return replace(self, fallback_locale=locale)

    def _add(self, source: Source) -> "Config":
        return replace(self, sources=self.sources + (source,))

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Config":
        """Build the configuration described by environment settings."""
        return cls(
            default_locale=settings.i18n.DEFAULT_LOCALE,
            fallback_locale=settings.i18n.FALLBACK_LOCALE,
        ).with_path_pattern(settings.i18n.PATH_PATTERN)

    @classmethod
    def global_default(cls) -> "Config":
        """Configuration used when no Config has been installed."""
        from lexis.configuration import settings

        return cls.from_settings(settings)


@dataclass(frozen=True)
class Opts:
    """Options for a translate call.

    Attributes:
        locale: Locale to translate to, tried before the default locale.
        variables: Values for %{name} placeholders.
        default_key: Key to use when the requested key is missing everywhere.

    Example:
        Opts(locale="de").var("name", "Jacob")
        Opts(variables={"name": "Jacob", "count": 3})
    """

    locale: Optional[str] = None
    variables: Mapping[str, Any] = field(default_factory=dict)
    default_key: Optional[KeyLike] = None

    # Variables and sequence keys may hold unhashable values.
    __hash__ = None

    def __post_init__(self):
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    def with_locale(self, locale: str) -> "Opts":
        return replace(self, locale=locale)

    def with_default_key(self, default_key: KeyLike) -> "Opts":
        return replace(self, default_key=default_key)

    def var(self, name: str, value: Any) -> "Opts":
        """Return a copy with one more variable set."""
        return self.vars({name: value})

    def vars(self, variables: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "Opts":
        """Return a copy with several more variables set."""
        merged = dict(self.variables)
        merged.update(variables or {})
        merged.update(kwargs)
        return replace(self, variables=merged)
