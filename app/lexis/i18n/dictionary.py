"""The resolved, queryable translation dictionary."""

from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple, Union

from lexis.i18n.errors import KeyNotFoundError
from lexis.i18n.interpolation import interpolate
from lexis.i18n.keys import KeyLike, KeyPath
from lexis.i18n.models import Opts
from lexis.i18n.resolvers import find, locale_chain, resolve
from lexis.i18n.tree import Leaf, Node


class Dictionary:
    """Read-only container of translation trees, one per locale.

    Built by lexis.i18n.builder.build(); never mutated afterwards, so one
    instance can be shared freely between threads.

    Attributes:
        trees: Locale -> root Node (read-only mapping).
        default_locale: Locale used when a call does not request one.
        fallback_locale: Locale tried last before giving up.
    """

    def __init__(
        self,
        trees: Optional[Mapping[str, Node]] = None,
        default_locale: str = "en",
        fallback_locale: Optional[str] = None,
    ):
        self._trees = MappingProxyType(dict(trees or {}))
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale

    def __repr__(self) -> str:
        return (
            f"Dictionary(locales={self.locales!r}, "
            f"default_locale={self.default_locale!r}, "
            f"fallback_locale={self.fallback_locale!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return (
            dict(self._trees) == dict(other._trees)
            and self.default_locale == other.default_locale
            and self.fallback_locale == other.fallback_locale
        )

    @property
    def trees(self) -> Mapping[str, Node]:
        return self._trees

    @property
    def locales(self) -> Tuple[str, ...]:
        """Loaded locales, in the order they were first seen."""
        return tuple(self._trees)

    def lookup(self, locale: str, path: Union[KeyPath, Sequence[str]]) -> Optional[str]:
        """Find the template at a path in one locale only.

        Args:
            locale: Locale to search.
            path: Key path segments.

        Returns:
            Template string, or None when the locale is not loaded, the path
            is absent, or the path names a group rather than a message.
        """
        tree = self._trees.get(locale)
        if tree is None:
            return None
        value = tree.get_path(tuple(path))
        if isinstance(value, Leaf):
            return value.text
        return None

    def has(self, key: KeyLike, locale: Optional[str] = None) -> bool:
        """Check whether a key resolves through the fallback chain."""
        path = KeyPath.parse(key)
        chain = locale_chain(locale, self.default_locale, self.fallback_locale)
        template, _ = find(self, path, chain)
        return template is not None

    def resolve(self, key: KeyLike, locale: Optional[str] = None) -> str:
        """Resolve a key to its uninterpolated template."""
        return resolve(self, key, locale)

    def translate(self, key: KeyLike, opts: Optional[Opts] = None) -> str:
        """Resolve a key and interpolate its variables.

        Args:
            key: Translation key (e.g., "incident.created").
            opts: Locale, variables and default key for this call.

        Returns:
            Fully interpolated message.

        Raises:
            MalformedKeyError: If a key has an empty segment.
            KeyNotFoundError: If neither the key nor the default key resolves.
            MissingVariableError: If a placeholder has no variable.
        """
        opts = opts or Opts()

        try:
            template = resolve(self, key, opts.locale)
        except KeyNotFoundError as e:
            if opts.default_key is None:
                raise
            try:
                template = resolve(self, opts.default_key, opts.locale)
            except KeyNotFoundError:
                raise KeyNotFoundError(
                    e.key,
                    e.locales_tried,
                    detail=f" (default key '{KeyPath.parse(opts.default_key)}')",
                ) from e

        return interpolate(template, opts.variables)
