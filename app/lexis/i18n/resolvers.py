"""Key resolution with an ordered locale fallback chain.

The chain is [requested locale, default locale, fallback locale] with
unset entries removed and duplicates dropped. The first locale holding a
message at the key path wins.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from lexis.i18n.errors import KeyNotFoundError
from lexis.i18n.keys import KeyLike, KeyPath

if TYPE_CHECKING:
    from lexis.i18n.dictionary import Dictionary
    from lexis.i18n.models import Config


def locale_chain(
    requested_locale: Optional[str],
    default_locale: str,
    fallback_locale: Optional[str] = None,
) -> List[str]:
    """Build the ordered, de-duplicated list of locales to search.

    Args:
        requested_locale: Locale asked for by the caller (if any).
        default_locale: Configured default locale.
        fallback_locale: Configured fallback locale (if any).

    Returns:
        Locales in search order.
    """
    chain: List[str] = []
    for locale in (requested_locale, default_locale, fallback_locale):
        if locale is not None and locale not in chain:
            chain.append(locale)
    return chain


def find(
    dictionary: "Dictionary",
    path: KeyPath,
    chain: List[str],
) -> Tuple[Optional[str], Optional[str]]:
    """Return the first (template, locale) hit along the chain."""
    for locale in chain:
        template = dictionary.lookup(locale, path.segments)
        if template is not None:
            return template, locale
    return None, None


def resolve(
    dictionary: "Dictionary",
    key: KeyLike,
    requested_locale: Optional[str] = None,
    config: Optional["Config"] = None,
) -> str:
    """Resolve a key to its template string.

    Args:
        dictionary: Dictionary to search.
        key: Translation key (e.g., "incident.created" or "/incident/created").
        requested_locale: Locale asked for by the caller.
        config: Supplies default and fallback locales. Defaults to those the
            dictionary was built with.

    Returns:
        Template of the first locale in the chain that holds the key.

    Raises:
        MalformedKeyError: If the key has an empty segment.
        KeyNotFoundError: If every locale of the chain misses.
    """
    path = KeyPath.parse(key)
    source = config if config is not None else dictionary
    chain = locale_chain(
        requested_locale, source.default_locale, source.fallback_locale
    )

    template, _ = find(dictionary, path, chain)
    if template is None:
        raise KeyNotFoundError(str(path), chain)
    return template
