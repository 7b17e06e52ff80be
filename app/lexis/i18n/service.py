"""Process-wide translation facade.

Holds one installed Dictionary. set_config() builds a new Dictionary
completely before swapping it in under a lock, so concurrent readers only
ever see a fully built Dictionary. Readers take a single reference and use
that snapshot for the whole call.

Usage:
    import lexis

    lexis.set_config(lexis.Config().with_path_pattern("config/locales/*.yml"))
    lexis.t("greeting")
    lexis.t("special-greeting", lexis.Opts().var("name", "Jacob"))

If set_config() has not been called, the first lookup installs the
dictionary described by the I18N_* environment settings.
"""

import threading
from typing import Optional

from lexis.i18n.dictionary import Dictionary
from lexis.i18n.factory import create_dictionary
from lexis.i18n.keys import KeyLike
from lexis.i18n.models import Config, Opts
from lexis.logging import get_module_logger

logger = get_module_logger()

# Installed dictionary
_installed: Optional[Dictionary] = None
_installed_lock = threading.Lock()


def set_config(config: Config) -> None:
    """Load, build and install a Dictionary for the global translate calls.

    Replaces any previously installed Dictionary. If loading or building
    fails, the previous Dictionary stays installed.

    Args:
        config: Configuration to build from.

    Raises:
        SourceError: If a source file cannot be read or parsed.
        TypeConflictError: If sources disagree on whether a path is a message.
    """
    global _installed

    dictionary = create_dictionary(config)

    with _installed_lock:
        _installed = dictionary

    logger.info("dictionary_installed", locales=list(dictionary.locales))


def get_dictionary() -> Dictionary:
    """Get the installed Dictionary.

    Thread-safe. Builds and installs the environment default on first use.

    Returns:
        Installed Dictionary.
    """
    global _installed

    dictionary = _installed
    if dictionary is None:
        with _installed_lock:
            # Double-check locking pattern
            if _installed is None:
                _installed = create_dictionary(Config.global_default())
                logger.info("default_dictionary_installed")
            dictionary = _installed

    return dictionary


def reset() -> None:
    """Drop the installed Dictionary."""
    global _installed

    with _installed_lock:
        _installed = None


def translate(key: KeyLike, opts: Optional[Opts] = None) -> str:
    """Translate a message using the installed Dictionary.

    Same as get_dictionary().translate(key, opts).
    """
    return get_dictionary().translate(key, opts)


def t(key: KeyLike, opts: Optional[Opts] = None) -> str:
    """Shortcut for translate()."""
    return translate(key, opts)


class TranslationService:
    """Class-based translation service.

    Wraps a Dictionary with a service interface to support dependency
    injection and easier testing with mocks. Without an explicit
    Dictionary it delegates to the globally installed one on every call,
    so it follows set_config() swaps.

    Usage:
        service = TranslationService()
        message = service.translate("incident.created", Opts(locale="fr"))

        service = TranslationService(create_dictionary(config))
    """

    def __init__(self, dictionary: Optional[Dictionary] = None):
        self._dictionary = dictionary

    @property
    def dictionary(self) -> Dictionary:
        """Access the underlying Dictionary."""
        return self._dictionary if self._dictionary is not None else get_dictionary()

    def translate(self, key: KeyLike, opts: Optional[Opts] = None) -> str:
        """Resolve and interpolate a message.

        Raises:
            KeyNotFoundError: If key not found in any locale of the chain
            MissingVariableError: If a placeholder has no variable
        """
        return self.dictionary.translate(key, opts)

    def has_message(self, key: KeyLike, locale: Optional[str] = None) -> bool:
        return self.dictionary.has(key, locale)

    def get_available_locales(self) -> list[str]:
        return list(self.dictionary.locales)
