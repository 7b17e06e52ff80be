"""Factory functions for creating dictionaries from configuration."""

from typing import Optional

from lexis.i18n.builder import build
from lexis.i18n.dictionary import Dictionary
from lexis.i18n.errors import BuildError
from lexis.i18n.loader import expand_sources
from lexis.i18n.models import Config
from lexis.logging import get_module_logger

logger = get_module_logger()


def create_dictionary(config: Optional[Config] = None) -> Dictionary:
    """Load and merge every source of a Config into a Dictionary.

    Args:
        config: Configuration to build from (default: Config.global_default(),
            which reads the I18N_* environment settings).

    Returns:
        Dictionary: Built dictionary

    Raises:
        SourceError: If a source file cannot be read or parsed
        TypeConflictError: If sources disagree on whether a path is a message

    Usage:
        # Environment defaults (config/locales/*.*)
        dictionary = create_dictionary()

        # Explicit configuration
        dictionary = create_dictionary(
            Config(default_locale="en").with_path_pattern("locales/*.yml")
        )
    """
    if config is None:
        config = Config.global_default()

    loaded = expand_sources(config)

    try:
        dictionary = build(
            ((source.locale, source.tree) for source in loaded),
            default_locale=config.default_locale,
            fallback_locale=config.fallback_locale,
        )
    except BuildError as e:
        logger.error("dictionary_build_failed", error=str(e))
        raise

    logger.info(
        "dictionary_created",
        source_count=len(loaded),
        locales=list(dictionary.locales),
        default_locale=dictionary.default_locale,
        fallback_locale=dictionary.fallback_locale,
    )
    return dictionary
