"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)
"""

from lexis.configuration.i18n import I18nSettings
from lexis.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
