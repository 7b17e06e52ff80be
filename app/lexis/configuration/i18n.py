"""Translation lookup settings."""

from typing import Optional

from pydantic import Field, field_validator

from lexis.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Defaults for the globally installed dictionary.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a call names none (default: en)
        I18N_FALLBACK_LOCALE: Last locale tried before giving up (default: unset)
        I18N_PATH_PATTERN: Glob pattern of translation files
            (default: config/locales/*.*)

    Example:
        ```python
        from lexis.configuration import settings

        default_locale = settings.i18n.DEFAULT_LOCALE
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: Optional[str] = Field(default=None, alias="I18N_FALLBACK_LOCALE")
    PATH_PATTERN: str = Field(default="config/locales/*.*", alias="I18N_PATH_PATTERN")

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def validate_default_locale(cls, value: str) -> str:
        """Reject an empty default locale."""
        if not value.strip():
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return value

    @field_validator("FALLBACK_LOCALE", mode="before")
    @classmethod
    def empty_fallback_is_unset(cls, value):
        """Treat an empty I18N_FALLBACK_LOCALE as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value
