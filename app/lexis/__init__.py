"""lexis - hierarchical translation lookup with locale fallback.

Example:
    ```python
    import lexis

    lexis.set_config(
        lexis.Config().with_path_pattern("config/locales/*.yml")
    )
    lexis.t("greeting")
    lexis.t("special-greeting", lexis.Opts().var("name", "Jacob"))
    ```
"""

from lexis.i18n import (
    Config,
    Dictionary,
    I18nError,
    Opts,
    get_dictionary,
    reset,
    set_config,
    t,
    translate,
)

__all__ = [
    "Config",
    "Dictionary",
    "I18nError",
    "Opts",
    "get_dictionary",
    "reset",
    "set_config",
    "t",
    "translate",
]
