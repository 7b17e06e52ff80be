"""i18n system - hierarchical translation lookup.

Main components:
- tree: Leaf / Node value trees built from parsed sources
- keys: KeyPath parsing of dotted or slash-separated keys
- builder: deep merge of sources into a Dictionary
- dictionary: Dictionary lookup and translate
- resolvers: locale fallback chain
- interpolation: %{name} substitution
- loader: glob expansion and JSON / YAML / TOML parsing
- factory: create_dictionary() from a Config
- service: process-wide set_config() / t() facade
"""

from lexis.i18n.builder import assign_locales, build, merge_tree
from lexis.i18n.dictionary import Dictionary
from lexis.i18n.errors import (
    BuildError,
    I18nError,
    InterpolateError,
    KeyNotFoundError,
    MalformedKeyError,
    MissingVariableError,
    ResolveError,
    SourceError,
    TypeConflictError,
)
from lexis.i18n.factory import create_dictionary
from lexis.i18n.interpolation import interpolate, placeholders
from lexis.i18n.keys import KeyPath
from lexis.i18n.loader import LoadedSource, expand_sources
from lexis.i18n.models import Config, Opts, Source, SourceKind
from lexis.i18n.resolvers import locale_chain, resolve
from lexis.i18n.service import (
    TranslationService,
    get_dictionary,
    reset,
    set_config,
    t,
    translate,
)
from lexis.i18n.tree import Leaf, Node, ValueTree, from_data

__all__ = [
    "Leaf",
    "Node",
    "ValueTree",
    "from_data",
    "KeyPath",
    "Config",
    "Opts",
    "Source",
    "SourceKind",
    "Dictionary",
    "build",
    "merge_tree",
    "assign_locales",
    "resolve",
    "locale_chain",
    "interpolate",
    "placeholders",
    "LoadedSource",
    "expand_sources",
    "create_dictionary",
    "TranslationService",
    "set_config",
    "get_dictionary",
    "reset",
    "translate",
    "t",
    "I18nError",
    "SourceError",
    "BuildError",
    "TypeConflictError",
    "ResolveError",
    "MalformedKeyError",
    "KeyNotFoundError",
    "InterpolateError",
    "MissingVariableError",
]
