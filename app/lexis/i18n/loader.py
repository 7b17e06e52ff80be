"""Translation source loading.

Expands the sources of a Config into (source_id, locale_hint, tree)
triples. Handles glob expansion and JSON, YAML and TOML parsing; the
builder never sees files or bytes.
"""

import glob
import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from lexis.i18n.errors import SourceError
from lexis.i18n.models import Config, Source, SourceKind
from lexis.i18n.tree import ValueTree, from_data
from lexis.logging import get_module_logger

logger = get_module_logger()


def _parse_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _parse_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


PARSERS: Dict[str, Callable[[Path], Any]] = {
    ".json": _parse_json,
    ".yml": _parse_yaml,
    ".yaml": _parse_yaml,
    ".toml": _parse_toml,
}

PARSE_ERRORS = (
    json.JSONDecodeError,
    yaml.YAMLError,
    tomllib.TOMLDecodeError,
    UnicodeDecodeError,
)


@dataclass(frozen=True)
class LoadedSource:
    """A parsed translation source ready for the builder.

    Attributes:
        source_id: File path or in-memory tree label.
        locale: Locale hint, or None when the source declares none.
        tree: Parsed value tree.
    """

    source_id: str
    locale: Optional[str]
    tree: ValueTree


def locale_from_path(path: Path) -> str:
    """Derive a locale from a file name.

    Uses the last dot-separated part of the stem (e.g., "incident.en-US.yml"
    -> "en-US", "de.json" -> "de").
    """
    return path.stem.split(".")[-1]


def parse_file(path: Path) -> Any:
    """Parse a translation file according to its extension.

    Args:
        path: File to parse.

    Returns:
        Parsed data (None for an empty YAML file).

    Raises:
        SourceError: If the extension is not supported, or the file cannot
            be read or parsed.
    """
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise SourceError(str(path), f"unsupported file type '{path.suffix}'")

    try:
        return parser(path)
    except OSError as e:
        logger.error("translation_file_unreadable", file=str(path), error=str(e))
        raise SourceError(str(path), str(e)) from e
    except PARSE_ERRORS as e:
        logger.error("translation_file_parse_error", file=str(path), error=str(e))
        raise SourceError(str(path), f"invalid {path.suffix.lstrip('.')}: {e}") from e


def _to_tree(source_id: str, data: Any) -> ValueTree:
    try:
        return from_data(data)
    except ValueError as e:
        raise SourceError(source_id, str(e)) from e


def _load_file(path: Path, locale: Optional[str]) -> Optional[LoadedSource]:
    if path.suffix.lower() not in PARSERS:
        logger.warning("unsupported_translation_file", file=str(path))
        return None
    data = parse_file(path)
    return LoadedSource(str(path), locale, _to_tree(str(path), data))


def expand_source(source: Source) -> List[LoadedSource]:
    """Load a single configured source.

    Args:
        source: Pattern, path or tree source.

    Returns:
        Loaded sources, in deterministic (sorted path) order for patterns.

    Raises:
        SourceError: If a file is missing, unreadable or malformed.
    """
    if source.kind == SourceKind.TREE:
        tree = _to_tree(source.source_id, source.data)
        return [LoadedSource(source.source_id, source.locale, tree)]

    if source.kind == SourceKind.PATH:
        path = Path(source.location)
        if not path.is_file():
            logger.error("translation_file_not_found", file=str(path))
            raise SourceError(str(path), "file not found")
        loaded = _load_file(path, source.locale)
        return [loaded] if loaded else []

    results = []
    matches = sorted(glob.glob(source.location, recursive=True))
    for match in matches:
        path = Path(match)
        if not path.is_file():
            continue
        loaded = _load_file(path, source.locale or locale_from_path(path))
        if loaded:
            results.append(loaded)

    logger.info(
        "expanded_path_pattern",
        pattern=source.location,
        match_count=len(matches),
        file_count=len(results),
    )
    return results


def expand_sources(config: Config) -> List[LoadedSource]:
    """Load every source of a Config in order."""
    loaded: List[LoadedSource] = []
    for source in config.sources:
        loaded.extend(expand_source(source))
    return loaded
