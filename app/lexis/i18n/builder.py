"""Merge parsed translation trees into a Dictionary.

Sources are merged in order. Groups are merged key by key; when two
sources define the same message the later one wins. A path that is a
message in one source and a group in another is an error.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from lexis.i18n.dictionary import Dictionary
from lexis.i18n.errors import TypeConflictError
from lexis.i18n.tree import Leaf, Node, ValueTree, from_data


def assign_locales(
    hint: Optional[str],
    seen: Sequence[str],
    default_locale: str,
) -> List[str]:
    """Decide which locales a source contributes to.

    Args:
        hint: Locale declared by the source, if any.
        seen: Locales already loaded, in first-seen order.
        default_locale: Configured default locale.

    Returns:
        [hint] when the source declares a locale; otherwise every locale
        already seen, or [default_locale] when none has been seen yet.
    """
    if hint is not None:
        return [hint]
    if seen:
        return list(seen)
    return [default_locale]


def merge_tree(
    accumulator: Node,
    incoming: ValueTree,
    locale: str,
    path: Tuple[str, ...] = (),
) -> Node:
    """Deep merge incoming into accumulator, returning a new Node.

    Args:
        accumulator: Tree built from earlier sources.
        incoming: Tree of the source being merged.
        locale: Locale being built (for error reporting).
        path: Segments leading to accumulator (for error reporting).

    Returns:
        Merged tree.

    Raises:
        TypeConflictError: If a path is a Leaf on one side and a Node on the other.
    """
    if not isinstance(incoming, Node):
        raise TypeConflictError(locale, path)

    merged: Dict[str, ValueTree] = dict(accumulator.children)
    for key, value in incoming.children.items():
        current = merged.get(key)
        if current is None:
            merged[key] = value
        elif isinstance(current, Node) and isinstance(value, Node):
            merged[key] = merge_tree(current, value, locale, path + (key,))
        elif isinstance(current, Leaf) and isinstance(value, Leaf):
            merged[key] = value
        else:
            raise TypeConflictError(locale, path + (key,))
    return Node(merged)


def build(
    sources: Iterable[Tuple[Optional[str], object]],
    default_locale: str = "en",
    fallback_locale: Optional[str] = None,
) -> Dictionary:
    """Build a Dictionary from (locale, tree) pairs.

    Args:
        sources: Pairs of optional locale and value tree (or parsed data,
            converted with from_data).
        default_locale: Default locale of the resulting Dictionary.
        fallback_locale: Fallback locale of the resulting Dictionary.

    Returns:
        New Dictionary.

    Raises:
        TypeConflictError: If sources disagree on whether a path is a message.
        ValueError: If parsed data holds an unsupported value type.
    """
    trees: Dict[str, Node] = {}

    for hint, data in sources:
        tree = from_data(data)
        for locale in assign_locales(hint, list(trees), default_locale):
            trees[locale] = merge_tree(trees.get(locale, Node()), tree, locale)

    return Dictionary(trees, default_locale=default_locale, fallback_locale=fallback_locale)
