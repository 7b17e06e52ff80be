"""Translation key paths.

Keys are hierarchical and may use either "." or "/" as separator:
"incident.created", "incident/created" and "/incident/created" all name
the same message.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from lexis.i18n.errors import MalformedKeyError

SEPARATORS = re.compile(r"[./]")


@dataclass(frozen=True)
class KeyPath:
    """Parsed translation key.

    Frozen to ensure immutability and hashability.

    Attributes:
        segments: Ordered path segments, none of them empty.
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @classmethod
    def parse(cls, key: "KeyLike") -> "KeyPath":
        """Create a KeyPath from a string or a sequence of segments.

        A single leading separator is stripped from string keys.

        Args:
            key: Dotted or slash-separated string, sequence of segments,
                or an existing KeyPath.

        Returns:
            KeyPath instance.

        Raises:
            MalformedKeyError: If any segment is empty.
        """
        if isinstance(key, KeyPath):
            return key

        if isinstance(key, str):
            raw = key[1:] if key[:1] in (".", "/") else key
            segments = tuple(SEPARATORS.split(raw))
            label = key
        else:
            segments = tuple(key)
            label = ".".join(segments)

        if not segments or any(not segment for segment in segments):
            raise MalformedKeyError(label)
        return cls(segments)

    def chain(self, other: "KeyLike") -> "KeyPath":
        """Append another key to this one.

        Example:
            >>> str(KeyPath.parse("menu").chain("items.0"))
            'menu.items.0'
        """
        return KeyPath(self.segments + KeyPath.parse(other).segments)


KeyLike = Union[str, KeyPath, Iterable[str]]
