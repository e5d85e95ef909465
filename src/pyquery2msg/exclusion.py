"""Prefix filter for query keys already bound from another source."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pyquery2msg._constants import PATH_SEPARATOR


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


class ExclusionFilter:
    """Set of reserved path prefixes, matched segment by segment.

    A path is excluded when any reserved prefix is a component-wise prefix
    of it: ``("book",)`` excludes ``book`` and ``book.name`` but not
    ``bookshelf``. Immutable once built, so one instance can be shared by
    concurrent binders.
    """

    def __init__(self, prefixes: Iterable[Sequence[str]] = ()) -> None:
        self._root = _Node()
        self._size = 0
        for prefix in prefixes:
            if not prefix:
                raise ValueError("exclusion prefix must have at least one segment")
            node = self._root
            for segment in prefix:
                node = node.children.setdefault(segment, _Node())
            if not node.terminal:
                node.terminal = True
                self._size += 1

    @classmethod
    def from_dotted(cls, names: Iterable[str]) -> ExclusionFilter:
        """Build a filter from dotted names such as path-template variables."""
        return cls(name.split(PATH_SEPARATOR) for name in names)

    def excludes(self, path: Sequence[str]) -> bool:
        node = self._root
        for segment in path:
            child = node.children.get(segment)
            if child is None:
                return False
            if child.terminal:
                return True
            node = child
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"ExclusionFilter(size={self._size})"
