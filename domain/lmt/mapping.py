"""Tag -> source identifier table with the no-duplicate-tag invariant."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.errors import DuplicateTagMapping


class MappingBuilder:
    """
    Accumulates tag -> termID entries.

    Term tags, nested term tags and group tags share one namespace; a tag can be
    registered exactly once.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})

    def register(self, tag: str, node_id: str) -> None:
        """
        Add one entry.

        Raises:
            DuplicateTagMapping: If the tag is already mapped
        """
        existing = self._entries.get(tag)
        if existing is not None:
            raise DuplicateTagMapping(tag, node_id, existing)
        self._entries[tag] = node_id

    def register_all(self, entries: Iterable[tuple[str, str]]) -> None:
        for tag, node_id in entries:
            self.register(tag, node_id)

    def freeze(self) -> Mapping[str, str]:
        """Read-only snapshot of the current entries."""
        return MappingProxyType(dict(self._entries))
