"""Ordered, tag-keyed collection of the entries one encode will write."""

from typing import Iterator, List, Optional

from tiffentries.entries import TagEntry


class DuplicateTagError(ValueError):
    """An entry was appended for a tag the collector already holds."""


class EntryCollector:
    """Entries in insertion order, at most one per tag.

    ``add`` replaces an existing entry for the same tag (the new entry
    moves to the end).  ``add_unconditional`` is for entries the caller
    knows are new and refuses duplicates outright.
    """

    def __init__(self):
        self._entries: List[TagEntry] = []

    def add(self, entry: TagEntry) -> None:
        """Insert ``entry``, removing any earlier entry with the same tag."""
        existing = self._find(entry.tag)
        if existing is not None:
            del self._entries[existing]
        self._entries.append(entry)

    def add_unconditional(self, entry: TagEntry) -> None:
        """Append ``entry``; its tag must not be present yet."""
        if self._find(entry.tag) is not None:
            raise DuplicateTagError(
                f'Tag {entry.tag} ({entry.name}) is already collected')
        self._entries.append(entry)

    def contains(self, tag: int) -> bool:
        return self._find(tag) is not None

    def get(self, tag: int) -> Optional[TagEntry]:
        index = self._find(tag)
        return None if index is None else self._entries[index]

    def snapshot(self) -> List[TagEntry]:
        """The entries in current order, as a new list."""
        return list(self._entries)

    def tags(self) -> List[int]:
        return [e.tag for e in self._entries]

    def _find(self, tag: int) -> Optional[int]:
        for i, entry in enumerate(self._entries):
            if entry.tag == tag:
                return i
        return None

    def __contains__(self, tag: int) -> bool:
        return self.contains(tag)

    def __iter__(self) -> Iterator[TagEntry]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)
