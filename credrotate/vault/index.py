"""Vault index — item summaries with lower-cased titles for substring search."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from credrotate.vault.models import VaultItemSummary


class VaultIndex:
    """Read-only list of summaries in vault order, titles lower-cased."""

    def __init__(self, summaries: Iterable[VaultItemSummary]):
        self._items: tuple[VaultItemSummary, ...] = tuple(
            s.model_copy(update={"title": s.title.lower()}) for s in summaries
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[VaultItemSummary]:
        return iter(self._items)

    def find(self, token: str) -> VaultItemSummary | None:
        """First summary whose title contains *token*. Ties go to vault order."""
        for item in self._items:
            if token in item.title:
                return item
        return None
