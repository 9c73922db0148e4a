"""Tests for VaultIndex."""

from __future__ import annotations

from credrotate.vault.index import VaultIndex
from credrotate.vault.models import VaultItemSummary


def _summaries(*titles: str) -> list[VaultItemSummary]:
    return [VaultItemSummary(id=str(i), title=t) for i, t in enumerate(titles, start=1)]


class TestVaultIndex:
    def test_titles_lowercased(self):
        index = VaultIndex(_summaries("Acme API Key", "GitHub TOKEN"))
        assert [s.title for s in index] == ["acme api key", "github token"]

    def test_source_summaries_untouched(self):
        source = _summaries("Acme API Key")
        VaultIndex(source)
        assert source[0].title == "Acme API Key"

    def test_find_substring(self):
        index = VaultIndex(_summaries("Prod: Acme API Key (rotated)"))
        found = index.find("acme api key")
        assert found is not None
        assert found.id == "1"

    def test_find_first_wins(self):
        index = VaultIndex(_summaries("acme api key staging", "acme api key prod"))
        found = index.find("acme api key")
        assert found is not None
        assert found.id == "1"

    def test_find_none(self):
        index = VaultIndex(_summaries("Other"))
        assert index.find("acme api key") is None

    def test_len(self):
        assert len(VaultIndex(_summaries("a", "b", "c"))) == 3
        assert len(VaultIndex([])) == 0
