"""
Test fixtures for the rotation pipeline.

FakeVault stands in for the ``op`` CLI: items are kept as raw JSON so every
get returns a fresh VaultItem, and edits are recorded instead of applied.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from credrotate.credentials import Credential, CredentialBatch, IssuerGroup
from credrotate.vault.client import VaultClient
from credrotate.vault.models import VaultItem, VaultItemSummary


class FakeVault(VaultClient):
    def __init__(self, items: list[dict[str, Any]] | None = None):
        self.items: list[dict[str, Any]] = items or []
        self.gets: list[str] = []
        self.edits: list[tuple[str, bytes]] = []

    def list_items(self, vault: str) -> list[VaultItemSummary]:
        return [VaultItemSummary(id=i["id"], title=i["title"]) for i in self.items]

    def get_item(self, item_id: str) -> VaultItem:
        self.gets.append(item_id)
        raw = next(i for i in self.items if i["id"] == item_id)
        return VaultItem.model_validate_json(json.dumps(raw))

    def edit_item(self, item_id: str, payload: bytes) -> None:
        self.edits.append((item_id, payload))


def make_item(
    item_id: str = "1",
    title: str = "Acme api key prod",
    fields: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    item: dict[str, Any] = {"id": item_id, "title": title, "category": "API_CREDENTIAL"}
    if fields is not None:
        item["fields"] = fields
    item.update(extra)
    return item


def concealed(field_id: str, section: str | None = None, **extra: Any) -> dict[str, Any]:
    f: dict[str, Any] = {"id": field_id, "type": "CONCEALED", "reference": f"op://v/i/{field_id}"}
    if section is not None:
        f["section"] = {"id": section}
    f.update(extra)
    return f


@pytest.fixture
def acme_batch() -> CredentialBatch:
    return CredentialBatch(
        issuers=[
            IssuerGroup(issuer="Acme", credentials=[Credential(name="API Key", value="secretXYZ")])
        ]
    )


@pytest.fixture
def fake_vault() -> FakeVault:
    return FakeVault([make_item(fields=[concealed("credential")])])


@pytest.fixture
def vault_factory():
    return FakeVault


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def concealed_field():
    return concealed
