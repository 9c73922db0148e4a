"""
Vault access — 1Password item models, the ``op`` CLI client, and the title index.

Public API:
    OnePasswordCLI(op_bin).list_items(vault)   → [VaultItemSummary]
    OnePasswordCLI(op_bin).get_item(item_id)   → VaultItem
    OnePasswordCLI(op_bin).edit_item(id, json) → None
    VaultIndex(summaries).find(token)          → VaultItemSummary or None
"""

from __future__ import annotations

from credrotate.vault.client import OnePasswordCLI, VaultClient
from credrotate.vault.index import VaultIndex
from credrotate.vault.models import (
    FieldSectionRef,
    FieldType,
    ItemSection,
    VaultField,
    VaultItem,
    VaultItemSummary,
)

__all__ = [
    "FieldSectionRef",
    "FieldType",
    "ItemSection",
    "OnePasswordCLI",
    "VaultClient",
    "VaultField",
    "VaultIndex",
    "VaultItem",
    "VaultItemSummary",
]
