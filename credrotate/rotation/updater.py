"""Item updater — write the new value into the item and submit it."""

from __future__ import annotations

import logging

from credrotate.vault.client import VaultClient
from credrotate.vault.models import VaultItem

logger = logging.getLogger(__name__)


def apply_value(item: VaultItem, field_id: str, new_value: str) -> bytes:
    """Set *field_id*'s value on *item* and return the serialized item."""
    target = item.get_field(field_id)
    if target is None:
        raise LookupError(f"field {field_id!r} not found in item {item}")
    target.value = new_value
    return item.to_wire()


class ItemUpdater:
    """Applies values and hands the payload to the vault unless simulating."""

    def __init__(self, client: VaultClient, *, dry_run: bool = False):
        self.client = client
        self.dry_run = dry_run

    def apply(self, item: VaultItem, field_id: str, new_value: str) -> bytes:
        payload = apply_value(item, field_id, new_value)
        if self.dry_run:
            logger.info("Dry run: not submitting %d byte update for %s", len(payload), item)
            return payload
        self.client.edit_item(item.id, payload)
        logger.info("Submitted update for %s", item)
        return payload
