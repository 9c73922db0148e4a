"""
Field selector — which field of an item receives the new secret.

Only concealed fields are candidates. In priority order:
  1. the unsectioned field with id "credential" (API Credential items)
  2. the first unsectioned concealed field
  3. the first concealed field anywhere
"""

from __future__ import annotations

from credrotate.errors import NoItemFields
from credrotate.vault.models import FieldType, VaultField, VaultItem

CREDENTIAL_FIELD_ID = "credential"


def concealed_fields(item: VaultItem) -> list[VaultField]:
    return [f for f in item.fields or [] if f.field_type is FieldType.CONCEALED]


def select_field(item: VaultItem) -> str | None:
    """Return the id of the field to overwrite, or None if there is no candidate.

    Raises NoItemFields when the item has no ``fields`` at all.
    """
    if item.fields is None:
        raise NoItemFields(str(item))

    candidates = concealed_fields(item)
    for f in candidates:
        if f.section is None and f.id == CREDENTIAL_FIELD_ID:
            return f.id
    for f in candidates:
        if f.section is None:
            return f.id
    return candidates[0].id if candidates else None
