"""
Matcher — pairs each incoming credential with a vault item.

A credential "API Key" from issuer "Acme" matches the first vault item whose
lower-cased title contains ``"acme api key"``. Items with overlapping titles
are not reported as ambiguous; vault order decides.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from credrotate.credentials import Credential, CredentialBatch
from credrotate.errors import NoMatchingItem
from credrotate.vault.client import VaultClient
from credrotate.vault.index import VaultIndex
from credrotate.vault.models import VaultItem, VaultItemSummary

logger = logging.getLogger(__name__)


def search_token(issuer: str, credential_name: str) -> str:
    return f"{issuer.lower()} {credential_name.lower()}"


def iter_credentials(
    batch: CredentialBatch,
    on_issuer: Callable[[str], None] | None = None,
) -> Iterator[tuple[str, Credential]]:
    """Yield ``(issuer, credential)`` in input order.

    *on_issuer* is called with the lower-cased issuer name each time a new
    issuer group begins, including groups without credentials.
    """
    for group in batch:
        issuer = group.issuer.lower()
        if on_issuer is not None:
            on_issuer(issuer)
        for cred in group.credentials:
            yield issuer, cred


class Matcher:
    def __init__(self, client: VaultClient, index: VaultIndex, vault: str):
        self.client = client
        self.index = index
        self.vault = vault

    def resolve(self, issuer: str, credential_name: str) -> VaultItemSummary | None:
        return self.index.find(search_token(issuer, credential_name))

    def require(self, issuer: str, credential_name: str) -> VaultItemSummary:
        """Like resolve(), but raises NoMatchingItem instead of returning None."""
        summary = self.resolve(issuer, credential_name)
        if summary is None:
            raise NoMatchingItem(issuer.lower(), credential_name.lower(), self.vault)
        logger.debug(
            "Matched %r/%r to item %s (%s)", issuer, credential_name, summary.id, summary.title
        )
        return summary

    def fetch(self, summary: VaultItemSummary) -> VaultItem:
        """Fetch a fresh copy of the full item template. Vault errors propagate."""
        return self.client.get_item(summary.id)

    def match(self, issuer: str, credential_name: str) -> VaultItem:
        return self.fetch(self.require(issuer, credential_name))
