"""
Rotation runner — drives every credential through match, select, update.

Per credential:
    START → MATCHED → TEMPLATE_FETCHED → FIELD_SELECTED → UPDATED → REPORTED
with a jump to SKIPPED when no item matches, the item has no fields, or no
concealed field exists. Skips print a diagnostic to stderr and the run moves
on. FatalError subclasses propagate and end the run.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import StrEnum

from credrotate.credentials import Credential, CredentialBatch
from credrotate.errors import NoConcealedField, SkipCredential
from credrotate.rotation.matcher import Matcher, iter_credentials
from credrotate.rotation.selector import select_field
from credrotate.rotation.updater import ItemUpdater
from credrotate.vault.client import VaultClient
from credrotate.vault.index import VaultIndex

logger = logging.getLogger(__name__)


class RotationState(StrEnum):
    START = "start"
    MATCHED = "matched"
    TEMPLATE_FETCHED = "template_fetched"
    FIELD_SELECTED = "field_selected"
    UPDATED = "updated"
    REPORTED = "reported"
    SKIPPED = "skipped"


@dataclass
class RotationResult:
    """Outcome of one credential."""

    issuer: str
    credential: str
    state: RotationState = RotationState.START
    item_id: str = ""
    field_id: str = ""
    simulated: bool = False
    reason: str = ""  # diagnostic when skipped

    @property
    def applied(self) -> bool:
        return self.state is RotationState.REPORTED


@dataclass
class RunReport:
    results: list[RotationResult] = field(default_factory=list)

    @property
    def applied(self) -> list[RotationResult]:
        return [r for r in self.results if r.applied]

    @property
    def skipped(self) -> list[RotationResult]:
        return [r for r in self.results if r.state is RotationState.SKIPPED]


def confirmation_line(credential_name: str, field_name: str, item_label: str) -> str:
    return (
        f'placed credential "{credential_name}" into field "{field_name}" '
        f"of vault item {item_label}"
    )


class Rotator:
    """Rotates a batch of credentials into one vault."""

    def __init__(self, client: VaultClient, vault: str, *, dry_run: bool = False):
        self.client = client
        self.vault = vault
        self.dry_run = dry_run
        self.updater = ItemUpdater(client, dry_run=dry_run)

    def run(self, batch: CredentialBatch) -> RunReport:
        index = VaultIndex(self.client.list_items(self.vault))
        matcher = Matcher(self.client, index, self.vault)
        report = RunReport()

        for issuer, cred in iter_credentials(batch, on_issuer=_announce_issuer):
            result = RotationResult(issuer=issuer, credential=cred.name, simulated=self.dry_run)
            try:
                self._rotate(matcher, issuer, cred, result)
            except SkipCredential as e:
                result.state = RotationState.SKIPPED
                result.reason = str(e)
                print(e, file=sys.stderr)
            report.results.append(result)

        logger.info(
            "Rotation finished: %d applied, %d skipped%s",
            len(report.applied),
            len(report.skipped),
            " (dry run)" if self.dry_run else "",
        )
        return report

    def _rotate(
        self, matcher: Matcher, issuer: str, cred: Credential, result: RotationResult
    ) -> None:
        summary = matcher.require(issuer, cred.name)
        result.item_id = summary.id
        result.state = RotationState.MATCHED

        item = matcher.fetch(summary)
        result.state = RotationState.TEMPLATE_FETCHED

        field_id = select_field(item)
        if field_id is None:
            raise NoConcealedField(str(item))
        result.field_id = field_id
        result.state = RotationState.FIELD_SELECTED

        self.updater.apply(item, field_id, cred.value)
        result.state = RotationState.UPDATED

        target = item.get_field(field_id)
        field_name = target.display_name if target is not None else field_id
        print(confirmation_line(cred.name, field_name, str(item)))
        result.state = RotationState.REPORTED


def _announce_issuer(issuer: str) -> None:
    print(f"Issuer: {issuer}")
