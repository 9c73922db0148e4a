"""
Exception classes for credrotate.

Two severities:
  - FatalError — aborts the whole run (bad input file, vault command failure,
    unparsable vault response).
  - SkipCredential — recoverable; the current credential is skipped and the
    run continues with the next one.
"""

from __future__ import annotations


class CredrotateError(Exception):
    """Base class for all credrotate errors."""


class FatalError(CredrotateError):
    """Stops all further processing."""


class CredentialsFileError(FatalError):
    """Raised when the credentials file cannot be read or is malformed."""


class VaultCommandError(FatalError):
    """Raised when a vault command cannot be spawned or exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ):
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr

        full_msg = message
        if returncode is not None:
            full_msg += f" (exit status {returncode})"
        if stderr.strip():
            full_msg += f": {stderr.strip()}"
        super().__init__(full_msg)


class VaultResponseError(FatalError):
    """Raised when a vault response does not match the expected JSON shape."""


class SkipCredential(CredrotateError):
    """A single credential cannot be applied; the run carries on."""


class NoMatchingItem(SkipCredential):
    def __init__(self, issuer: str, credential: str, vault: str):
        self.issuer = issuer
        self.credential = credential
        self.vault = vault
        super().__init__(
            f"warn: {{issuer={issuer},cred={credential}}} not found in vault {vault}, skipping"
        )


class NoItemFields(SkipCredential):
    def __init__(self, item_label: str):
        self.item_label = item_label
        super().__init__(f"warn: item {item_label} has no fields, skipping")


class NoConcealedField(SkipCredential):
    def __init__(self, item_label: str):
        self.item_label = item_label
        super().__init__(f"unable to find credential field in item {item_label}")
