"""
Vault client — the three vault operations the rotation pipeline needs.

    list_items(vault)          → [VaultItemSummary]
    get_item(item_id)          → VaultItem
    edit_item(item_id, json)   → None

``OnePasswordCLI`` drives the ``op`` binary. Any failure to run a command,
a non-zero exit status, or a response that does not parse is fatal.
"""

from __future__ import annotations

import logging
import subprocess
import threading
from abc import ABC, abstractmethod

from pydantic import TypeAdapter, ValidationError

from credrotate.errors import VaultCommandError, VaultResponseError
from credrotate.vault.models import VaultItem, VaultItemSummary

logger = logging.getLogger(__name__)

_summary_list = TypeAdapter(list[VaultItemSummary])


class VaultClient(ABC):
    """Abstract base class for vault backends."""

    @abstractmethod
    def list_items(self, vault: str) -> list[VaultItemSummary]:
        """Enumerate every item in *vault*."""

    @abstractmethod
    def get_item(self, item_id: str) -> VaultItem:
        """Fetch the full item template."""

    @abstractmethod
    def edit_item(self, item_id: str, payload: bytes) -> None:
        """Replace the item's content with the serialized *payload*."""


class OnePasswordCLI(VaultClient):
    """Vault client backed by the 1Password CLI (``op``)."""

    def __init__(self, op_bin: str = "op"):
        self.op_bin = op_bin

    def _run(self, args: list[str]) -> bytes:
        cmd = [self.op_bin, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise VaultCommandError(f"failed to run {self.op_bin}: {e}", command=cmd) from e
        if proc.returncode != 0:
            raise VaultCommandError(
                f"`{' '.join(cmd)}` failed",
                command=cmd,
                returncode=proc.returncode,
                stderr=proc.stderr.decode("utf-8", errors="replace"),
            )
        return proc.stdout

    def list_items(self, vault: str) -> list[VaultItemSummary]:
        out = self._run(["item", "list", "--vault", vault, "--format", "json"])
        try:
            items = _summary_list.validate_json(out)
        except ValidationError as e:
            raise VaultResponseError(f"failed to parse items of vault {vault}: {e}") from e
        logger.info("Vault %s lists %d item(s)", vault, len(items))
        return items

    def get_item(self, item_id: str) -> VaultItem:
        out = self._run(["item", "get", item_id, "--format", "json"])
        try:
            return VaultItem.model_validate_json(out)
        except ValidationError as e:
            raise VaultResponseError(f"failed to parse vault item {item_id}: {e}") from e

    def edit_item(self, item_id: str, payload: bytes) -> None:
        """Pipe *payload* into ``op item edit``.

        The payload is written from a separate thread while this thread waits
        on the child. Writing and waiting on the same thread can deadlock once
        the pipe buffer fills and the child blocks on its own output. The
        writer is joined before returning.
        """
        cmd = [self.op_bin, "item", "edit", item_id]
        logger.debug("Running %s (%d byte payload)", " ".join(cmd), len(payload))
        try:
            proc = subprocess.Popen(cmd, stdin=subprocess.PIPE, stdout=subprocess.DEVNULL)
        except OSError as e:
            raise VaultCommandError(f"failed to spawn {self.op_bin} edit: {e}", command=cmd) from e

        stdin = proc.stdin  # always a pipe: stdin=subprocess.PIPE
        write_errors: list[OSError] = []

        def _write() -> None:
            try:
                stdin.write(payload)
            except OSError as e:
                write_errors.append(e)
            finally:
                try:
                    stdin.close()
                except OSError as e:
                    write_errors.append(e)

        writer = threading.Thread(target=_write, name=f"op-edit-{item_id}", daemon=True)
        writer.start()
        returncode = proc.wait()
        writer.join()

        if returncode != 0:
            raise VaultCommandError(
                "1Password CLI unexpectedly exited", command=cmd, returncode=returncode
            )
        if write_errors:
            raise VaultCommandError(
                f"failed to write updated item to pipe: {write_errors[0]}", command=cmd
            )
