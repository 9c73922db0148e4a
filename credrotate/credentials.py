"""
Credential source — the batch of new secret values to rotate in.

The input document has a single ``issuers`` list, each entry holding the
issuer name and its ordered credentials:

    [[issuers]]
    issuer = "Acme"
    credentials = [
        { name = "API Key", value = "..." },
    ]

TOML is the primary format. JSON and YAML documents with the same shape are
accepted based on the file suffix.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from credrotate.errors import CredentialsFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """A named secret and its new value. The value never appears in repr()."""

    name: str
    value: str = field(repr=False)


@dataclass(frozen=True)
class IssuerGroup:
    issuer: str
    credentials: list[Credential] = field(default_factory=list)


@dataclass(frozen=True)
class CredentialBatch:
    """Ordered issuer groups. Always holds at least one group."""

    issuers: list[IssuerGroup]

    def __post_init__(self) -> None:
        if not self.issuers:
            raise CredentialsFileError("no issuers of new credentials found")

    def __iter__(self) -> Iterator[IssuerGroup]:
        return iter(self.issuers)

    def __len__(self) -> int:
        return len(self.issuers)

    @classmethod
    def from_dict(cls, data: Any) -> CredentialBatch:
        """Build a batch from a parsed document, validating its shape."""
        if not isinstance(data, dict):
            raise CredentialsFileError("credentials document must be a table/object")
        raw_issuers = data.get("issuers")
        if not isinstance(raw_issuers, list):
            raise CredentialsFileError("credentials document is missing the 'issuers' list")

        groups: list[IssuerGroup] = []
        for i, raw in enumerate(raw_issuers):
            where = f"issuers[{i}]"
            if not isinstance(raw, dict) or not isinstance(raw.get("issuer"), str):
                raise CredentialsFileError(f"{where}: 'issuer' must be a string")
            raw_creds = raw.get("credentials")
            if not isinstance(raw_creds, list):
                raise CredentialsFileError(f"{where}: 'credentials' must be a list")

            creds: list[Credential] = []
            for j, cred in enumerate(raw_creds):
                if not isinstance(cred, dict):
                    raise CredentialsFileError(f"{where}.credentials[{j}]: expected a table")
                name, value = cred.get("name"), cred.get("value")
                if not isinstance(name, str) or not isinstance(value, str):
                    raise CredentialsFileError(
                        f"{where}.credentials[{j}]: 'name' and 'value' must be strings"
                    )
                creds.append(Credential(name=name, value=value))
            groups.append(IssuerGroup(issuer=raw["issuer"], credentials=creds))

        return cls(issuers=groups)


def _parse(text: str, suffix: str) -> Any:
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return tomllib.loads(text)


def load_batch(path: Path | str) -> CredentialBatch:
    """Read and parse the credentials file at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsFileError(f"failed to read credentials file {path}: {e}") from e

    try:
        data = _parse(text, path.suffix.lower())
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CredentialsFileError(f"failed to parse credentials file {path}: {e}") from e

    batch = CredentialBatch.from_dict(data)
    logger.info(
        "Loaded %d issuer(s), %d credential(s) from %s",
        len(batch),
        sum(len(g.credentials) for g in batch),
        path,
    )
    return batch
