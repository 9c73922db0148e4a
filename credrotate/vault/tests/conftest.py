"""Shared fixtures for vault tests."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def api_credential_json() -> bytes:
    """An ``op item get`` response for an API Credential item."""
    return json.dumps(
        {
            "id": "abc123",
            "title": "Acme API Key prod",
            "version": 4,
            "vault": {"id": "v1", "name": "Private"},
            "category": "API_CREDENTIAL",
            "last_edited_by": "USER1",
            "sections": [{"id": "notes", "label": "Notes", "extra_flag": True}],
            "fields": [
                {
                    "id": "type",
                    "type": "MENU",
                    "label": "type",
                    "value": "bearer",
                    "reference": "op://Private/Acme/type",
                },
                {
                    "id": "credential",
                    "type": "CONCEALED",
                    "label": "credential",
                    "value": "old-secret",
                    "reference": "op://Private/Acme/credential",
                    "entropy": 95.3,
                },
                {
                    "id": "expires",
                    "section": {"id": "notes", "label": "Notes"},
                    "type": "SSHKEY",
                    "label": "expires",
                    "reference": "op://Private/Acme/notes/expires",
                },
            ],
            "created_at": "2024-01-01T00:00:00Z",
        }
    ).encode()
