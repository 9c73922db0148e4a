"""
Centralized configuration for credrotate.

Defaults come from environment variables; command line flags override them.

Usage:
    from credrotate.config import get_config
    cfg = get_config()
    print(cfg.op_bin)        # "op" or $CREDROTATE_OP_BIN
    print(cfg.vault)         # "" or $CREDROTATE_VAULT
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Top-level credrotate configuration."""

    op_bin: str = "op"  # 1Password CLI executable
    vault: str = ""  # empty = must be given on the command line
    dry_run: bool = False
    log_level: str = "WARNING"


# Singleton
_config: Config | None = None


def get_config() -> Config:
    """Get or create the singleton config from environment variables."""
    global _config
    if _config is not None:
        return _config
    _config = _load_from_env()
    return _config


def _load_from_env() -> Config:
    """Load configuration from environment variables."""
    return Config(
        op_bin=os.environ.get("CREDROTATE_OP_BIN", "op"),
        vault=os.environ.get("CREDROTATE_VAULT", ""),
        dry_run=os.environ.get("CREDROTATE_DRY_RUN", "").strip().lower() in _TRUTHY,
        log_level=os.environ.get("CREDROTATE_LOG_LEVEL", "WARNING").upper(),
    )


def reset_config() -> None:
    """Reset the singleton config (for testing)."""
    global _config
    _config = None
