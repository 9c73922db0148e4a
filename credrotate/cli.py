"""
credrotate CLI — entry point.

Usage:
    credrotate creds.toml Private          # rotate into the "Private" vault
    credrotate creds.toml Private -n       # dry run: serialize, don't upload
    CREDROTATE_VAULT=Private credrotate creds.toml
"""

from __future__ import annotations

import argparse
import logging
import sys

from credrotate import __version__
from credrotate.config import get_config
from credrotate.errors import FatalError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="credrotate",
        description="Rotate credential values stored in a 1Password vault.",
    )
    parser.add_argument("--version", action="version", version=f"credrotate {__version__}")
    parser.add_argument("credentials", help="Path to the updated credentials")
    parser.add_argument(
        "vault",
        nargs="?",
        default=cfg.vault or None,
        help="1Password vault to update credentials in (default: $CREDROTATE_VAULT)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        default=cfg.dry_run,
        help="Run commands without uploading edits",
    )
    parser.add_argument("--op-bin", default=cfg.op_bin, help="Path to the 1Password CLI")
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Diagnostic log level (stderr)",
    )

    args = parser.parse_args(argv)
    if not args.vault:
        parser.error("the vault argument is required (or set CREDROTATE_VAULT)")

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    return _cmd_rotate(args)


def _cmd_rotate(args: argparse.Namespace) -> int:
    from credrotate.credentials import load_batch
    from credrotate.rotation.runner import Rotator
    from credrotate.vault.client import OnePasswordCLI

    try:
        batch = load_batch(args.credentials)
        rotator = Rotator(OnePasswordCLI(args.op_bin), args.vault, dry_run=args.dry_run)
        rotator.run(batch)
    except FatalError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
