"""Rotation pipeline: match a credential to an item, pick its field, write it back."""

from __future__ import annotations

from credrotate.rotation.matcher import Matcher, iter_credentials, search_token
from credrotate.rotation.runner import RotationResult, RotationState, Rotator, RunReport
from credrotate.rotation.selector import select_field
from credrotate.rotation.updater import ItemUpdater, apply_value

__all__ = [
    "ItemUpdater",
    "Matcher",
    "RotationResult",
    "RotationState",
    "Rotator",
    "RunReport",
    "apply_value",
    "iter_credentials",
    "search_token",
    "select_field",
]
