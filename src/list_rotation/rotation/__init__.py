# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Rotation handles, state and the construction registry."""

from .state import RotationState
from .registry import RotationRegistry, get_registry, reset_registry
from .base import Rotation
from .cycle import Cycle
from .alternate import Alternate
from .toggle import Toggle

__all__ = [
    "RotationState",
    "RotationRegistry",
    "get_registry",
    "reset_registry",
    "Rotation",
    "Cycle",
    "Alternate",
    "Toggle",
]
