# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Shared type definitions for the list rotation library."""

from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_THREAD_SAFE, DEFAULT_WRAP_POSITION


class RotationKind(str, Enum):
    """Which flavour of rotation a handle is."""

    CYCLE = "cycle"  # Any number of values (>= 1)
    ALTERNATE = "alternate"  # Exactly two values
    TOGGLE = "toggle"  # Fixed (True, False)


@dataclass
class RotationConfig:
    """
    Runtime behaviour shared by every rotation a registry creates.
    """

    wrap_position: bool = DEFAULT_WRAP_POSITION
    thread_safe: bool = DEFAULT_THREAD_SAFE
