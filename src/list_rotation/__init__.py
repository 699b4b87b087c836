# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Loop (cycle, alternate or toggle) through a list of values.

Rotations are singletons per argument list: constructing the same
rotation twice returns the very same object, so both callers advance
one shared position.

Public API:
    Cycle: Round-robin over one or more values
    Alternate: Round-robin over exactly two values
    Toggle: True, False, True, ...
    InvalidArgumentError: Raised on bad constructor arguments

Components (for advanced usage):
    RotationRegistry: The construction cache behind the singletons
    RotationState: Values plus position counter
    ConfigLoader: Environment-driven configuration
"""

from .core import (
    RotationKind,
    RotationConfig,
    RotationError,
    InvalidArgumentError,
    ConfigLoader,
    load_config,
)
from .rotation import (
    RotationState,
    RotationRegistry,
    get_registry,
    reset_registry,
    Rotation,
    Cycle,
    Alternate,
    Toggle,
)

__version__ = "1.9.0"

__all__ = [
    "Cycle",
    "Alternate",
    "Toggle",
    "Rotation",
    "RotationKind",
    "RotationConfig",
    "RotationError",
    "InvalidArgumentError",
    "ConfigLoader",
    "load_config",
    "RotationState",
    "RotationRegistry",
    "get_registry",
    "reset_registry",
]
