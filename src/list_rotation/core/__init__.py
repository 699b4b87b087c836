# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Core package for the list rotation library.

Provides shared infrastructure used by the rotation handles and registry:
- types: RotationKind and RotationConfig
- errors: All custom exceptions
- config: ConfigLoader for environment-driven configuration
- constants: Default values and fixed shapes
"""

from .types import RotationKind, RotationConfig

from .errors import RotationError, InvalidArgumentError

from .config import ConfigLoader, load_config

__all__ = [
    # Types
    "RotationKind",
    "RotationConfig",
    # Errors
    "RotationError",
    "InvalidArgumentError",
    # Config
    "ConfigLoader",
    "load_config",
]
