# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Constants and default values for the list rotation library.

All tunable defaults live here; ConfigLoader layers environment
overrides on top of them.
"""

# =============================================================================
# TUNABLE DEFAULTS
# =============================================================================

# Store position modulo length on every increment
DEFAULT_WRAP_POSITION = True

# Guard next()/reset() with a per-rotation lock
DEFAULT_THREAD_SAFE = True

# =============================================================================
# FIXED SHAPES
# =============================================================================

CYCLE_MIN_VALUES = 1
ALTERNATE_ARITY = 2
TOGGLE_VALUES = (True, False)

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_WRAP_POSITION = "LIST_ROTATION_WRAP_POSITION"
ENV_THREAD_SAFE = "LIST_ROTATION_THREAD_SAFE"

TRUE_STRINGS = ("true", "1", "yes")
FALSE_STRINGS = ("false", "0", "no")

# Logging
LIB_LOGGER_NAME = "list_rotation"

__all__ = [
    "DEFAULT_WRAP_POSITION",
    "DEFAULT_THREAD_SAFE",
    "CYCLE_MIN_VALUES",
    "ALTERNATE_ARITY",
    "TOGGLE_VALUES",
    "ENV_WRAP_POSITION",
    "ENV_THREAD_SAFE",
    "TRUE_STRINGS",
    "FALSE_STRINGS",
    "LIB_LOGGER_NAME",
]
