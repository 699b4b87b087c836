# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Exceptions raised by the list rotation library.

Only construction can fail; next() and reset() never raise once a
rotation handle exists.
"""

from typing import Optional


class RotationError(Exception):
    """Base class for all errors raised by this library."""


class InvalidArgumentError(RotationError, ValueError):
    """
    Raised when a rotation is constructed with the wrong arguments.

    Attributes:
        kind: Rotation kind being constructed ("cycle", "alternate", "toggle")
        received: Number of values the caller passed
    """

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        received: Optional[int] = None,
    ):
        if kind:
            message = f"{kind}: {message}"
        super().__init__(message)
        self.kind = kind
        self.received = received


__all__ = [
    "RotationError",
    "InvalidArgumentError",
]
