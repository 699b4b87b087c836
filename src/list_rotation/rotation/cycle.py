# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Cycle rotation.

Loops through any non-empty list of values:

    c = Cycle("A", "B", "C")
    c.next()  # "A"
    c.next()  # "B"
    c.next()  # "C"
    c.next()  # "A"
"""

from typing import Any, Tuple

from ..core.constants import CYCLE_MIN_VALUES
from ..core.errors import InvalidArgumentError
from ..core.types import RotationKind
from .base import Rotation


class Cycle(Rotation):
    """Round-robin over one or more values."""

    kind = RotationKind.CYCLE

    @classmethod
    def _validate(cls, values: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if len(values) < CYCLE_MIN_VALUES:
            raise InvalidArgumentError(
                f"Incorrect number of arguments; must be >= {CYCLE_MIN_VALUES}.",
                kind=cls.kind.value,
                received=len(values),
            )
        return tuple(values)
