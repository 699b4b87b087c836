# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Toggle rotation.

True, False, True, ... Handy for acting on every other pass of a loop:

    switch = Toggle()
    for n in range(2, 11):
        if switch.next():
            print(n)  # 2, 4, 6, 8, 10
"""

from typing import Any, Tuple

from ..core.constants import TOGGLE_VALUES
from ..core.errors import InvalidArgumentError
from ..core.types import RotationKind
from .alternate import validate_pair
from .base import Rotation


class Toggle(Rotation):
    """Alternation fixed to (True, False). Takes no arguments."""

    kind = RotationKind.TOGGLE

    @classmethod
    def _validate(cls, values: Tuple[Any, ...]) -> Tuple[Any, ...]:
        if values:
            raise InvalidArgumentError(
                "No arguments accepted.",
                kind=cls.kind.value,
                received=len(values),
            )
        return validate_pair(TOGGLE_VALUES, cls.kind)
