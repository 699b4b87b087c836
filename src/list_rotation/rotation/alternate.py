# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Alternate rotation.

Flips between exactly two values:

    a = Alternate("odd", "even")
    a.next()   # "odd"
    a.next()   # "even"
    a.reset()
    a.next()   # "odd"
"""

from typing import Any, Tuple

from ..core.constants import ALTERNATE_ARITY
from ..core.errors import InvalidArgumentError
from ..core.types import RotationKind
from .base import Rotation


def validate_pair(values: Tuple[Any, ...], kind: RotationKind) -> Tuple[Any, ...]:
    """
    Require exactly two values.

    Args:
        values: Constructor arguments
        kind: Kind reported in the error message

    Returns:
        The pair as a tuple

    Raises:
        InvalidArgumentError: If len(values) != 2
    """
    if len(values) != ALTERNATE_ARITY:
        raise InvalidArgumentError(
            f"Incorrect number of arguments; must be {ALTERNATE_ARITY}.",
            kind=kind.value,
            received=len(values),
        )
    return tuple(values)


class Alternate(Rotation):
    """Two-value rotation. Independent of any Cycle over the same values."""

    kind = RotationKind.ALTERNATE

    @classmethod
    def _validate(cls, values: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return validate_pair(values, cls.kind)
