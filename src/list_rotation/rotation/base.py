# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Base handle shared by every rotation kind.

A handle validates its constructor arguments, then asks the process-wide
registry for the rotation registered under (kind, values). Concrete
kinds only supply the kind and the validation.
"""

import logging
from typing import Any, Dict, Tuple

from ..core.types import RotationKind
from .registry import get_registry
from .state import RotationState

lib_logger = logging.getLogger("list_rotation")


class Rotation:
    """
    Handle over a shared RotationState.

    Constructing a subclass never returns a fresh object when an equal
    rotation already exists; the existing handle is returned instead.
    Handles are infinite iterators: next(handle) == handle.next().
    """

    kind: RotationKind

    def __new__(cls, *values: Any):
        values = cls._validate(values)
        return get_registry().get_or_create(cls.kind, values, cls._wrap, owner=cls)

    @classmethod
    def _validate(cls, values: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """
        Check constructor arguments.

        Args:
            values: Positional arguments passed to the constructor

        Returns:
            The values the rotation will cycle through

        Raises:
            InvalidArgumentError: If the arguments do not fit this kind
        """
        raise NotImplementedError

    @classmethod
    def _wrap(cls, state: RotationState) -> "Rotation":
        handle = object.__new__(cls)
        handle._state = state
        return handle

    @property
    def state(self) -> RotationState:
        return self._state

    @property
    def values(self) -> Tuple[Any, ...]:
        return self._state.values

    @property
    def position(self) -> int:
        return self._state.position

    def next(self) -> Any:
        """Return the next value, wrapping to the first after the last."""
        return self._state.advance()

    def peek(self) -> Any:
        """Return the value next() would return, without advancing."""
        return self._state.peek()

    def reset(self) -> None:
        """Restart the rotation; the following next() returns the first value."""
        self._state.rewind()
        lib_logger.debug(f"{self.kind.value}: reset rotation over {len(self)} values")

    def __iter__(self) -> "Rotation":
        return self

    def __next__(self) -> Any:
        return self._state.advance()

    def __len__(self) -> int:
        return len(self._state)

    def __copy__(self) -> "Rotation":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Rotation":
        return self

    def __reduce__(self):
        return (_restore, (type(self), self.values))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(values={self.values!r}, "
            f"position={self.position})"
        )


def _restore(cls: type, values: Tuple[Any, ...]) -> Rotation:
    """
    Unpickle a rotation.

    Resolves to the rotation registered for (cls, values) in this
    process, creating it at position 0 if there is none. The pickled
    position is not carried over.
    """
    return get_registry().get_or_create(cls.kind, tuple(values), cls._wrap, owner=cls)
