# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Rotation state.

Owns the fixed value tuple and the position counter that every
rotation handle advances.
"""

import threading
from contextlib import nullcontext
from typing import Any, Dict, Tuple


class RotationState:
    """
    Values plus a position counter.

    The emitted index is always position % len(values). When
    wrap_position is set the counter itself is kept below len(values),
    otherwise it grows by one per call for the life of the process.
    """

    def __init__(
        self,
        values: Tuple[Any, ...],
        wrap_position: bool = True,
        thread_safe: bool = True,
    ):
        """
        Initialize rotation state.

        Args:
            values: Non-empty tuple of values, validated by the caller
            wrap_position: Reduce position modulo length on each increment
            thread_safe: Serialize advance() and rewind() with a lock
        """
        self._values = tuple(values)
        self._length = len(self._values)
        self._position = 0
        self._wrap_position = wrap_position
        self._lock = threading.Lock() if thread_safe else nullcontext()

    @property
    def values(self) -> Tuple[Any, ...]:
        return self._values

    @property
    def position(self) -> int:
        return self._position

    def __len__(self) -> int:
        return self._length

    def advance(self) -> Any:
        """
        Return the value at the current index and move past it.

        Returns:
            values[position % len(values)]
        """
        with self._lock:
            index = self._position % self._length
            if self._wrap_position:
                self._position = (index + 1) % self._length
            else:
                self._position += 1
            return self._values[index]

    def peek(self) -> Any:
        """Return the value advance() would return, without moving."""
        with self._lock:
            return self._values[self._position % self._length]

    def rewind(self) -> None:
        """Start over from the first value."""
        with self._lock:
            self._position = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"values": list(self._values), "position": self._position}
