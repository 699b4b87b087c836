# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Rotation construction registry.

Deduplicates rotations across construction calls: asking twice for the
same kind with equal values yields the very same handle, so every
caller advances one shared counter.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from ..core.config import load_config
from ..core.types import RotationConfig, RotationKind
from .state import RotationState

lib_logger = logging.getLogger("list_rotation")

H = TypeVar("H")


def _tag(value: Any) -> Any:
    """
    Pair a value with its type, descending into containers.

    Lists and tuples keep their order; dict items are ordered by the
    repr of their tagged keys so that equal dicts tag equally.
    """
    if isinstance(value, (tuple, list)):
        return (type(value), tuple(_tag(v) for v in value))
    if isinstance(value, dict):
        items = [(_tag(k), _tag(v)) for k, v in value.items()]
        items.sort(key=lambda item: repr(item[0]))
        return (type(value), tuple(items))
    if isinstance(value, (set, frozenset)):
        return (type(value), frozenset(_tag(v) for v in value))
    return (type(value), value)


def _make_key(
    kind: RotationKind, values: Tuple[Any, ...], owner: Optional[type] = None
) -> tuple:
    """
    Build the cache key for a construction request.

    Every value, nested ones included, is paired with its type so that
    e.g. (1, 0) and (True, False) do not share a rotation. owner keeps
    subclasses of the same kind apart.
    """
    return (kind.value, owner, _tag(tuple(values)))


def _is_hashable(key: tuple) -> bool:
    try:
        hash(key)
    except TypeError:
        return False
    return True


@dataclass
class _Entry:
    kind: RotationKind
    handle: Any
    state: RotationState


class RotationRegistry:
    """
    Process-wide map of (kind, owner, values) -> rotation handle.

    Hashable keys live in a dict. Keys containing values that cannot be
    hashed even after container tagging (objects defining __eq__ without
    __hash__) are kept in a list and matched by equality.
    Entries are never evicted; rotations are expected to be few and
    long-lived.
    """

    def __init__(self, config: Optional[RotationConfig] = None):
        """
        Initialize the registry.

        Args:
            config: Behaviour for created rotations. Loaded from the
                    environment when omitted.
        """
        self._config = config if config is not None else load_config()
        self._lock = threading.Lock()
        self._by_key: Dict[tuple, _Entry] = {}
        self._unhashable: List[Tuple[tuple, _Entry]] = []

    @property
    def config(self) -> RotationConfig:
        return self._config

    def get_or_create(
        self,
        kind: RotationKind,
        values: Tuple[Any, ...],
        factory: Callable[[RotationState], H],
        owner: Optional[type] = None,
    ) -> H:
        """
        Return the handle registered for (kind, owner, values), creating it if needed.

        Values must already be validated; nothing is stored if factory raises.

        Args:
            kind: Rotation kind
            values: Validated tuple of values
            factory: Wraps a freshly built RotationState in a handle
            owner: Handle class the rotation belongs to, if any

        Returns:
            The shared handle for this key
        """
        key = _make_key(kind, values, owner)
        hashable = _is_hashable(key)

        with self._lock:
            existing = self._lookup(key, hashable)
            if existing is not None:
                lib_logger.debug(f"{kind.value}: reusing rotation over {len(values)} values")
                return existing.handle

            state = RotationState(
                values,
                wrap_position=self._config.wrap_position,
                thread_safe=self._config.thread_safe,
            )
            entry = _Entry(kind=kind, handle=factory(state), state=state)

            if hashable:
                self._by_key[key] = entry
            else:
                self._unhashable.append((key, entry))

        lib_logger.debug(f"{kind.value}: created rotation over {len(values)} values")
        return entry.handle

    def get(
        self,
        kind: RotationKind,
        values: Tuple[Any, ...],
        owner: Optional[type] = None,
    ) -> Optional[Any]:
        """
        Look up an existing handle without creating one.

        Args:
            kind: Rotation kind
            values: Values the rotation was constructed with
            owner: Handle class passed at creation, if any

        Returns:
            The registered handle, or None
        """
        key = _make_key(kind, tuple(values), owner)
        with self._lock:
            entry = self._lookup(key, _is_hashable(key))
        return entry.handle if entry is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_key) + len(self._unhashable)

    def clear(self) -> None:
        """
        Drop every registered rotation.

        Handles already held by callers keep working but are no longer
        shared with new constructions.
        """
        with self._lock:
            count = len(self._by_key) + len(self._unhashable)
            self._by_key.clear()
            self._unhashable.clear()
        lib_logger.debug(f"Registry: cleared {count} rotations")

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot registry contents.

        Returns:
            {"rotations": [{"kind", "values", "position"}, ...]}
        """
        with self._lock:
            entries = list(self._by_key.items()) + list(self._unhashable)

        rotations = []
        for _, entry in entries:
            snapshot = {"kind": entry.kind.value}
            snapshot.update(entry.state.to_dict())
            rotations.append(snapshot)
        return {"rotations": rotations}

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _lookup(self, key: tuple, hashable: bool) -> Optional[_Entry]:
        if hashable:
            return self._by_key.get(key)
        for stored_key, entry in self._unhashable:
            if stored_key == key:
                return entry
        return None


# =============================================================================
# PROCESS-WIDE REGISTRY
# =============================================================================

_registry: Optional[RotationRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> RotationRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = RotationRegistry()
        return _registry


def reset_registry(config: Optional[RotationConfig] = None) -> RotationRegistry:
    """
    Replace the process-wide registry with an empty one.

    Args:
        config: Config for the new registry; loaded from the environment
                when omitted

    Returns:
        The new registry
    """
    global _registry
    with _registry_lock:
        _registry = RotationRegistry(config)
        return _registry
