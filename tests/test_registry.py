import copy
import pickle
from concurrent.futures import ThreadPoolExecutor

import pytest

from list_rotation import (
    Alternate,
    Cycle,
    InvalidArgumentError,
    Toggle,
    RotationConfig,
    RotationKind,
    RotationRegistry,
    get_registry,
    reset_registry,
)


def test_equal_arguments_return_the_same_instance():
    first = Cycle("A", "B", "C")
    second = Cycle("A", "B", "C")

    assert first is second


def test_shared_instances_advance_one_counter():
    first = Cycle("A", "B", "C")
    second = Cycle("A", "B", "C")

    assert first.next() == "A"
    assert second.next() == "B"
    assert first.next() == "C"
    assert second.next() == "A"


def test_reconstruction_does_not_reset_position():
    Cycle("A", "B", "C").next()

    assert Cycle("A", "B", "C").next() == "B"


def test_different_order_is_a_different_rotation():
    assert Cycle("A", "B") is not Cycle("B", "A")


def test_value_types_are_part_of_the_key():
    ints = Cycle(1, 0)
    bools = Cycle(True, False)

    assert ints is not bools
    assert ints.next() == 1
    assert type(bools.next()) is bool


def test_list_and_dict_values_are_matched_by_equality(registry):
    first = Cycle([1, 2], {"a": 1})
    second = Cycle([1, 2], {"a": 1})
    other = Cycle([1, 2], {"a": 2})

    assert first is second
    assert first is not other
    assert first.next() == [1, 2]
    assert second.next() == {"a": 1}
    assert len(registry) == 2


def test_failed_construction_is_not_cached(registry):
    with pytest.raises(InvalidArgumentError):
        Alternate("only")

    assert len(registry) == 0

    a = Alternate("only", "other")
    assert a.next() == "only"
    assert len(registry) == 1


def test_get_does_not_create(registry):
    assert registry.get(RotationKind.CYCLE, ("A",), Cycle) is None
    assert len(registry) == 0

    c = Cycle("A")
    assert registry.get(RotationKind.CYCLE, ("A",), Cycle) is c
    assert registry.get(RotationKind.CYCLE, ("A",)) is None
    assert registry.get(RotationKind.ALTERNATE, ("A",), Cycle) is None


def test_clear_stops_sharing_but_keeps_old_handles_working(registry):
    old = Cycle("A", "B")
    old.next()

    registry.clear()
    new = Cycle("A", "B")

    assert new is not old
    assert new.next() == "A"
    assert old.next() == "B"


def test_to_dict_snapshot(registry):
    c = Cycle("A", "B", "C")
    c.next()
    Alternate("x", "y")

    snapshot = registry.to_dict()

    assert {"kind": "cycle", "values": ["A", "B", "C"], "position": 1} in snapshot[
        "rotations"
    ]
    assert {"kind": "alternate", "values": ["x", "y"], "position": 0} in snapshot[
        "rotations"
    ]


def test_get_registry_returns_installed_registry(registry):
    assert get_registry() is registry


def test_reset_registry_installs_fresh_registry(registry):
    c = Cycle("A")
    replacement = reset_registry(RotationConfig(wrap_position=False))

    assert get_registry() is replacement
    assert replacement is not registry
    assert Cycle("A") is not c
    assert replacement.config.wrap_position is False


def test_concurrent_construction_yields_one_instance():
    with ThreadPoolExecutor(max_workers=8) as pool:
        handles = list(pool.map(lambda _: Cycle("A", "B", "C"), range(64)))

    assert all(h is handles[0] for h in handles)


def test_concurrent_next_never_loses_updates():
    c = Cycle(*range(10))
    calls = 1000

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: c.next(), range(calls)))

    assert sorted(results) == sorted(list(range(10)) * (calls // 10))
    assert c.next() == 0


def test_standalone_registry_uses_given_factory():
    registry = RotationRegistry(RotationConfig())
    calls = []

    def factory(state):
        calls.append(state)
        return state

    first = registry.get_or_create(RotationKind.CYCLE, ("A",), factory)
    second = registry.get_or_create(RotationKind.CYCLE, ("A",), factory)

    assert first is second
    assert len(calls) == 1


class Colors(Cycle):
    pass


def test_subclass_gets_its_own_instance():
    base = Cycle("red", "green")
    base.next()

    sub = Colors("red", "green")

    assert isinstance(sub, Colors)
    assert sub is not base
    assert sub.next() == "red"
    assert Colors("red", "green") is sub
    assert repr(sub) == "Colors(values=('red', 'green'), position=1)"


def test_nested_value_types_are_part_of_the_key():
    ints = Cycle((1, 0))
    bools = Cycle((True, False))

    assert ints is not bools
    assert bools.next() == (True, False)
    assert type(bools.values[0][0]) is bool


def test_nested_lists_and_dicts_are_tagged():
    assert Cycle([1, [0]]) is not Cycle([True, [False]])
    assert Cycle({"on": 1}) is not Cycle({"on": True})
    assert Cycle([1, 0]) is not Cycle((1, 0))


def test_equal_dicts_share_regardless_of_insertion_order():
    assert Cycle({"a": 1, "b": 2}) is Cycle({"b": 2, "a": 1})


class _Point:
    __hash__ = None

    def __init__(self, x):
        self.x = x

    def __eq__(self, other):
        return isinstance(other, _Point) and other.x == self.x


def test_unhashable_objects_are_matched_by_equality(registry):
    first = Cycle(_Point(1), _Point(2))
    second = Cycle(_Point(1), _Point(2))
    other = Cycle(_Point(3))

    assert first is second
    assert first is not other
    assert first.next() == _Point(1)
    assert second.next() == _Point(2)
    assert len(registry) == 2
    assert len(registry.to_dict()["rotations"]) == 2


def test_to_dict_on_standalone_registry_with_plain_factory():
    registry = RotationRegistry(RotationConfig())
    state = registry.get_or_create(RotationKind.CYCLE, ("A", "B"), lambda s: s)
    state.advance()

    assert registry.to_dict() == {
        "rotations": [{"kind": "cycle", "values": ["A", "B"], "position": 1}]
    }


def test_copy_returns_the_shared_instance():
    c = Cycle("A", "B")
    t = Toggle()

    assert copy.copy(c) is c
    assert copy.deepcopy(c) is c
    assert copy.copy(t) is t
    assert copy.deepcopy([t])[0] is t


def test_pickle_round_trip_resolves_to_registered_instance():
    c = Cycle("A", "B", "C")
    c.next()
    t = Toggle()

    assert pickle.loads(pickle.dumps(c)) is c
    assert pickle.loads(pickle.dumps(t)) is t
    assert c.next() == "B"


def test_unpickle_into_fresh_registry_starts_at_first_value():
    payload = pickle.dumps(Cycle("A", "B"))
    reset_registry(RotationConfig())

    restored = pickle.loads(payload)

    assert isinstance(restored, Cycle)
    assert restored.position == 0
    assert restored.next() == "A"
