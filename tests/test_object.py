"""
Object wrapper tests.
"""

from dataclasses import dataclass

from jsonexpect.assertions import new_object
from jsonexpect.reporting import FailureKind


@dataclass
class Flags:
    a: bool
    b: bool


BODY = {"foo": 123, "bar": {"a": True, "b": False}, "baz": ["x", "y"]}


class TestNewObject:
    def test_canonical_raw(self, collector):
        obj = new_object(collector, {"foo": 123})
        assert obj.raw() == {"foo": 123.0}
        assert isinstance(obj.raw()["foo"], float)
        assert not obj.chain.failed

    def test_none_is_invalid(self, collector):
        obj = new_object(collector, None)
        assert obj.chain.failed
        assert obj.raw() == {}
        assert collector.kinds() == [FailureKind.INVALID_INPUT]

    def test_non_mapping_is_invalid(self, collector):
        obj = new_object(collector, [1, 2])
        assert obj.chain.failed
        assert obj.raw() == {}
        assert collector.kinds() == [FailureKind.INVALID_INPUT]

    def test_inert_object_still_usable(self, collector):
        obj = new_object(collector, None)
        obj.empty().not_contains_key("foo").keys().empty()
        assert len(collector) == 1

    def test_dataclass_input(self, collector):
        obj = new_object(collector, Flags(a=True, b=False))
        obj.equal({"a": True, "b": False})
        assert not collector.failed


class TestEqual:
    def test_equal_ignores_key_order(self, collector):
        new_object(collector, {"a": 1, "b": 2}).equal({"b": 2, "a": 1})
        assert not collector.failed

    def test_equal_struct_and_map(self, collector):
        new_object(collector, {"a": True, "b": False}).equal(Flags(a=True, b=False))
        assert not collector.failed

    def test_equal_failure(self, collector):
        new_object(collector, {"foo": 123}).equal({"foo": 456})
        failure = collector.last()
        assert failure.kind == FailureKind.EQUAL
        assert failure.expected == {"foo": 456.0}
        assert failure.actual == {"foo": 123.0}

    def test_not_equal(self, collector):
        obj = new_object(collector, {"foo": 123})
        obj.not_equal({"bar": 123})
        assert not collector.failed
        obj.not_equal({"foo": 123})
        assert collector.kinds() == [FailureKind.NOT_EQUAL]
        assert collector.last().expected == {"foo": 123.0}

    def test_invalid_expected_aborts(self, collector):
        obj = new_object(collector, {"foo": 123})
        assert obj.equal([1, 2]) is obj
        assert collector.kinds() == [FailureKind.INVALID_INPUT]

    def test_empty(self, collector):
        new_object(collector, {}).empty()
        assert not collector.failed
        new_object(collector, {"a": 1}).empty()
        new_object(collector, {}).not_empty()
        assert collector.kinds() == [FailureKind.EMPTY, FailureKind.NOT_EMPTY]


class TestKeys:
    def test_contains_key(self, collector):
        obj = new_object(collector, {"foo": None})
        obj.contains_key("foo")
        assert not collector.failed
        obj.contains_key("bar")
        failure = collector.last()
        assert failure.kind == FailureKind.KEY_MISSING
        assert failure.expected == "bar"
        assert failure.actual == {"foo": None}

    def test_not_contains_key(self, collector):
        obj = new_object(collector, {"foo": 123})
        obj.not_contains_key("bar")
        assert not collector.failed
        obj.not_contains_key("foo")
        assert collector.last().kind == FailureKind.NOT_CONTAINS
        assert collector.last().expected == "foo"

    def test_keys_and_values(self, collector):
        obj = new_object(collector, {"foo": 123, "bar": 456})
        obj.keys().contains_only("bar", "foo")
        obj.values().contains_only(456, 123)
        assert obj.keys().chain is obj.chain
        assert not collector.failed


class TestValue:
    def test_value(self, collector):
        obj = new_object(collector, BODY)
        obj.value("foo").number().equal(123)
        obj.value("bar").object().value("a").boolean().true()
        assert not collector.failed

    def test_missing_value_is_inert(self, collector):
        obj = new_object(collector, BODY)
        missing = obj.value("qux")
        assert missing.raw() is None
        assert missing.chain is obj.chain
        failure = collector.last()
        assert failure.kind == FailureKind.KEY_MISSING
        assert failure.expected == "qux"

    def test_value_equal(self, collector):
        obj = new_object(collector, BODY)
        obj.value_equal("foo", 123).value_equal("bar", Flags(a=True, b=False))
        assert not collector.failed
        obj.value_equal("foo", 124)
        failure = collector.last()
        assert failure.kind == FailureKind.EQUAL
        assert failure.expected == 124.0
        assert failure.actual == 123.0

    def test_value_equal_missing_key_reports_once(self, collector):
        obj = new_object(collector, BODY)
        obj.value_equal("qux", 1)
        assert collector.kinds() == [FailureKind.KEY_MISSING]

    def test_value_not_equal(self, collector):
        obj = new_object(collector, BODY)
        obj.value_not_equal("foo", "bad value")
        assert not collector.failed
        obj.value_not_equal("foo", 123)
        assert collector.kinds() == [FailureKind.NOT_EQUAL]

    def test_value_not_equal_missing_key_fails(self, collector):
        new_object(collector, BODY).value_not_equal("qux", "bad value")
        assert collector.kinds() == [FailureKind.KEY_MISSING]

    def test_path(self, collector):
        new_object(collector, BODY).path("$.bar.b").boolean().false()
        assert not collector.failed


class TestContainsMap:
    def test_success(self, collector):
        new_object(collector, BODY).contains_map({"foo": 123, "bar": {"a": True}})
        assert not collector.failed

    def test_reflexive(self, collector):
        new_object(collector, BODY).contains_map(BODY)
        assert not collector.failed

    def test_missing_key(self, collector):
        new_object(collector, BODY).contains_map({"foo": 123, "qux": 456})
        failure = collector.last()
        assert failure.kind == FailureKind.CONTAINS
        assert failure.expected == {"foo": 123.0, "qux": 456.0}
        assert failure.actual == new_object(collector, BODY).raw()

    def test_sequences_match_exactly(self, collector):
        new_object(collector, BODY).contains_map({"baz": ["x"]})
        assert collector.kinds() == [FailureKind.CONTAINS]

    def test_dataclass_submap(self, collector):
        new_object(collector, BODY).contains_map({"bar": Flags(a=True, b=False)})
        assert not collector.failed

    def test_not_contains_map(self, collector):
        obj = new_object(collector, {"foo": 123, "bar": 456})
        obj.not_contains_map({"foo": 123, "bar": "no-no-no"})
        assert not collector.failed
        obj.not_contains_map({"foo": 123})
        assert collector.kinds() == [FailureKind.NOT_CONTAINS]

    def test_invalid_submap_reported_once(self, collector):
        new_object(collector, BODY).contains_map(["foo"])
        assert collector.kinds() == [FailureKind.INVALID_INPUT]
