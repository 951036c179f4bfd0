"""
Array wrapper tests.
"""

from jsonexpect.assertions import new_array
from jsonexpect.reporting import FailureKind


class TestNewArray:
    def test_canonical_raw(self, collector):
        arr = new_array(collector, ("foo", 123))
        assert arr.raw() == ["foo", 123.0]
        assert not collector.failed

    def test_none_is_invalid(self, collector):
        arr = new_array(collector, None)
        assert arr.raw() == []
        assert collector.kinds() == [FailureKind.INVALID_INPUT]

    def test_mapping_is_invalid(self, collector):
        arr = new_array(collector, {"a": 1})
        assert arr.raw() == []
        assert collector.kinds() == [FailureKind.INVALID_INPUT]


class TestElements:
    def test_length(self, collector):
        new_array(collector, [1, 2, 3]).length().equal(3)
        assert not collector.failed

    def test_element(self, collector):
        arr = new_array(collector, ["foo", {"id": 1}])
        arr.element(0).string().equal("foo")
        arr.element(1).object().value_equal("id", 1)
        assert not collector.failed

    def test_element_out_of_bounds(self, collector):
        arr = new_array(collector, [1, 2])
        value = arr.element(2)
        assert value.raw() is None
        assert value.chain is arr.chain
        failure = collector.last()
        assert failure.kind == FailureKind.OUT_OF_BOUNDS
        assert failure.expected == 2
        assert failure.actual == 2

    def test_negative_index_out_of_bounds(self, collector):
        new_array(collector, [1, 2]).element(-1)
        assert collector.kinds() == [FailureKind.OUT_OF_BOUNDS]

    def test_first_and_last(self, collector):
        arr = new_array(collector, [1, 2, 3])
        arr.first().equal(1)
        arr.last().equal(3)
        assert not collector.failed

    def test_first_on_empty(self, collector):
        value = new_array(collector, []).first()
        value.null()
        assert collector.kinds() == [FailureKind.NOT_EMPTY]

    def test_iter(self, collector):
        arr = new_array(collector, [{"id": 1}, {"id": 2}])
        for item in arr.iter():
            item.object().contains_key("id")
            assert item.chain is arr.chain
        assert not collector.failed


class TestEquality:
    def test_equal(self, collector):
        new_array(collector, [1, "a", None]).equal([1.0, "a", None])
        assert not collector.failed

    def test_equal_order_sensitive(self, collector):
        new_array(collector, [1, 2]).equal([2, 1])
        failure = collector.last()
        assert failure.kind == FailureKind.EQUAL
        assert failure.expected == [2.0, 1.0]
        assert failure.actual == [1.0, 2.0]

    def test_not_equal(self, collector):
        arr = new_array(collector, [1, 2])
        arr.not_equal([2, 1])
        assert not collector.failed
        arr.not_equal([1, 2])
        assert collector.kinds() == [FailureKind.NOT_EQUAL]

    def test_empty(self, collector):
        new_array(collector, []).empty()
        new_array(collector, [1]).not_empty()
        assert not collector.failed
        new_array(collector, [1]).empty()
        new_array(collector, []).not_empty()
        assert collector.kinds() == [FailureKind.EMPTY, FailureKind.NOT_EMPTY]


class TestMembership:
    def test_contains(self, collector):
        arr = new_array(collector, ["foo", 123, {"a": True}])
        arr.contains("foo", 123).contains({"a": True})
        assert not collector.failed
        arr.contains("bar")
        failure = collector.last()
        assert failure.kind == FailureKind.CONTAINS
        assert failure.expected == "bar"

    def test_contains_does_not_confuse_bool_and_number(self, collector):
        new_array(collector, [1]).contains(True)
        assert collector.kinds() == [FailureKind.CONTAINS]

    def test_not_contains(self, collector):
        arr = new_array(collector, ["foo", 123])
        arr.not_contains("bar", 456)
        assert not collector.failed
        arr.not_contains("bar", 123)
        assert collector.kinds() == [FailureKind.NOT_CONTAINS]
        assert collector.last().expected == 123.0

    def test_contains_only(self, collector):
        arr = new_array(collector, ["foo", 123])
        arr.contains_only(123, "foo")
        assert not collector.failed
        arr.contains_only("foo")
        arr.contains_only("foo", 123, "bar")
        arr.contains_only("foo", "foo")
        assert collector.kinds() == [FailureKind.CONTAINS] * 3

    def test_invalid_element_aborts(self, collector):
        new_array(collector, [1]).contains({1, 2})
        assert collector.kinds() == [FailureKind.INVALID_INPUT]
