"""Tests for merge_bindings."""

from snarfui import Variable, is_binding, merge_bindings


class TestNoBindings:
    def test_returns_same_list(self):
        values = [1, "two", None]
        assert merge_bindings(values) is values

    def test_empty(self):
        values = []
        assert merge_bindings(values) is values


class TestSingleBinding:
    def test_substitutes_in_place(self):
        v = Variable("b")
        merged = merge_bindings(["a", v.bind(), "c"])
        assert is_binding(merged)
        assert merged.get() == ["a", "b", "c"]

    def test_emissions_preserve_other_positions(self):
        v = Variable("b")
        merged = merge_bindings(["a", v.bind(), "c"])
        log = []
        merged.subscribe(log.append)
        v.set("B")
        v.set("BB")
        assert log == [["a", "B", "c"], ["a", "BB", "c"]]

    def test_reuses_source_subscription(self):
        v = Variable(1)
        merged = merge_bindings([v.bind()])
        merged.subscribe(lambda value: None)
        assert len(v._subscribers) == 1

    def test_mapped_binding(self):
        v = Variable(2)
        merged = merge_bindings([0, v.bind().map(lambda x: x * 10)])
        assert merged.get() == [0, 20]


class TestManyBindings:
    def test_initial_snapshot(self):
        a, b = Variable(1), Variable(2)
        merged = merge_bindings([a.bind(), "x", b.bind()])
        assert merged.get() == [1, "x", 2]

    def test_one_recombination_per_change(self):
        a, b, c = Variable(1), Variable(2), Variable(3)
        merged = merge_bindings([a.bind(), "mid", b.bind(), c.bind()])
        log = []
        merged.subscribe(log.append)

        b.set(20)
        assert log == [[1, "mid", 20, 3]]

        a.set(10)
        assert log == [[1, "mid", 20, 3], [10, "mid", 20, 3]]

    def test_uses_last_known_values(self):
        a, b = Variable("a0"), Variable("b0")
        merged = merge_bindings([a.bind(), b.bind()])
        log = []
        merged.subscribe(log.append)
        a.set("a1")
        b.set("b1")
        a.set("a2")
        assert log[-1] == ["a2", "b1"]
        assert len(log) == 3

    def test_lazy_until_read(self):
        calls = []
        a = Variable(1)
        b = Variable(2)
        merged = merge_bindings([a.bind().map(lambda x: calls.append(x) or x), b.bind()])
        assert calls == []
        merged.get()
        assert calls == [1]
