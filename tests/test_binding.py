"""Tests for Variable, Derived and Binding."""

import threading

import pytest

from snarfui import Binding, Derived, Variable, bind, is_binding, set_scheduler


class TestVariable:
    def test_get_set(self):
        v = Variable(42)
        assert v.get() == 42
        v.set(100)
        assert v.get() == 100

    def test_dedup(self):
        """Setting the same value should not notify."""
        v = Variable(42)
        log = []
        v.subscribe(log.append)
        v.set(42)
        assert log == []

    def test_notifies_subscribers(self):
        v = Variable("hello")
        a, b = [], []
        v.subscribe(a.append)
        v.subscribe(b.append)
        v.set("world")
        assert a == ["world"]
        assert b == ["world"]

    def test_unsubscribe(self):
        v = Variable(0)
        log = []
        unsub = v.subscribe(log.append)
        v.set(1)
        unsub()
        v.set(2)
        assert log == [1]

    def test_unsubscribe_idempotent(self):
        v = Variable(0)
        unsub = v.subscribe(lambda value: None)
        unsub()
        unsub()  # should not raise

    def test_unsubscribe_during_emit(self):
        """A subscriber removing itself does not skip the others."""
        v = Variable(0)
        log = []
        unsubs = []
        unsubs.append(v.subscribe(lambda value: unsubs[0]()))
        v.subscribe(log.append)
        v.set(1)
        assert log == [1]

    def test_repr(self):
        assert "Variable(5)" in repr(Variable(5))


class TestScheduler:
    def test_background_set_is_marshalled(self):
        calls = []

        def scheduler(fn, *args):
            calls.append(threading.current_thread())
            fn(*args)

        set_scheduler(scheduler)
        v = Variable(1)
        log = []
        v.subscribe(log.append)

        t = threading.Thread(target=lambda: v.set(2))
        t.start()
        t.join()

        assert log == [2]
        assert len(calls) == 1

    def test_main_thread_set_is_synchronous(self):
        calls = []
        set_scheduler(lambda fn, *args: calls.append(fn))
        v = Variable(1)
        v.set(2)
        assert v.get() == 2
        assert calls == []


class TestBinding:
    def test_get_passes_through(self):
        v = Variable(3)
        assert v.bind().get() == 3

    def test_map(self):
        v = Variable(3)
        doubled = v.bind().map(lambda x: x * 2)
        assert doubled.get() == 6
        log = []
        doubled.subscribe(log.append)
        v.set(5)
        assert log == [10]

    def test_chained_map(self):
        v = Variable(2)
        b = v.bind().map(lambda x: x + 1).map(lambda x: x * 10)
        assert b.get() == 30

    def test_map_shares_source_subscription(self):
        v = Variable(1)
        b = v.bind().map(str)
        unsub = b.subscribe(lambda value: None)
        assert len(v._subscribers) == 1
        unsub()
        assert len(v._subscribers) == 0

    def test_bind_helper(self):
        v = Variable(1)
        b = bind(v)
        assert isinstance(b, Binding)
        assert bind(b) is b

    def test_is_binding(self):
        v = Variable(1)
        assert is_binding(v.bind())
        assert not is_binding(v)
        assert not is_binding(1)


class TestDerived:
    def test_lazy(self):
        calls = []
        a, b = Variable(1), Variable(2)

        def add(x, y):
            calls.append((x, y))
            return x + y

        d = Variable.derive([a, b], add)
        assert calls == []
        assert d.get() == 3
        assert calls == [(1, 2)]

    def test_recomputes_once_per_change(self):
        calls = []
        a, b = Variable(1), Variable(2)

        def add(x, y):
            calls.append((x, y))
            return x + y

        d = Derived([a, b], add)
        log = []
        d.subscribe(log.append)
        calls.clear()

        a.set(10)
        assert calls == [(10, 2)]
        assert log == [12]

        b.set(20)
        assert calls == [(10, 2), (10, 20)]
        assert log == [12, 30]

    def test_cached_while_subscribed(self):
        calls = []
        a = Variable(1)
        d = Derived([a], lambda x: calls.append(x) or x)
        d.subscribe(lambda value: None)
        d.get()
        d.get()
        assert calls == [1]

    def test_releases_upstream_with_last_subscriber(self):
        a, b = Variable(1), Variable(2)
        d = Derived([a, b], lambda x, y: x + y)
        first = d.subscribe(lambda value: None)
        second = d.subscribe(lambda value: None)
        assert len(a._subscribers) == 1

        first()
        assert len(a._subscribers) == 1
        second()
        assert len(a._subscribers) == 0
        assert len(b._subscribers) == 0

    def test_get_after_disconnect_sees_new_values(self):
        a = Variable(1)
        d = Derived([a], lambda x: x * 2)
        d.subscribe(lambda value: None)()
        a.set(5)
        assert d.get() == 10

    def test_failed_connect_releases_earlier_sources(self):
        class _Refusing:
            def get(self):
                return 0

            def subscribe(self, callback):
                raise RuntimeError("refused")

        a = Variable(1)
        d = Derived([a, _Refusing()], lambda x, y: x + y)
        with pytest.raises(RuntimeError, match="refused"):
            d.subscribe(lambda value: None)
        assert len(a._subscribers) == 0
