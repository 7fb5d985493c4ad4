import time

import pytest

from tally.instrument import Call


class _Counter:
    def __init__(self):
        self.value = 0

    def inc(self, delta):
        self.value += delta


class _Stopwatch:
    def __init__(self, timer):
        self._timer = timer
        self._start = time.perf_counter_ns()

    def stop(self):
        self._timer.values.append(time.perf_counter_ns() - self._start)


class _Timer:
    def __init__(self):
        self.values = []

    def start(self):
        return _Stopwatch(self)


class _Registry:
    def __init__(self):
        self.counters = {}
        self.timers = {}


class _FakeScope:
    def __init__(self, registry=None, prefix="", tags=None):
        self.registry = registry or _Registry()
        self.prefix = prefix
        self.tags = dict(tags or {})

    def _key(self, name):
        full = f"{self.prefix}.{name}" if self.prefix else name
        tag_text = ",".join(f"{k}={v}" for k, v in sorted(self.tags.items()))
        return f"{full}+{tag_text}"

    def tagged(self, tags):
        return _FakeScope(self.registry, self.prefix, {**self.tags, **tags})

    def sub_scope(self, name):
        prefix = f"{self.prefix}.{name}" if self.prefix else name
        return _FakeScope(self.registry, prefix, self.tags)

    def counter(self, name):
        return self.registry.counters.setdefault(self._key(name), _Counter())

    def timer(self, name):
        return self.registry.timers.setdefault(self._key(name), _Timer())


SLEEP_NS = 1_000_000


def test_call_success():
    scope = _FakeScope()

    def work():
        time.sleep(SLEEP_NS / 1e9)
        return "done"

    result = Call(scope, "test_call").execute(work)
    assert result == "done"

    counters = scope.registry.counters
    timers = scope.registry.timers
    assert counters["test_call+result_type=success"].value == 1
    assert counters["test_call+result_type=error"].value == 0
    assert len(timers["test_call.latency+"].values) == 1
    assert timers["test_call.latency+"].values[0] >= SLEEP_NS // 2


def test_call_fail():
    scope = _FakeScope()
    expected = RuntimeError("an error")

    def work():
        time.sleep(SLEEP_NS / 1e9)
        raise expected

    with pytest.raises(RuntimeError) as excinfo:
        Call(scope, "test_call").execute(work)
    assert excinfo.value is expected

    counters = scope.registry.counters
    timers = scope.registry.timers
    assert counters["test_call+result_type=error"].value == 1
    assert counters["test_call+result_type=success"].value == 0
    assert len(timers["test_call.latency+"].values) == 1
    assert timers["test_call.latency+"].values[0] >= SLEEP_NS // 2


def test_call_counts_accumulate():
    scope = _FakeScope()
    call = Call(scope, "op")
    call.execute(lambda: None)
    call.execute(lambda: None)
    with pytest.raises(ValueError):
        call.execute(lambda: int("x"))

    counters = scope.registry.counters
    assert counters["op+result_type=success"].value == 2
    assert counters["op+result_type=error"].value == 1
    assert len(scope.registry.timers["op.latency+"].values) == 3