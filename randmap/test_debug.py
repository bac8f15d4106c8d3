import logging

import pytest

from randmap import debug
from randmap.handle import HandleGenerator
from randmap.map import RandMap


def test_trace_is_silent_when_disabled(monkeypatch, caplog):
    monkeypatch.setattr(debug, "DEBUG_ENABLED", False)

    @debug.trace
    def f(x):
        return x

    with caplog.at_level(logging.DEBUG, logger="randmap.debug"):
        assert f(3) == 3
    assert caplog.records == []
    assert f.__wrapped__.__name__ == "f"


def test_trace_logs_calls_and_results(monkeypatch, caplog):
    monkeypatch.setattr(debug, "DEBUG_ENABLED", True)

    @debug.trace
    def outer(x):
        return inner(x) + 1

    @debug.trace
    def inner(x):
        return x * 2

    with caplog.at_level(logging.DEBUG, logger="randmap.debug"):
        assert outer(3) == 7

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0].startswith("test_trace_logs_calls_and_results.<locals>.outer(3")
    assert messages[1].startswith("  test_trace_logs_calls_and_results.<locals>.inner(3")
    assert "    return 6" in messages
    assert "  return 7" in messages
    assert debug.DEBUG_DEPTH == 0


def test_trace_logs_and_reraises(monkeypatch, caplog):
    monkeypatch.setattr(debug, "DEBUG_ENABLED", True)

    @debug.trace
    def boom():
        raise KeyError("nope")

    with caplog.at_level(logging.DEBUG, logger="randmap.debug"):
        with pytest.raises(KeyError):
            boom()

    assert any("raise KeyError('nope')" in r.getMessage() for r in caplog.records)
    assert debug.DEBUG_DEPTH == 0


def test_map_operations_trace_when_enabled_after_import(monkeypatch, caplog):
    rmap = RandMap(HandleGenerator(seed=0))
    monkeypatch.setattr(debug, "DEBUG_ENABLED", True)

    with caplog.at_level(logging.DEBUG, logger="randmap.debug"):
        h = rmap.insert("x")
        assert rmap.remove(h) == "x"

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("RandMap.insert(") for m in messages)
    assert f"  return {h!r}" in messages
    assert any(m.startswith("RandMap.remove(") for m in messages)
    assert "  return 'x'" in messages
    assert debug.DEBUG_DEPTH == 0
