"""
Tests for randomness sources and output sinks.
"""

import io

import pytest

from mentorship_engine.systems.output import ListSink, OutputSink, StreamSink, TeeSink
from mentorship_engine.systems.randomness import (
    NumpyRandomSource,
    RandomSource,
    ScriptedRandomSource,
)


def test_numpy_source_range():
    """Draws stay within 1..sides and cover the range."""
    rng = NumpyRandomSource(seed=123)
    draws = [rng.draw(10) for _ in range(2000)]
    assert min(draws) == 1
    assert max(draws) == 10
    assert set(draws) == set(range(1, 11))


def test_numpy_source_is_seeded():
    a = NumpyRandomSource(seed=7)
    b = NumpyRandomSource(seed=7)
    assert [a.draw(10) for _ in range(20)] == [b.draw(10) for _ in range(20)]

    c = NumpyRandomSource(seed=8)
    d = NumpyRandomSource(seed=7)
    assert [c.draw(10) for _ in range(50)] != [d.draw(10) for _ in range(50)]


def test_numpy_source_rejects_bad_sides():
    with pytest.raises(ValueError):
        NumpyRandomSource(0).draw(0)


def test_success_rate_is_about_one_in_ten():
    rng = NumpyRandomSource(seed=2024)
    hits = sum(1 for _ in range(20000) if rng.draw(10) == 1)
    assert 0.08 < hits / 20000 < 0.12


def test_scripted_source():
    rng = ScriptedRandomSource([3, 1])
    assert rng.draw(10) == 3
    assert rng.draw(10) == 1
    with pytest.raises(RuntimeError):
        rng.draw(10)
    assert rng.history == [3, 1]


def test_scripted_source_fallback_and_range():
    rng = ScriptedRandomSource(fallback=2)
    assert [rng.draw(10) for _ in range(3)] == [2, 2, 2]
    with pytest.raises(ValueError):
        ScriptedRandomSource([11]).draw(10)


def test_sources_satisfy_protocol():
    assert isinstance(NumpyRandomSource(0), RandomSource)
    assert isinstance(ScriptedRandomSource(), RandomSource)
    assert isinstance(ListSink(), OutputSink)
    assert isinstance(StreamSink(), OutputSink)


def test_stream_sink_writes_lines():
    buf = io.StringIO()
    sink = StreamSink(buf)
    sink.write("one")
    sink.write("two")
    assert buf.getvalue() == "one\ntwo\n"


def test_stream_sink_defaults_to_stdout(capsys):
    StreamSink().write("hello")
    assert capsys.readouterr().out == "hello\n"


def test_list_sink_limit():
    sink = ListSink(max_lines=2)
    for line in ("a", "b", "c"):
        sink.write(line)
    assert sink.lines == ["b", "c"]
    assert len(sink) == 2
    with pytest.raises(ValueError):
        ListSink(max_lines=0)


def test_tee_sink():
    a, b = ListSink(), ListSink()
    TeeSink(a, b).write("x")
    assert a.lines == b.lines == ["x"]
