import io

import pytest

from proplogic.prop_errors import (
    Diagnostic,
    DiagnosticCollector,
    PrintingSink,
)


def test_diagnostic_format() -> None:
    d = Diagnostic("operators are next to each other", 0, 4, 3)
    assert d.format() == "[line 4, col 3] error: operators are next to each other"


def test_diagnostic_is_frozen() -> None:
    d = Diagnostic("x", 0, 1, 1)
    with pytest.raises(AttributeError):
        d.line = 2  # type: ignore[misc]


def test_collector_keeps_order() -> None:
    sink = DiagnosticCollector()
    sink.report("first", 0, 1, 1)
    sink.report("second", 1, 1, 5)
    assert sink.messages() == ["first", "second"]
    assert sink.diagnostics[1] == Diagnostic("second", 1, 1, 5)
    assert len(sink) == 2


def test_collector_clear() -> None:
    sink = DiagnosticCollector()
    sink.report("first", 0, 1, 1)
    sink.clear()
    assert len(sink) == 0


def test_printing_sink_writes_lines() -> None:
    buf = io.StringIO()
    sink = PrintingSink(buf)
    sink.report("not a proposition", 1, 2, 1)
    sink.report("expected closing parenthesis", 0, 2, 4)
    assert buf.getvalue().splitlines() == [
        "[line 2, col 1] error: not a proposition",
        "[line 2, col 4] error: expected closing parenthesis",
    ]
    assert sink.count == 2


def test_printing_sink_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    PrintingSink().report("grouping in invalid position", 0, 1, 2)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "grouping in invalid position" in captured.err
