import json
import logging
from pathlib import Path

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from proplogic import prop_cli
from proplogic.prop_errors import DiagnosticCollector


def test_parse_line_success(collector: DiagnosticCollector) -> None:
    result = prop_cli.parse_line("p -> q", 3, collector)
    assert result.ok
    assert len(collector) == 0


def test_parse_line_reports_invalid_character(collector: DiagnosticCollector) -> None:
    result = prop_cli.parse_line("p $ q", 2, collector)
    assert not result.ok
    first = collector.diagnostics[0]
    assert first.message == "unexpected character '$'"
    assert (first.line, first.column) == (2, 2)


def test_run_prop_string_prints_tree(capsys: pytest.CaptureFixture[str]) -> None:
    failed = prop_cli.run_prop("p or not q", is_string=True)
    out = capsys.readouterr().out
    assert failed == 0
    assert out.startswith("line 1: Binary(")


def test_run_prop_json(capsys: pytest.CaptureFixture[str]) -> None:
    prop_cli.run_prop("not p", is_string=True, as_json=True)
    record = json.loads(capsys.readouterr().out)
    assert record["line"] == 1
    assert record["tree"]["kind"] == "unary"
    assert record["tree"]["children"][0]["name"] == "p"


def test_run_prop_counts_failed_lines(capsys: pytest.CaptureFixture[str]) -> None:
    source = "p and q\n\np and\n(q\nr"
    failed = prop_cli.run_prop(source, is_string=True)
    captured = capsys.readouterr()
    assert failed == 2
    assert "line 1:" in captured.out
    assert "line 5:" in captured.out
    assert "[line 3, col 3] error: missing proposition on right side of operation" in captured.err
    assert "[line 4, col 3] error: expected closing parenthesis" in captured.err


def test_run_prop_custom_sink(capsys: pytest.CaptureFixture[str]) -> None:
    sink = DiagnosticCollector()
    prop_cli.run_prop("p q", is_string=True, sink=sink)
    assert sink.messages() == ["simple proposition is in an invalid position"]
    assert capsys.readouterr().err == ""


def test_comment_only_line_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    assert prop_cli.run_prop("# nothing here", is_string=True) == 0
    assert capsys.readouterr().out == ""


def test_run_prop_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "sentences.txt"
    src.write_text("p <-> q\n", encoding="utf-8")
    assert prop_cli.run_prop(str(src)) == 0
    assert "IFONLYIF" in capsys.readouterr().out


def test_run_prop_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        prop_cli.run_prop(str(tmp_path / "nope.txt"))


def test_run_prop_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="proplogic.prop_cli"):
        prop_cli.run_prop("p\np and", is_string=True, sink=DiagnosticCollector())
    assert "parsed 2 line(s), 1 with errors" in caplog.text


def test_main_exit_status(capsys: pytest.CaptureFixture[str]) -> None:
    assert prop_cli.main(["-s", "p and q"]) == 0
    assert prop_cli.main(["-s", "p and"]) == 1
    captured = capsys.readouterr()
    assert "missing proposition on right side of operation" in captured.err


def test_main_json_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert prop_cli.main(["--json", "-s", "(p)"]) == 0
    record = json.loads(capsys.readouterr().out)
    assert record["tree"]["kind"] == "grouping"


def test_main_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "bad.txt"
    src.write_text("p q\n", encoding="utf-8")
    assert prop_cli.main([str(src)]) == 1
    assert "simple proposition is in an invalid position" in capsys.readouterr().err


def test_main_requires_source() -> None:
    with pytest.raises(SystemExit) as e:
        prop_cli.main([])
    assert e.value.code == 2


def test_main_verbose_configures_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    prop_cli.main(["--verbose", "-s", "p"])
    assert calls and calls[0]["level"] == logging.DEBUG


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])  # type: ignore[misc]
@given(source=st.text(max_size=60))  # type: ignore[misc]
def test_run_prop_random_input_does_not_crash(
    source: str, capsys: pytest.CaptureFixture[str]
) -> None:
    try:
        failed = prop_cli.run_prop(source, is_string=True, sink=DiagnosticCollector())
    except Exception:
        pytest.fail("Should not crash on random input")
    assert failed >= 0
    capsys.readouterr()


def test_run_prop_prints_long_negation_run(capsys: pytest.CaptureFixture[str]) -> None:
    failed = prop_cli.run_prop("not " * 1000 + "p", is_string=True)
    out = capsys.readouterr().out
    assert failed == 0
    assert out.startswith("line 1: Unary(Token(NOT), Unary(")
