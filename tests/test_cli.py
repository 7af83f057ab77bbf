# tests/test_cli.py
"""The svg-invert command: stdin/stdout filter, per-file mode, errors."""

from __future__ import annotations

import io
import json
import sys

import pytest

from svg_invert import cli
from svg_invert.utils import log as LOG

RECT = b'<rect fill="#000000" stroke="#FFFFFF"/>'
RECT_OUT = b'<?xml version="1.0" encoding="UTF-8"?>\n<rect fill="#FFFFFFFF" stroke="#000000FF" />'


@pytest.fixture(autouse=True)
def _reset_topics(monkeypatch):
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    monkeypatch.delenv("SVG_INVERT_CONFIG", raising=False)
    LOG.reload_topics()
    yield
    LOG.reload_topics()


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_filters_stdin_to_stdout(monkeypatch, capsysbinary):
    _stdin(monkeypatch, RECT)
    assert cli.main([]) == 0
    assert capsysbinary.readouterr().out == RECT_OUT


def test_writes_single_input_to_output_file(tmp_path):
    src = tmp_path / "icon.svg"
    src.write_bytes(RECT)
    dst = tmp_path / "dark.svg"

    assert cli.main([str(src), "-o", str(dst)]) == 0
    assert dst.read_bytes() == RECT_OUT


def test_inverts_many_files_next_to_inputs(tmp_path):
    a = tmp_path / "a.svg"
    b = tmp_path / "b.svg"
    done = tmp_path / "c-inverted.svg"
    a.write_bytes(RECT)
    b.write_bytes(b'<g><rect fill="#FF0000"/></g>')
    done.write_bytes(b"<keep/>")

    assert cli.main([str(a), str(b), str(done)]) == 0
    assert (tmp_path / "a-inverted.svg").read_bytes() == RECT_OUT
    assert b'fill="#00FFFFFF"' in (tmp_path / "b-inverted.svg").read_bytes()
    assert not (tmp_path / "c-inverted-inverted.svg").exists()
    assert done.read_bytes() == b"<keep/>"


def test_custom_suffix(tmp_path):
    a = tmp_path / "a.svg"
    a.write_bytes(RECT)
    assert cli.main([str(a), "--suffix", ".dark.svg"]) == 0
    assert (tmp_path / "a.dark.svg").read_bytes() == RECT_OUT


def test_config_file_is_applied(tmp_path):
    cfg = tmp_path / "writer.json"
    cfg.write_text(json.dumps({"pad_self_closing": False}), encoding="utf-8")
    src = tmp_path / "icon.svg"
    src.write_bytes(RECT)
    dst = tmp_path / "out.svg"

    assert cli.main([str(src), "-o", str(dst), "--config", str(cfg)]) == 0
    assert dst.read_bytes().endswith(b'stroke="#000000FF"/>')


def test_malformed_input_reports_error(monkeypatch, capsys):
    _stdin(monkeypatch, b"<g><rect></g>")
    assert cli.main([]) == 1
    assert capsys.readouterr().err.startswith("Error: XML read error: mismatched tag")


def test_missing_input_file_reports_error(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.svg")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_config_reports_error(tmp_path, capsys):
    cfg = tmp_path / "bad.json"
    cfg.write_text(json.dumps({"indent": 2}), encoding="utf-8")
    assert cli.main(["--config", str(cfg)]) == 1
    assert "unknown config keys: indent" in capsys.readouterr().err


def test_output_with_many_inputs_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["a.svg", "b.svg", "-o", str(tmp_path / "x.svg")])
    assert exc.value.code == 2


def test_debug_flag_enables_tracing(monkeypatch, capsys):
    _stdin(monkeypatch, RECT)
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kw: None)
    assert cli.main(["--debug"]) == 0
    assert "[pipeline][DEBUG] run done" in capsys.readouterr().err
