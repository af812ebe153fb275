"""
tests/test_cli.py
─────────────────
`pwstrength check / audit / bench` via main(argv).
"""
import logging

import orjson
import pytest

from pwstrength.cli import main


def test_check_permissible(capsys):
    assert main(["check", "abc", "-r", "2", "-s", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("✓")
    assert "sequence 3 (max 3)" in out


def test_check_rejected_json(capsys):
    assert main(["check", "touchwood", "-r", "2", "-s", "3", "-b", "numpy", "--json"]) == 1
    rep = orjson.loads(capsys.readouterr().out)
    assert rep["repetition_count"] == 3
    assert rep["permissible"] is False


def test_audit_to_file(tmp_path, capsys):
    src = tmp_path / "pw.txt"
    src.write_text("abc\r\nabcd\n  spaced  \n\n", encoding="utf-8")
    dst = tmp_path / "report.json"

    rc = main(["audit", "-i", str(src), "-o", str(dst), "-r", "2", "-s", "3"])
    assert rc == 1

    blob = orjson.loads(dst.read_bytes())
    assert blob["summary"]["total"] == 4           # empty line kept as ""
    assert blob["summary"]["rejected"] == 2        # "abcd", "  spaced  " (4 spaces)
    assert [r["permissible"] for r in blob["reports"]] == [True, False, False, True]
    # no plaintext in the report
    assert b"abcd" not in dst.read_bytes()
    assert "rejected 2" in capsys.readouterr().err


def test_audit_progress_stdout(tmp_path, capsys):
    src = tmp_path / "pw.txt"
    src.write_text("xyz\nqwe\n", encoding="utf-8")
    assert main(["audit", "-i", str(src), "--progress", "-r", "3", "-s", "3"]) == 0
    blob = orjson.loads(capsys.readouterr().out)
    assert blob["summary"]["permissible"] == 2


def test_audit_missing_file(tmp_path):
    with pytest.raises(SystemExit) as ei:
        main(["audit", "-i", str(tmp_path / "nope.txt")])
    assert "cannot read" in str(ei.value.code)


def test_unknown_backend_choice():
    with pytest.raises(SystemExit):
        main(["check", "abc", "-b", "gpu"])


def test_bench_runs(capsys):
    assert main(["bench", "--n", "20", "--length", "8"]) == 0
    out = capsys.readouterr().out
    assert "python" in out and "numpy" in out


def test_audit_negative_processes_is_usage_error(tmp_path, capsys):
    src = tmp_path / "pw.txt"
    src.write_text("abc\n" * 1500, encoding="utf-8")
    with pytest.raises(SystemExit) as ei:
        main(["audit", "-i", str(src), "-p", "-2"])
    assert ei.value.code == 2                      # argparse usage error
    assert "must be >= 0" in capsys.readouterr().err


def test_audit_zero_processes(tmp_path, capsys):
    src = tmp_path / "pw.txt"
    src.write_text("abc\n" * 1500, encoding="utf-8")
    assert main(["audit", "-i", str(src), "-p", "0", "-r", "3", "-s", "3"]) == 0
    blob = orjson.loads(capsys.readouterr().out)
    assert blob["summary"]["total"] == 1500


def test_audit_non_utf8_file(tmp_path):
    src = tmp_path / "pw.txt"
    src.write_bytes(b"abc\n\xff\xfepass\n")
    with pytest.raises(SystemExit) as ei:
        main(["audit", "-i", str(src)])
    assert "not valid UTF-8" in str(ei.value.code)


def test_verbose_logs_rejections_without_password(caplog, capsys):
    caplog.set_level(logging.DEBUG)
    try:
        assert main(["-v", "check", "touchwood", "-r", "2", "-s", "3"]) == 1
        assert logging.getLogger("pwstrength").level == logging.DEBUG
    finally:
        logging.getLogger("pwstrength").setLevel(logging.NOTSET)
    assert "rejected: repetition 3/2" in caplog.text
    assert "touchwood" not in caplog.text
