"""Tests for the snapshot-check command."""

import pytest

from snapshot_check import UPDATE_SNAPSHOTS_VAR
from snapshot_check.cli import main


@pytest.fixture(autouse=True)
def _clear_update_var(monkeypatch):
    monkeypatch.delenv(UPDATE_SNAPSHOTS_VAR, raising=False)


@pytest.fixture
def output(tmp_path):
    path = tmp_path / "output.txt"
    path.write_text("line one\nline two\n")
    return path


def test_creates_then_matches(output, tmp_path, capsys):
    snapshot = tmp_path / "output.snap"
    assert main([str(output), str(snapshot)]) == 1
    assert "Created new snapshot" in capsys.readouterr().err
    assert snapshot.read_text() == "line one\nline two\n"
    assert main([str(output), str(snapshot)]) == 0


def test_mismatch_prints_diff(output, tmp_path, capsys):
    snapshot = tmp_path / "output.snap"
    snapshot.write_text("line one\nline 2\n")
    assert main([str(output), str(snapshot)]) == 1
    err = capsys.readouterr().err
    assert "-line 2" in err
    assert "+line two" in err


def test_no_diff_flag(output, tmp_path, capsys):
    snapshot = tmp_path / "output.snap"
    snapshot.write_text("other\n")
    assert main([str(output), str(snapshot), "--no-diff"]) == 1
    assert "+line two" not in capsys.readouterr().err


def test_update_flag_rewrites_snapshot(output, tmp_path):
    snapshot = tmp_path / "output.snap"
    snapshot.write_text("other\n")
    assert main([str(output), str(snapshot), "--update"]) == 1
    assert snapshot.read_text() == "line one\nline two\n"
    assert main([str(output), str(snapshot)]) == 0


def test_missing_output_exits_2(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), str(tmp_path / "output.snap")]) == 2
    assert "cannot read output" in capsys.readouterr().err
    assert not (tmp_path / "output.snap").exists()


def test_io_error_exits_2(output, tmp_path):
    snapshot = tmp_path / "dir.snap"
    snapshot.mkdir()
    assert main([str(output), str(snapshot)]) == 2
