import io
import json

import pytest

import cli
from complexity.narrate import EMPTY_INPUT_MESSAGE

from tests.sources import BUBBLE_SORT, FIBONACCI


def test_analyze_file_prints_narration(tmp_path, capsys):
	p = tmp_path / "sort.c"
	p.write_text(BUBBLE_SORT, encoding="utf-8")
	cli.main(["analyze", str(p)])
	out = capsys.readouterr().out
	assert out.startswith("🔍 Code Analysis Started")
	assert "➡️ Time Complexity: O(n²)" in out


def test_analyze_json_output(tmp_path, capsys):
	p = tmp_path / "fib.c"
	p.write_text(FIBONACCI, encoding="utf-8")
	cli.main(["analyze", "--json", str(p)])
	payload = json.loads(capsys.readouterr().out)
	assert payload["signals"]["recursion"]["call_count"] == 3
	assert payload["steps"][-1] == "→ Case 1: T(n) = Θ(n^1.58)"


def test_analyze_reads_stdin(monkeypatch, capsys):
	monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
	cli.main(["analyze"])
	assert capsys.readouterr().out.strip() == EMPTY_INPUT_MESSAGE


def test_missing_file_is_a_usage_error(tmp_path):
	with pytest.raises(SystemExit) as exc:
		cli.main(["analyze", str(tmp_path / "missing.c")])
	assert exc.value.code == 2


def test_analyze_tolerates_non_utf8_file(tmp_path, capsys):
	p = tmp_path / "latin1.c"
	p.write_bytes(b"// caf\xe9\nint x = 1;\n")
	cli.main(["analyze", str(p)])
	assert capsys.readouterr().out.rstrip().endswith("T(n) = C1")


def test_analyze_tolerates_non_utf8_stdin(monkeypatch, capsys):
	monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"// caf\xe9\nint x = 1;\n")))
	cli.main(["analyze", "--json"])
	payload = json.loads(capsys.readouterr().out)
	assert payload["signals"]["loop_count"] == 0
	assert payload["steps"][-1] == "T(n) = C1"
