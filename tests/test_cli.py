# tests/test_cli.py
import sys
import pytest
from unittest.mock import patch

from mergkol.cli import main

def run_cli(args):
    with patch.object(sys, "argv", ["mergkol"] + args):
        main()

def test_end_to_end_run(testdata, tmp_path, capsys):
    output_file = tmp_path / "Merged.kt"

    run_cli(["--dir", str(testdata), "-e", ".kt", "-t", "-o", str(output_file), "--line-ending", "lf"])

    content = output_file.read_text(encoding="utf-8")
    imports, code = content.split("\n\n", 1)
    assert sorted(imports.splitlines()) == ["import java.lang.Math.abs", "import java.util.*"]
    assert code.splitlines() == [
        "fun main() {",
        "    println(abs(Foo(-1).bar))",
        "}",
        "class Foo(val bar: Int)",
    ]
    assert "package" not in content
    assert "class MainTest" not in content

    out = capsys.readouterr().out
    assert f"\t{testdata / 'Main.kt'}" in out
    assert "Success!" in out

def test_output_inside_input_dir_is_not_merged(testdata):
    output_file = testdata / "Merged.kt"
    output_file.write_text("class Previous\n", encoding="utf-8")

    run_cli(["-d", str(testdata), "-e", ".kt", "-o", str(output_file), "--sort-imports"])

    content = output_file.read_bytes().decode("utf-8")
    assert "class Previous" not in content
    assert content.startswith("import java.lang.Math.abs\r\nimport java.util.*\r\n\r\n")

def test_exclude_pattern(testdata, tmp_path):
    output_file = tmp_path / "out.kt"

    run_cli(["-d", str(testdata), "-o", str(output_file), "--exclude", "*.java", "--exclude", "test_pkg/"])

    content = output_file.read_text(encoding="utf-8")
    assert "NoKotlin" not in content
    assert "class Foo" not in content
    assert "class TestMain" in content

def test_missing_input_dir(tmp_path, capsys):
    output_file = tmp_path / "Merged.kt"

    with pytest.raises(SystemExit) as exc_info:
        run_cli(["-d", str(tmp_path / "no_folder"), "-o", str(output_file)])

    assert exc_info.value.code == 1
    assert "Input directory not found" in capsys.readouterr().err
    assert not output_file.exists()

def test_write_error(testdata, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        run_cli(["-d", str(testdata), "-o", str(tmp_path / "missing_dir" / "Merged.kt")])

    assert exc_info.value.code == 1
    assert "Error while writing result" in capsys.readouterr().err

def test_help_short_circuits(testdata, tmp_path, capsys):
    output_file = tmp_path / "Merged.kt"

    with pytest.raises(SystemExit) as exc_info:
        run_cli(["-h", "-d", str(testdata), "-o", str(output_file)])

    assert exc_info.value.code == 0
    assert "usage: mergkol" in capsys.readouterr().out
    assert not output_file.exists()

def test_unreadable_subdirectory(testdata, locked_dir, tmp_path, capsys):
    output_file = tmp_path / "Merged.kt"

    with pytest.raises(SystemExit) as exc_info:
        run_cli(["-d", str(testdata), "-o", str(output_file)])

    assert exc_info.value.code == 1
    assert "Error while file discovery" in capsys.readouterr().err
    assert not output_file.exists()
