# tests/conftest.py
import os
import pytest

FOO_KT = """package test_pkg

import java.util.*

class Foo(val bar: Int)
"""

MAIN_KT = """import java.util.*
import java.lang.Math.abs
import test_pkg.Foo

fun main() {
    println(abs(Foo(-1).bar))
}
"""

@pytest.fixture
def testdata(tmp_path):
    """
    A small Kotlin project:
    testdata/
    ├── Main.kt
    ├── MainTest.kt
    ├── NoKotlin.java
    ├── TestMain.kt
    └── test_pkg/Foo.kt
    """
    root = tmp_path / "testdata"
    pkg = root / "test_pkg"
    pkg.mkdir(parents=True)

    (root / "Main.kt").write_text(MAIN_KT, encoding="utf-8")
    (root / "MainTest.kt").write_text("class MainTest\n", encoding="utf-8")
    (root / "NoKotlin.java").write_text("public class NoKotlin {}\n", encoding="utf-8")
    (root / "TestMain.kt").write_text("class TestMain\n", encoding="utf-8")
    (pkg / "Foo.kt").write_text(FOO_KT, encoding="utf-8")
    return root

@pytest.fixture
def locked_dir(testdata, monkeypatch):
    """
    Adds testdata/locked/ whose listing fails with PermissionError.
    os.scandir is patched because chmod does not stop root.
    """
    locked = testdata / "locked"
    locked.mkdir()
    (locked / "Hidden.kt").write_text("class Hidden\n", encoding="utf-8")

    real_scandir = os.scandir

    def scandir(path="."):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return locked
