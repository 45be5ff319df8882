"""Unit tests for utility functions (crudpack.utils).

Tests cover:
- read_text / write_text / ensure_dir and their FileSystemError wrapping
- load_json / save_json
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from crudpack.errors import FileSystemError
from crudpack.utils import (
    ensure_dir,
    load_json,
    print_error,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    read_text,
    save_json,
    write_text,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


class TestFileHelpers:
    def test_write_text_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "file.php"
        write_text(target, "<?php\n")
        assert read_text(target) == "<?php\n"

    def test_read_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileSystemError) as excinfo:
            read_text(tmp_path / "missing.php")
        assert excinfo.value.path == tmp_path / "missing.php"

    def test_read_undecodable_file_raises(self, tmp_path: Path):
        target = tmp_path / "web.php"
        target.write_bytes(b"<?php\n// caf\xe9\n")
        with pytest.raises(FileSystemError) as excinfo:
            read_text(target)
        assert excinfo.value.path == target
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_write_into_file_as_directory_raises(self, tmp_path: Path):
        blocker = tmp_path / "routes"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(FileSystemError):
            write_text(blocker / "web.php", "<?php\n")

    def test_ensure_dir_is_idempotent(self, tmp_path: Path):
        target = tmp_path / "x" / "y"
        assert ensure_dir(target) == target
        assert ensure_dir(target) == target
        assert target.is_dir()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestJson:
    def test_save_json_formatting(self, tmp_path: Path):
        target = save_json({"url": "{{base_url}}/api/products", "name": "Café"}, tmp_path / "c.json")
        raw = target.read_text(encoding="utf-8")
        assert raw.endswith("\n")
        assert '    "url": "{{base_url}}/api/products"' in raw
        assert "Café" in raw

    def test_load_json(self, tmp_path: Path):
        path = tmp_path / "doc.json"
        path.write_text(json.dumps({"item": []}), encoding="utf-8")
        assert load_json(path) == {"item": []}

    def test_load_invalid_json_raises(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    def test_helpers_print_through_console(self):
        with patch("crudpack.utils.console") as console:
            print_success("done")
            print_error("bad")
            print_warning("careful")
            print_info("fyi")
            print_header("CRUD for Product")
            print_summary_table({"Controller": "web"}, title="Plan")
        assert console.print.call_count >= 6
