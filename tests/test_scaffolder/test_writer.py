"""Unit tests for the file-write policy (crudpack.scaffolder.writer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from crudpack.errors import FileSystemError
from crudpack.prompts import ScriptedPrompt
from crudpack.scaffolder.writer import (
    ArtifactResult,
    ArtifactStatus,
    FileWriter,
    failed_result,
    report_result,
    report_summary,
)

pytestmark = pytest.mark.unit


class TestFileWriter:
    def test_creates_missing_file(self, tmp_path: Path):
        prompt = ScriptedPrompt()
        result = FileWriter(prompt).write("model", tmp_path / "app" / "Product.php", "<?php\n")
        assert result.status is ArtifactStatus.CREATED
        assert (tmp_path / "app" / "Product.php").read_text(encoding="utf-8") == "<?php\n"
        assert prompt.questions == []

    def test_force_overwrites_without_asking(self, tmp_path: Path):
        target = tmp_path / "Product.php"
        target.write_text("old", encoding="utf-8")
        prompt = ScriptedPrompt()
        result = FileWriter(prompt, force=True).write("model", target, "new")
        assert result.status is ArtifactStatus.UPDATED
        assert target.read_text(encoding="utf-8") == "new"
        assert prompt.questions == []

    def test_declined_overwrite_is_a_skip(self, tmp_path: Path):
        target = tmp_path / "Product.php"
        target.write_text("old", encoding="utf-8")
        prompt = ScriptedPrompt([False])
        result = FileWriter(prompt).write("model", target, "new")
        assert result.status is ArtifactStatus.SKIPPED
        assert target.read_text(encoding="utf-8") == "old"
        assert prompt.questions == [f"File exists: {target}. Replace it?"]

    def test_confirmed_overwrite(self, tmp_path: Path):
        target = tmp_path / "Product.php"
        target.write_text("old", encoding="utf-8")
        result = FileWriter(ScriptedPrompt([True])).write("model", target, "new")
        assert result.status is ArtifactStatus.UPDATED
        assert target.read_text(encoding="utf-8") == "new"

    def test_default_answer_keeps_existing_file(self, tmp_path: Path):
        target = tmp_path / "Product.php"
        target.write_text("old", encoding="utf-8")
        result = FileWriter(ScriptedPrompt()).write("model", target, "new")
        assert result.status is ArtifactStatus.SKIPPED

    def test_ask_false_keeps_existing_file_silently(self, tmp_path: Path):
        target = tmp_path / "HandlesDeletes.php"
        target.write_text("old", encoding="utf-8")
        prompt = ScriptedPrompt([True])
        result = FileWriter(prompt).write("trait", target, "new", ask=False)
        assert result.status is ArtifactStatus.SKIPPED
        assert "--force" in result.message
        assert prompt.questions == []

    def test_unwritable_target_raises(self, tmp_path: Path):
        blocker = tmp_path / "app"
        blocker.write_text("file, not a directory", encoding="utf-8")
        with pytest.raises(FileSystemError):
            FileWriter(ScriptedPrompt()).write("model", blocker / "Product.php", "x")


class TestReporting:
    def test_failed_result(self, tmp_path: Path):
        result = failed_result("policy", tmp_path / "P.php", FileSystemError("Stub not found"))
        assert result.status is ArtifactStatus.FAILED
        assert result.message == "Stub not found"

    def test_report_lines_and_summary(self, tmp_path: Path):
        results = [
            ArtifactResult(label="model", path=tmp_path / "a", status=ArtifactStatus.CREATED),
            ArtifactResult(label="view:index", path=tmp_path / "b", status=ArtifactStatus.SKIPPED, message="kept"),
        ]
        with patch("crudpack.scaffolder.writer.console") as console:
            for result in results:
                report_result(result)
        lines = [call.args[0] for call in console.print.call_args_list]
        assert "Created" in lines[0] and "model" in lines[0]
        assert "(kept)" in lines[1]

        with patch("crudpack.scaffolder.writer.print_summary_table") as table:
            report_summary(results)
        counts = table.call_args.args[0]
        assert counts == {"Created": "1", "Updated": "0", "Skipped": "1", "Failed": "0"}
