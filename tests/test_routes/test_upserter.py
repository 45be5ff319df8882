"""Unit tests for marker-delimited route block upserts."""

from __future__ import annotations

import pytest

from crudpack.errors import MalformedStateError
from crudpack.prompts import ScriptedPrompt
from crudpack.routes import (
    ROUTE_FACADE_IMPORT,
    RouteBlockUpserter,
    build_block,
    end_marker,
    ensure_route_import,
    merge_block,
    start_marker,
)
from crudpack.scaffolder.writer import ArtifactStatus

pytestmark = pytest.mark.unit

BODY = "Route::resource('products', \\App\\Http\\Controllers\\ProductController::class);"
NEW_BODY = "Route::resource('items', \\App\\Http\\Controllers\\ProductController::class);"


class TestMergeBlock:
    def test_appends_when_absent(self):
        merged = merge_block("<?php\n\nRoute::get('/', fn () => 'hi');", "Product", BODY)
        assert merged == (
            "<?php\n\nRoute::get('/', fn () => 'hi');\n\n"
            "// CRUDPACK:Product:START\n" + BODY + "\n// CRUDPACK:Product:END\n"
        )

    def test_replaces_in_place(self):
        contents = "<?php\n\n" + build_block("Product", BODY) + "\nRoute::get('/after', fn () => 1);\n"
        merged = merge_block(contents, "Product", NEW_BODY)
        assert BODY not in merged
        assert NEW_BODY in merged
        assert merged.endswith("\nRoute::get('/after', fn () => 1);\n")
        assert merged.count(start_marker("Product")) == 1

    def test_idempotent(self):
        once = merge_block("<?php\n", "Product", BODY)
        assert merge_block(once, "Product", BODY) == once

    def test_similar_keys_do_not_collide(self):
        contents = merge_block("<?php\n", "ProductCategory", NEW_BODY)
        merged = merge_block(contents, "Product", BODY)
        assert merged.count(start_marker("ProductCategory")) == 1
        assert NEW_BODY in merged
        assert BODY in merged

    @pytest.mark.parametrize(
        "contents",
        [
            "// CRUDPACK:Product:START\n",
            "// CRUDPACK:Product:END\n",
            "// CRUDPACK:Product:START\n// CRUDPACK:Product:END\n// CRUDPACK:Product:START\n// CRUDPACK:Product:END\n",
            "// CRUDPACK:Product:END\n// CRUDPACK:Product:START\n",
        ],
        ids=["orphan-start", "orphan-end", "duplicate", "reversed"],
    )
    def test_malformed_markers(self, contents):
        with pytest.raises(MalformedStateError):
            merge_block("<?php\n\n" + contents, "Product", BODY)


class TestEnsureRouteImport:
    def test_inserted_after_open_tag(self):
        assert ensure_route_import("<?php\n\nRoute::get('/');\n") == (
            f"<?php\n\n{ROUTE_FACADE_IMPORT}\n\nRoute::get('/');\n"
        )

    def test_byte_order_mark_stays_ahead_of_open_tag(self):
        result = ensure_route_import("\ufeff<?php\n\nRoute::get('/');\n")
        assert result == f"\ufeff<?php\n\n{ROUTE_FACADE_IMPORT}\n\nRoute::get('/');\n"

    def test_blank_lines_before_open_tag(self):
        result = ensure_route_import("\n\n<?php\nRoute::get('/');\n")
        assert result.index("<?php") < result.index(ROUTE_FACADE_IMPORT)
        assert result.startswith("\n\n<?php\n\n")

    def test_present_import_untouched(self):
        contents = f"<?php\n\n{ROUTE_FACADE_IMPORT}\n"
        assert ensure_route_import(contents) == contents


class TestRouteBlockUpserter:
    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "routes" / "web.php"
        result = RouteBlockUpserter(ScriptedPrompt()).upsert(path, "Product", BODY)

        assert result.status is ArtifactStatus.CREATED
        assert path.read_text(encoding="utf-8") == (
            f"<?php\n\n{ROUTE_FACADE_IMPORT}\n\n"
            f"{start_marker('Product')}\n{BODY}\n{end_marker('Product')}\n"
        )

    def test_many_resources_share_one_import(self, tmp_path):
        path = tmp_path / "web.php"
        upserter = RouteBlockUpserter(ScriptedPrompt())
        for key in ("Product", "Order", "Invoice", "Customer", "Supplier"):
            upserter.upsert(path, key, BODY.replace("products", key.lower() + "s"))

        contents = path.read_text(encoding="utf-8")
        assert contents.count(ROUTE_FACADE_IMPORT) == 1
        assert contents.count(":START") == 5

    def test_forced_rerun_is_byte_identical(self, tmp_path):
        path = tmp_path / "web.php"
        upserter = RouteBlockUpserter(ScriptedPrompt())
        upserter.upsert(path, "Product", BODY)
        first = path.read_bytes()

        result = upserter.upsert(path, "Product", BODY, force=True)

        assert path.read_bytes() == first
        assert result.status is ArtifactStatus.UPDATED
        assert result.message == "unchanged"

    def test_declined_replacement(self, tmp_path):
        path = tmp_path / "web.php"
        path.write_text("<?php\n\n// keep me\n\n" + build_block("Product", BODY), encoding="utf-8")
        before = path.read_text(encoding="utf-8")
        prompt = ScriptedPrompt([False])

        result = RouteBlockUpserter(prompt).upsert(path, "Product", NEW_BODY)

        assert result.status is ArtifactStatus.SKIPPED
        assert path.read_text(encoding="utf-8") == before
        assert prompt.questions == ["Routes block already exists for [Product]. Replace it?"]

    def test_confirmed_replacement_keeps_surroundings(self, tmp_path):
        path = tmp_path / "web.php"
        path.write_text(
            f"<?php\n\n{ROUTE_FACADE_IMPORT}\n\n// before\n\n"
            + build_block("Product", BODY)
            + "\n// after\n",
            encoding="utf-8",
        )

        RouteBlockUpserter(ScriptedPrompt([True])).upsert(path, "Product", NEW_BODY)

        contents = path.read_text(encoding="utf-8")
        assert "// before\n\n// CRUDPACK:Product:START\n" + NEW_BODY in contents
        assert contents.endswith("// CRUDPACK:Product:END\n\n// after\n")

    def test_malformed_file_is_not_written(self, tmp_path):
        path = tmp_path / "web.php"
        original = f"<?php\n\n{ROUTE_FACADE_IMPORT}\n\n{start_marker('Product')}\n{BODY}\n"
        path.write_text(original, encoding="utf-8")

        with pytest.raises(MalformedStateError):
            RouteBlockUpserter(ScriptedPrompt()).upsert(path, "Product", BODY, force=True)
        assert path.read_text(encoding="utf-8") == original
