"""Unit tests for route block parsing (crudpack.collection.parser)."""

from __future__ import annotations

import pytest

from crudpack.collection import ParsedResource, parse_resources

pytestmark = pytest.mark.unit

WIDGET_BLOCK = """// CRUDPACK:Widget:START
Route::delete('widgets/bulk', [\\App\\Http\\Controllers\\Api\\WidgetController::class, 'destroyBulk'])->name('api.widgets.destroyBulk');

Route::get('widgets/trash', [\\App\\Http\\Controllers\\Api\\WidgetController::class, 'trash'])->name('api.widgets.trash');

Route::apiResource('widgets', \\App\\Http\\Controllers\\Api\\WidgetController::class)->names('api.widgets');
// CRUDPACK:Widget:END
"""

GADGET_BLOCK = """// CRUDPACK:Gadget:START
// Soft Deletes disabled: uncomment the routes below after enabling SoftDeletes
// Route::get('gadgets/trash', [\\App\\Http\\Controllers\\Api\\GadgetController::class, 'trash'])->name('api.gadgets.trash');

Route::apiResource('gadgets', \\App\\Http\\Controllers\\Api\\GadgetController::class)->names('api.gadgets');
// CRUDPACK:Gadget:END
"""


class TestParseResources:
    def test_soft_resource(self):
        assert parse_resources("<?php\n\n" + WIDGET_BLOCK) == [
            ParsedResource(name="Widget", uri="widgets", soft=True)
        ]

    def test_commented_trash_route_is_not_soft(self):
        assert parse_resources(GADGET_BLOCK) == [ParsedResource(name="Gadget", uri="gadgets", soft=False)]

    def test_file_order(self):
        names = [r.name for r in parse_resources(GADGET_BLOCK + "\n" + WIDGET_BLOCK)]
        assert names == ["Gadget", "Widget"]

    def test_block_without_resource_is_skipped(self):
        broken = "// CRUDPACK:Broken:START\nRoute::get('x', fn () => 1);\n// CRUDPACK:Broken:END\n"
        assert [r.name for r in parse_resources(broken + WIDGET_BLOCK)] == ["Widget"]

    def test_unmatched_markers_are_ignored(self):
        assert parse_resources("// CRUDPACK:Widget:START\nRoute::apiResource('widgets', X::class);\n") == []

    def test_web_resource_registration(self):
        block = "// CRUDPACK:Post:START\nRoute::resource('posts', X::class);\n// CRUDPACK:Post:END\n"
        assert parse_resources(block) == [ParsedResource(name="Post", uri="posts", soft=False)]
