"""Unit tests for Blade view generation (crudpack.scaffolder.view_gen)."""

from __future__ import annotations

import pytest

from crudpack.errors import FileSystemError
from crudpack.planner.models import AuthStyle, SoftDeleteMode
from crudpack.scaffolder.view_gen import ViewGenerator
from crudpack.scaffolder.writer import ArtifactStatus

pytestmark = pytest.mark.unit


def generate_views(config, renderer, writer, plan, names) -> dict[str, str]:
    results = ViewGenerator(config, renderer, writer).generate(plan, names)
    assert all(r.status is ArtifactStatus.CREATED for r in results)
    return {r.label.split(":", 1)[1]: r.path.read_text(encoding="utf-8") for r in results}


class TestViewGenerator:
    def test_soft_views(self, config, renderer, writer, names, web_plan):
        views = generate_views(config, renderer, writer, web_plan, names)
        assert set(views) == {"index", "create", "edit", "show", "_form", "trash"}
        folder = config.views_dir / "product_categories"
        assert (folder / "index.blade.php").exists()
        assert (folder / "trash.blade.php").exists()

        index = views["index"]
        assert "@forelse($productCategories as $productCategory)" in index
        assert "route('product-categories.destroyBulk')" in index
        assert "route('product-categories.trash')" in index
        assert "Move To Trash (Selected)" in index
        assert "@can(" not in index

    def test_no_trash_view_without_soft_deletes(self, config, renderer, writer, names, make_plan):
        plan = make_plan(soft_delete_mode=SoftDeleteMode.OFF)
        views = generate_views(config, renderer, writer, plan, names)
        assert "trash" not in views
        assert "Permanently Delete (Selected)" in views["index"]
        assert "{{-- <a href=\"{{ route('product-categories.trash') }}\"" in views["index"]

    def test_policy_style_gates_buttons(self, config, renderer, writer, names, make_plan):
        plan = make_plan(auth_style=AuthStyle.GATE)
        views = generate_views(config, renderer, writer, plan, names)
        assert "@can('create', \\App\\Models\\ProductCategory::class)" in views["index"]
        assert "@can('deleteBulk', \\App\\Models\\ProductCategory::class)" in views["index"]
        assert "@can('update', $productCategory)" in views["show"]
        assert "@can('forceDeleteBulk'" in views["trash"]
        assert views["index"].count("@can(") == views["index"].count("@endcan")

    def test_form_pages_include_partial(self, config, renderer, writer, names, web_plan):
        views = generate_views(config, renderer, writer, web_plan, names)
        assert "@include('product_categories._form'" in views["create"]
        assert "route('product-categories.update', $productCategory)" in views["edit"]
        assert "old('name', $productCategory->name)" in views["_form"]
        assert "@forelse($items as $productCategory)" in views["trash"]

    def test_failing_view_does_not_stop_the_others(self, config, renderer, writer, names, web_plan, monkeypatch):
        original = renderer.render

        def flaky(template_id, context):
            if template_id == "views/show.stub":
                raise FileSystemError("Stub not found: views/show.stub", template_id)
            return original(template_id, context)

        monkeypatch.setattr(renderer, "render", flaky)
        results = ViewGenerator(config, renderer, writer).generate(web_plan, names)
        statuses = {r.label: r.status for r in results}
        assert statuses["view:show"] is ArtifactStatus.FAILED
        assert statuses["view:index"] is ArtifactStatus.CREATED
        assert statuses["view:trash"] is ArtifactStatus.CREATED
