"""Blade view generation (web controllers only).

Each view stub declares a fixed set of placeholders, listed in ``VIEWS``.
Permission wrappers (``BLADE_CAN_*``) resolve to ``@can``/``@endcan`` when an
authorization style is active and to empty strings otherwise, so under
``none`` every button is visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from crudpack.errors import CrudPackError
from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .auth import blade_guard_context
from .base import ArtifactGenerator
from .soft_deletes import soft_block
from .writer import ArtifactResult, failed_result


def _guards(*names: str) -> tuple[str, ...]:
    return tuple(f"BLADE_CAN_{name}_{edge}" for name in names for edge in ("BEGIN", "END"))


@dataclass(frozen=True)
class ViewSpec:
    template_id: str
    filename: str
    placeholders: tuple[str, ...]
    soft_only: bool = False


VIEWS: dict[str, ViewSpec] = {
    "index": ViewSpec(
        "views/index.stub",
        "index.blade.php",
        ("MODEL_CLASS", "ROUTE_NAME", "BULK_DELETE_BLOCK", "TRASH_LINK", *_guards("CREATE")),
    ),
    "create": ViewSpec(
        "views/create.stub",
        "create.blade.php",
        ("MODEL_CLASS", "MODEL_VAR", "ROUTE_NAME", "VIEW_FOLDER"),
    ),
    "edit": ViewSpec(
        "views/edit.stub",
        "edit.blade.php",
        ("MODEL_CLASS", "MODEL_VAR", "ROUTE_NAME", "VIEW_FOLDER"),
    ),
    "show": ViewSpec(
        "views/show.stub",
        "show.blade.php",
        ("MODEL_CLASS", "MODEL_VAR", "ROUTE_NAME", *_guards("UPDATE", "DELETE")),
    ),
    "_form": ViewSpec(
        "views/_form.stub",
        "_form.blade.php",
        ("MODEL_VAR",),
    ),
    "trash": ViewSpec(
        "views/trash.stub",
        "trash.blade.php",
        (
            "MODEL_CLASS",
            "MODEL_VAR",
            "ROUTE_NAME",
            *_guards("RESTORE", "RESTORE_BULK", "FORCE_DELETE", "FORCE_DELETE_BULK"),
        ),
        soft_only=True,
    ),
}

BULK_TABLE_TEMPLATE = "views/partials/bulk_table.stub"
BULK_TABLE_PLACEHOLDERS: tuple[str, ...] = (
    "ROUTE_NAME",
    "MODEL_VAR",
    "MODEL_VAR_PLURAL",
    "DELETE_ICON",
    "DELETE_TITLE",
    "BULK_CONFIRM",
    "BULK_LABEL",
    *_guards("DELETE_BULK", "UPDATE", "DELETE"),
)


class ViewGenerator(ArtifactGenerator):
    label = "view"

    def target_dir(self, names: ResourceNames) -> Path:
        return self.config.views_dir / names.view_folder

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        return self.target_dir(names)

    # -- Context -----------------------------------------------------------

    def _pool(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        guards = blade_guard_context(plan.auth_style, names)
        pool = {
            "MODEL_CLASS": names.class_name,
            "MODEL_VAR": names.variable,
            "MODEL_VAR_PLURAL": names.plural_variable,
            "ROUTE_NAME": names.route_name,
            "VIEW_FOLDER": names.view_folder,
            **guards,
        }
        if plan.soft_deletes:
            pool.update({
                "DELETE_ICON": "<i class='fa-solid fa-trash'></i>",
                "DELETE_TITLE": "Move To Trash",
                "BULK_CONFIRM": "return confirm('Move selected records to trash?')",
                "BULK_LABEL": "Move To Trash (Selected)",
            })
        else:
            pool.update({
                "DELETE_ICON": "<i class='fa-solid fa-skull-crossbones'></i>",
                "DELETE_TITLE": "Permanently Delete",
                "BULK_CONFIRM": "return confirm('Permanently delete selected records? This cannot be undone.')",
                "BULK_LABEL": "Permanently Delete (Selected)",
            })

        trash_link = (
            guards["BLADE_CAN_TRASH_BEGIN"]
            + f"            <a href=\"{{{{ route('{names.route_name}.trash') }}}}\" class=\"btn btn-outline-secondary\">\n"
            + "                <i class='fa-solid fa-trash-can'></i> Trash\n"
            + "            </a>"
            + guards["BLADE_CAN_TRASH_END"]
            + "\n"
        )
        pool["TRASH_LINK"] = soft_block(trash_link, plan.soft_deletes, blade=True)
        return pool

    def build_bulk_table(self, plan: GenerationPlan, names: ResourceNames) -> str:
        """Render the index page's bulk toolbar and table partial."""
        pool = self._pool(plan, names)
        context = {key: pool[key] for key in BULK_TABLE_PLACEHOLDERS}
        return self.renderer.render(BULK_TABLE_TEMPLATE, context)

    def build_view_context(self, view: str, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        """Exactly the placeholders declared for *view*."""
        entry = VIEWS[view]
        pool = self._pool(plan, names)
        if "BULK_DELETE_BLOCK" in entry.placeholders:
            pool["BULK_DELETE_BLOCK"] = self.build_bulk_table(plan, names)
        return {key: pool[key] for key in entry.placeholders}

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        return self.build_view_context("index", plan, names)

    # -- Generation --------------------------------------------------------

    def views_for(self, plan: GenerationPlan) -> list[str]:
        return [name for name, entry in VIEWS.items() if plan.soft_deletes or not entry.soft_only]

    def generate(self, plan: GenerationPlan, names: ResourceNames) -> list[ArtifactResult]:
        """Render every view; a failing view does not stop the others."""
        results: list[ArtifactResult] = []
        directory = self.target_dir(names)
        for view in self.views_for(plan):
            entry = VIEWS[view]
            label = f"view:{view}"
            target = directory / entry.filename
            try:
                content = self.renderer.render(entry.template_id, self.build_view_context(view, plan, names))
                results.append(self.writer.write(label, target, content))
            except CrudPackError as exc:
                results.append(failed_result(label, target, exc))
        return results
