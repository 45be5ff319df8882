"""Route block body construction.

Literal-path routes (bulk, trash, restore, force delete) are declared
before the resourceful registration: a ``{id}`` route registered first
would capture ``/bulk`` or ``/trash`` as an identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from crudpack.config import CrudPackConfig
from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan
from crudpack.scaffolder.templates import TemplateRenderer

ROUTE_BLOCK_TEMPLATE = "routes/block.php.j2"

# (HTTP verb, path below the resource URI, controller method)
BULK_ROUTES: tuple[tuple[str, str, str], ...] = (
    ("delete", "bulk", "destroyBulk"),
)
SOFT_ROUTES: tuple[tuple[str, str, str], ...] = (
    ("get", "trash", "trash"),
    ("post", "{id}/restore", "restore"),
    ("post", "restore-bulk", "restoreBulk"),
    ("delete", "{id}/force", "forceDelete"),
    ("delete", "force-bulk", "forceDeleteBulk"),
)


@dataclass(frozen=True)
class RouteDeclarations:
    bulk: list[str]
    soft: list[str]
    resource: str


def controller_reference(plan: GenerationPlan, names: ResourceNames) -> str:
    namespace = "\\App\\Http\\Controllers" if plan.is_web else "\\App\\Http\\Controllers\\Api"
    return f"{namespace}\\{names.class_name}Controller::class"


def route_declarations(plan: GenerationPlan, names: ResourceNames) -> RouteDeclarations:
    """Every ``Route::`` statement for a resource, grouped by section."""
    controller = controller_reference(plan, names)
    name_prefix = "" if plan.is_web else "api."
    uri = names.uri

    def declare(verb: str, path: str, action: str) -> str:
        return (
            f"Route::{verb}('{uri}/{path}', [{controller}, '{action}'])"
            f"->name('{name_prefix}{names.route_name}.{action}');"
        )

    if plan.is_web:
        resource = f"Route::resource('{uri}', {controller});"
    else:
        resource = f"Route::apiResource('{uri}', {controller})->names('api.{names.route_name}');"

    return RouteDeclarations(
        bulk=[declare(*route) for route in BULK_ROUTES],
        soft=[declare(*route) for route in SOFT_ROUTES],
        resource=resource,
    )


class RouteBlockBuilder:
    """Renders the body of a resource's route block."""

    def __init__(self, config: CrudPackConfig, renderer: TemplateRenderer) -> None:
        self.config = config
        self.renderer = renderer

    def routes_path(self, plan: GenerationPlan) -> Path:
        return self.config.web_routes_path if plan.is_web else self.config.api_routes_path

    def build(self, plan: GenerationPlan, names: ResourceNames) -> str:
        declarations = route_declarations(plan, names)
        return self.renderer.render_template(
            ROUTE_BLOCK_TEMPLATE,
            {
                "bulk_routes": declarations.bulk,
                "soft_routes": declarations.soft,
                "resource_route": declarations.resource,
                "soft": plan.soft_deletes,
            },
        )
