"""Web and API controller generation."""

from __future__ import annotations

from pathlib import Path

from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .auth import API_ACTIONS, WEB_ACTIONS, controller_auth_context
from .base import ArtifactGenerator
from .soft_deletes import soft_block


class ControllerGenerator(ArtifactGenerator):
    """Generates ``{Model}Controller`` for web (Blade) or API (JSON) use.

    The controller is always generated.  It always imports
    ``Illuminate\\Http\\Request`` because the bulk and trash endpoints
    provided by ``HandlesDeletes`` need it; with a FormRequest the store and
    update actions type-hint that instead and use ``validated()``.
    """

    label = "controller"

    WEB_TEMPLATE = "controllers/web.controller.stub"
    API_TEMPLATE = "controllers/api.controller.stub"

    def template_for(self, plan: GenerationPlan) -> str:
        return self.WEB_TEMPLATE if plan.is_web else self.API_TEMPLATE

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        directory = self.config.controllers_dir if plan.is_web else self.config.api_controllers_dir
        return directory / f"{names.class_name}Controller.php"

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        request_import = "use Illuminate\\Http\\Request;\n"
        request_typehint = "Request"
        request_data = "$request->all()"
        if plan.request:
            request_import += f"use App\\Http\\Requests\\{names.class_name}Request;\n"
            request_typehint = f"{names.class_name}Request"
            request_data = "$request->validated()"

        trashed_total = soft_block(
            f"        $trashedTotal = {names.class_name}::onlyTrashed()->count();\n",
            plan.soft_deletes,
        )

        context = {
            "MODEL_CLASS": names.class_name,
            "MODEL_VAR": names.variable,
            "MODEL_VAR_PLURAL": names.plural_variable,
            "ROUTE_NAME": names.route_name,
            "REQUEST_IMPORT": request_import,
            "REQUEST_TYPEHINT": request_typehint,
            "REQUEST_DATA": request_data,
            "POLICY_STYLE": plan.auth_style.value,
            "SOFT_TRASHED_TOTAL": trashed_total,
        }
        if plan.is_web:
            context["VIEW_FOLDER"] = names.view_folder

        actions = WEB_ACTIONS if plan.is_web else API_ACTIONS
        context.update(controller_auth_context(plan.auth_style, names, actions))
        return context
