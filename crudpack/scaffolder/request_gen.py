"""FormRequest generation (one request class shared by store and update)."""

from __future__ import annotations

from pathlib import Path

from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .base import ArtifactGenerator


class RequestGenerator(ArtifactGenerator):
    label = "request"
    template_id = "requests/request.stub"

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        return self.config.requests_dir / f"{names.class_name}Request.php"

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        return {
            "MODEL_CLASS": names.class_name,
            "TABLE": names.table,
            "ROUTE_PARAM": names.route_parameter,
        }
