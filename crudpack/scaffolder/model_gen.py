"""Eloquent model generation."""

from __future__ import annotations

from pathlib import Path

from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .base import ArtifactGenerator
from .soft_deletes import soft_block


class ModelGenerator(ArtifactGenerator):
    label = "model"
    template_id = "models/model.stub"

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        return self.config.models_dir / f"{names.class_name}.php"

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        return {
            "MODEL_CLASS": names.class_name,
            "TABLE": names.table,
            "SOFT_MODEL_IMPORT": soft_block(
                "use Illuminate\\Database\\Eloquent\\SoftDeletes;\n", plan.soft_deletes
            ),
            "SOFT_MODEL_USE": soft_block("    use SoftDeletes;\n", plan.soft_deletes),
        }
