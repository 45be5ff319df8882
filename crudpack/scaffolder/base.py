"""Common shape of every artifact generator.

A generator pairs a stub id with a context builder and a target path, and
hands the rendered text to the shared ``FileWriter``.
"""

from __future__ import annotations

from pathlib import Path

from crudpack.config import CrudPackConfig
from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan

from .templates import TemplateRenderer
from .writer import ArtifactResult, FileWriter


class ArtifactGenerator:
    """Renders one stub into one file.

    Subclasses set ``label`` and ``template_id`` and implement
    :meth:`build_context` and :meth:`target_path`.
    """

    label: str = ""
    template_id: str = ""

    def __init__(self, config: CrudPackConfig, renderer: TemplateRenderer, writer: FileWriter) -> None:
        self.config = config
        self.renderer = renderer
        self.writer = writer

    def template_for(self, plan: GenerationPlan) -> str:
        return self.template_id

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        raise NotImplementedError

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        raise NotImplementedError

    def generate(self, plan: GenerationPlan, names: ResourceNames) -> list[ArtifactResult]:
        """Render the stub and write it through the file-write policy."""
        content = self.renderer.render(self.template_for(plan), self.build_context(plan, names))
        return [self.writer.write(self.label, self.target_path(plan, names), content)]
