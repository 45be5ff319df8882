"""Shared ``HandlesDeletes`` controller trait.

The trait is a superset used by every generated controller: it carries
bulk delete, trash, restore and force-delete endpoints and guards the
soft-delete ones at runtime, so it has no placeholders and does not vary
with the plan.
"""

from __future__ import annotations

from pathlib import Path

from crudpack.config import CrudPackConfig

from .templates import TemplateRenderer
from .writer import ArtifactResult, FileWriter

TRAIT_TEMPLATE = "traits/HandlesDeletes.stub"


class TraitGenerator:
    label = "trait"
    template_id = TRAIT_TEMPLATE

    def __init__(self, config: CrudPackConfig, renderer: TemplateRenderer, writer: FileWriter) -> None:
        self.config = config
        self.renderer = renderer
        self.writer = writer

    def target_path(self) -> Path:
        return self.config.trait_path

    def generate(self, *, ask: bool = True) -> ArtifactResult:
        """Write the trait.

        Args:
            ask: ``True`` for the standalone command (confirm before
                replacing).  ``False`` when ``make`` only ensures the trait
                exists: an existing trait is kept unless ``force``.
        """
        content = self.renderer.render(self.template_id, {})
        return self.writer.write(self.label, self.target_path(), content, ask=ask)
