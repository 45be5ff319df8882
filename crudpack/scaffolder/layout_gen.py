"""Base layout installation (``crudpack install``).

Copies the Bootstrap layout, the navigation bar driven by
``config('crud-pack.resources')`` and a welcome page into
``resources/views``.
"""

from __future__ import annotations

from pathlib import Path

from crudpack.config import CrudPackConfig
from crudpack.errors import CrudPackError

from .templates import TemplateRenderer
from .writer import ArtifactResult, FileWriter, failed_result

# Stub id -> path relative to resources/views
LAYOUT_FILES: dict[str, str] = {
    "layouts/app.stub": "layouts/app.blade.php",
    "layouts/navigation.stub": "layouts/navigation.blade.php",
    "layouts/welcome.stub": "welcome.blade.php",
}


class LayoutInstaller:
    def __init__(self, config: CrudPackConfig, renderer: TemplateRenderer, writer: FileWriter) -> None:
        self.config = config
        self.renderer = renderer
        self.writer = writer

    def targets(self) -> dict[str, Path]:
        return {stub: self.config.views_dir / rel for stub, rel in LAYOUT_FILES.items()}

    def install(self) -> list[ArtifactResult]:
        results: list[ArtifactResult] = []
        for stub, target in self.targets().items():
            label = f"layout:{target.name}"
            try:
                content = self.renderer.render(stub, {})
                results.append(self.writer.write(label, target, content))
            except CrudPackError as exc:
                results.append(failed_result(label, target, exc))
        return results
