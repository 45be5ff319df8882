"""Main generation orchestrator.

Takes a resolved ``GenerationPlan`` and a derived ``ResourceNames`` and
produces every requested artifact in a fixed order.  Each step is isolated:
a ``TemplateError`` or ``FileSystemError`` in one artifact becomes a
``failed`` result and the remaining steps still run.  Nothing already
written is rolled back.
"""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from crudpack.collection import sync_collection_file
from crudpack.config import CrudPackConfig
from crudpack.errors import CrudPackError
from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan
from crudpack.prompts import PromptPort
from crudpack.routes import RouteBlockBuilder, RouteBlockUpserter

from .api_install import Runner, ensure_api_routes_installed
from .base import ArtifactGenerator
from .controller_gen import ControllerGenerator
from .migration_gen import MigrationGenerator
from .model_gen import ModelGenerator
from .policy_gen import PolicyGenerator
from .request_gen import RequestGenerator
from .templates import TemplateRenderer
from .trait_gen import TraitGenerator
from .view_gen import ViewGenerator
from .writer import ArtifactResult, ArtifactStatus, FileWriter, failed_result


class ResourceGenerator:
    """Generates all artifacts of one resource.

    Args:
        config: Project configuration (output locations).
        prompt: Asked before overwriting existing files.
        renderer: Stub renderer.  Defaults to the bundled stubs plus the
            configured override directory.
        clock: Time source for new migration file names.
        runner: Subprocess runner used for ``php artisan install:api``.
    """

    def __init__(
        self,
        config: CrudPackConfig,
        prompt: PromptPort,
        renderer: Optional[TemplateRenderer] = None,
        clock: Optional[Callable[[], datetime]] = None,
        runner: Runner = subprocess.run,
    ) -> None:
        self.config = config
        self.prompt = prompt
        self.renderer = renderer or TemplateRenderer(override_dir=config.stubs_dir)
        self.clock = clock
        self.runner = runner

    # -- Public API --------------------------------------------------------

    def generate(self, plan: GenerationPlan, names: ResourceNames) -> list[ArtifactResult]:
        """Produce every artifact the plan asks for.

        Returns:
            One result per artifact, in generation order.
        """
        writer = FileWriter(self.prompt, force=plan.force)
        results: list[ArtifactResult] = []

        # 1. API routing bootstrap (Laravel 11+ ships without routes/api.php)
        if plan.is_api and plan.routes:
            ensure_api_routes_installed(self.config, runner=self.runner)

        # 2. Shared trait: written when missing, replaced only with --force
        trait = TraitGenerator(self.config, self.renderer, writer)
        results += self._step("trait", trait.target_path(), lambda: [trait.generate(ask=False)])

        # 3. Controller (always)
        results += self._run(ControllerGenerator(self.config, self.renderer, writer), plan, names)

        # 4. Request
        if plan.request:
            results += self._run(RequestGenerator(self.config, self.renderer, writer), plan, names)

        # 5. Model
        if plan.model:
            results += self._run(ModelGenerator(self.config, self.renderer, writer), plan, names)

        # 6. Migration
        if plan.migration:
            migration = MigrationGenerator(self.config, self.renderer, writer, clock=self.clock)
            results += self._run(migration, plan, names, target=self.config.migrations_dir)

        # 7. Policy
        if plan.policy:
            results += self._run(PolicyGenerator(self.config, self.renderer, writer), plan, names)

        # 8. Views (web only; the plan rejects views for API controllers)
        if plan.views:
            views = ViewGenerator(self.config, self.renderer, writer)
            results += self._run(views, plan, names, target=views.target_dir(names))

        # 9. Route block
        if plan.routes:
            results += self._upsert_routes(plan, names)

        # 10. Request collection (API only)
        if plan.is_api and plan.routes and self._routes_written(results):
            results += self._sync_collection()

        return results

    # -- Steps -------------------------------------------------------------

    @staticmethod
    def _step(
        label: str,
        target: Path,
        action: Callable[[], list[ArtifactResult]],
    ) -> list[ArtifactResult]:
        try:
            return action()
        except CrudPackError as exc:
            return [failed_result(label, target, exc)]

    def _run(
        self,
        generator: ArtifactGenerator,
        plan: GenerationPlan,
        names: ResourceNames,
        target: Optional[Path] = None,
    ) -> list[ArtifactResult]:
        if target is None:
            target = generator.target_path(plan, names)
        return self._step(generator.label, target, lambda: generator.generate(plan, names))

    def _upsert_routes(self, plan: GenerationPlan, names: ResourceNames) -> list[ArtifactResult]:
        builder = RouteBlockBuilder(self.config, self.renderer)
        upserter = RouteBlockUpserter(self.prompt)
        path = builder.routes_path(plan)
        return self._step(
            upserter.label,
            path,
            lambda: [upserter.upsert(path, names.class_name, builder.build(plan, names), force=plan.force)],
        )

    @staticmethod
    def _routes_written(results: list[ArtifactResult]) -> bool:
        return any(
            r.label == RouteBlockUpserter.label and r.status in (ArtifactStatus.CREATED, ArtifactStatus.UPDATED)
            for r in results
        )

    def _sync_collection(self) -> list[ArtifactResult]:
        target = self.config.collection_file
        existed = target.exists()

        def sync() -> list[ArtifactResult]:
            written = sync_collection_file(self.config)
            if written is None:
                return []
            status = ArtifactStatus.UPDATED if existed else ArtifactStatus.CREATED
            return [ArtifactResult(label="postman", path=written, status=status)]

        return self._step("postman", target, sync)
