"""Create-table migration generation.

At most one create-table migration may exist per table.  Existing
migrations are discovered by file-name suffix, both the Laravel form
(``2024_01_31_120000_create_products_table.php``) and the older form
without the separating underscore (``2024_01_31_120000createproducts_table.php``).
A discovered migration is overwritten in place (after confirmation)
instead of adding a second one.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from crudpack.naming import ResourceNames
from crudpack.planner.models import GenerationPlan
from crudpack.utils import print_warning, write_text

from .base import ArtifactGenerator
from .soft_deletes import soft_block
from .writer import ArtifactResult, ArtifactStatus

MIGRATION_TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"


class MigrationGenerator(ArtifactGenerator):
    label = "migration"
    template_id = "migrations/create_table.stub"

    def __init__(self, *args, clock: Optional[Callable[[], datetime]] = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.clock = clock or datetime.now

    def build_context(self, plan: GenerationPlan, names: ResourceNames) -> dict[str, str]:
        return {
            "TABLE": names.table,
            "SOFT_MIGRATION_COLUMN": soft_block(
                "            $table->softDeletes();\n", plan.soft_deletes
            ),
        }

    def target_path(self, plan: GenerationPlan, names: ResourceNames) -> Path:
        """Path for a brand-new migration stamped with the current time."""
        stamp = self.clock().strftime(MIGRATION_TIMESTAMP_FORMAT)
        return self.config.migrations_dir / f"{stamp}_create_{names.table}_table.php"

    def find_existing(self, table: str) -> list[Path]:
        """Every migration in the migrations directory that creates *table*, sorted by name."""
        directory = self.config.migrations_dir
        if not directory.is_dir():
            return []
        suffixes = (f"_create_{table}_table.php", f"create{table}_table.php")
        return sorted(
            (p for p in directory.iterdir() if p.is_file() and p.name.endswith(suffixes)),
            key=lambda p: p.name,
        )

    def generate(self, plan: GenerationPlan, names: ResourceNames) -> list[ArtifactResult]:
        content = self.renderer.render(self.template_id, self.build_context(plan, names))
        existing = self.find_existing(names.table)

        if not existing:
            return [self.writer.write(self.label, self.target_path(plan, names), content)]

        target = existing[0]
        if len(existing) > 1:
            print_warning(
                f"Found {len(existing)} migrations creating [{names.table}]: "
                + ", ".join(p.name for p in existing)
                + f". Using {target.name}."
            )

        if not plan.force:
            question = f"Migration for [{names.table}] already exists ({target.name}). Replace it?"
            if not self.writer.prompt.confirm(question, False):
                return [
                    ArtifactResult(
                        label=self.label,
                        path=target,
                        status=ArtifactStatus.SKIPPED,
                        message="kept existing migration",
                    )
                ]

        write_text(target, content)
        return [ArtifactResult(label=self.label, path=target, status=ArtifactStatus.UPDATED)]
