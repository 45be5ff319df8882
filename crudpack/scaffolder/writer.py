"""File-write policy and per-artifact outcomes.

Every generated file goes through :meth:`FileWriter.write`:

* target missing -> written;
* target present and ``force`` -> overwritten;
* target present, no ``force`` -> the user is asked; declining is a skip,
  not an error.

Each call returns an ``ArtifactResult`` so the console transcript records
exactly what happened on disk.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from crudpack.prompts import PromptPort
from crudpack.utils import console, print_summary_table, write_text


class ArtifactStatus(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


_STATUS_STYLE: dict[ArtifactStatus, str] = {
    ArtifactStatus.CREATED: "green",
    ArtifactStatus.UPDATED: "cyan",
    ArtifactStatus.SKIPPED: "yellow",
    ArtifactStatus.FAILED: "bold red",
}


class ArtifactResult(BaseModel):
    """Outcome of producing one artifact."""

    label: str = Field(..., description="Artifact kind, e.g. 'controller' or 'view:index'")
    path: Path = Field(..., description="Target file")
    status: ArtifactStatus
    message: str = Field(default="", description="Reason for a skip or failure")


class FileWriter:
    """Applies the exists/force/confirm policy to each write."""

    def __init__(self, prompt: PromptPort, force: bool = False) -> None:
        self.prompt = prompt
        self.force = force

    def write(self, label: str, target: Path, content: str, *, ask: bool = True) -> ArtifactResult:
        """Write *content* to *target* according to the policy.

        Args:
            label: Artifact label used in the result.
            target: Destination path.
            content: Full file content.
            ask: When ``False`` an existing file is kept without asking
                (unless ``force``).

        Raises:
            FileSystemError: If the file cannot be written.
        """
        target = Path(target)
        existed = target.exists()

        if existed and not self.force:
            if not ask:
                return ArtifactResult(
                    label=label,
                    path=target,
                    status=ArtifactStatus.SKIPPED,
                    message="exists (use --force to overwrite)",
                )
            if not self.prompt.confirm(f"File exists: {target}. Replace it?", False):
                return ArtifactResult(
                    label=label, path=target, status=ArtifactStatus.SKIPPED, message="kept existing file"
                )

        write_text(target, content)
        return ArtifactResult(
            label=label,
            path=target,
            status=ArtifactStatus.UPDATED if existed else ArtifactStatus.CREATED,
        )


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def report_result(result: ArtifactResult) -> None:
    """Print one audit line for *result*."""
    style = _STATUS_STYLE[result.status]
    line = f"  [{style}]{result.status.value.capitalize():<8}[/{style}] {result.label}: {result.path}"
    if result.message:
        line += f" [dim]({result.message})[/dim]"
    console.print(line)


def report_summary(results: list[ArtifactResult], title: str = "Summary") -> None:
    """Print the count of results per status."""
    counts = {status.value.capitalize(): 0 for status in ArtifactStatus}
    for result in results:
        counts[result.status.value.capitalize()] += 1
    print_summary_table({key: str(value) for key, value in counts.items()}, title=title)


def failed_result(label: str, path: Path, exc: Exception) -> ArtifactResult:
    """Record an artifact that could not be produced."""
    return ArtifactResult(label=label, path=path, status=ArtifactStatus.FAILED, message=str(exc))
