"""Exception hierarchy shared by every CrudPack component.

``ValidationError`` aborts a whole run before any file is touched.
``TemplateError`` and ``FileSystemError`` abort a single artifact; the
orchestrator records them as failed results and moves on.
``MalformedStateError`` flags on-disk state the generator refuses to guess
about (for example two marker pairs for the same route block).
"""

from __future__ import annotations

from pathlib import Path


class CrudPackError(Exception):
    """Base class for all CrudPack errors."""


class ValidationError(CrudPackError):
    """Raised for a bad resource name, conflicting flags or invalid options."""


class TemplateError(CrudPackError):
    """Raised when a rendered template still contains placeholders."""

    def __init__(self, template_id: str, leftovers: list[str]) -> None:
        self.template_id = template_id
        self.leftovers = sorted(set(leftovers))
        super().__init__(
            f"Unreplaced placeholders in template {template_id}: "
            + ", ".join(self.leftovers)
        )


class FileSystemError(CrudPackError):
    """Raised when a template cannot be read or a target cannot be written."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class MalformedStateError(CrudPackError):
    """Raised when an existing file is in a state the generator will not repair."""
