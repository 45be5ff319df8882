"""Shared pytest fixtures for the CrudPack test suite.

Provides reusable fixtures for:
- A temporary Laravel-shaped project root and its ``CrudPackConfig``
- The bundled stub renderer
- Scripted prompts and a fixed clock
- Derived resource names and ready-made generation plans
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pytest

from crudpack.config import CrudPackConfig
from crudpack.naming import ResourceNames, derive
from crudpack.planner.models import AuthStyle, ControllerKind, GenerationPlan, SoftDeleteMode
from crudpack.prompts import ScriptedPrompt
from crudpack.scaffolder.templates import TemplateRenderer
from crudpack.scaffolder.writer import FileWriter


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary Laravel project skeleton (auto-cleanup).

    Only the directories a fresh Laravel 11 app has; route files are left
    to each test.
    """
    root = tmp_path / "laravel-app"
    for directory in (
        "app/Http/Controllers",
        "app/Models",
        "database/migrations",
        "resources/views",
        "routes",
        "bootstrap",
    ):
        (root / directory).mkdir(parents=True)
    (root / ".env").write_text("APP_NAME=Shop\nAPP_ENV=local\n", encoding="utf-8")
    yield root


@pytest.fixture
def config(project_root: Path) -> CrudPackConfig:
    """Configuration pointing at the temporary project."""
    return CrudPackConfig(project_root=project_root, app_name="Shop")


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled stubs."""
    return TemplateRenderer()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    """Prompt with no canned answers: every question gets its default."""
    return ScriptedPrompt()


@pytest.fixture
def writer(prompt: ScriptedPrompt) -> FileWriter:
    return FileWriter(prompt, force=False)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock frozen at 2024-05-01 12:30:45."""
    return lambda: datetime(2024, 5, 1, 12, 30, 45)


# ---------------------------------------------------------------------------
# Names & plans
# ---------------------------------------------------------------------------

@pytest.fixture
def names() -> ResourceNames:
    return derive("ProductCategory")


@pytest.fixture
def make_plan() -> Callable[..., GenerationPlan]:
    """Factory for plans; defaults to a web, soft-deleting, everything-on plan."""

    def _make(**overrides: Any) -> GenerationPlan:
        values: dict[str, Any] = {
            "controller_kind": ControllerKind.WEB,
            "soft_delete_mode": SoftDeleteMode.ON,
            "auth_style": AuthStyle.NONE,
            "routes": True,
            "request": True,
            "model": True,
            "migration": True,
            "policy": True,
            "views": True,
            "force": False,
        }
        values.update(overrides)
        if values["controller_kind"] is ControllerKind.API and "views" not in overrides:
            values["views"] = False
        return GenerationPlan(**values)

    return _make


@pytest.fixture
def web_plan(make_plan: Callable[..., GenerationPlan]) -> GenerationPlan:
    return make_plan()


@pytest.fixture
def api_plan(make_plan: Callable[..., GenerationPlan]) -> GenerationPlan:
    return make_plan(controller_kind=ControllerKind.API)
