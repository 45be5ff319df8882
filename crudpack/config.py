"""CrudPack configuration.

Centralised, typed configuration for every command.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

DEFAULT_APP_NAME = "Laravel"
DEFAULT_COLLECTION_PATH = "postman/CrudPack.postman_collection.json"
CONFIG_FILENAME = "crud-pack.json"


class NavResource(BaseModel):
    """One entry of the navigation dropdown (``config('crud-pack.resources')``).

    The navigation view links ``{route}.index``, ``{route}.create`` and, for
    soft-deleting resources, ``{route}.trash`` unless ``trash_route`` overrides it.
    """

    label: str = Field(..., description="Text shown in the navigation menu")
    route: str = Field(..., description="Base resource route name, e.g. 'products'")
    soft_deletes: bool = Field(default=False, description="Show the Trash link")
    trash_route: Optional[str] = Field(default=None, description="Override for the trash route name")

    @property
    def index_route(self) -> str:
        return f"{self.route}.index"

    @property
    def create_route(self) -> str:
        return f"{self.route}.create"

    @property
    def resolved_trash_route(self) -> Optional[str]:
        """Trash route name, or ``None`` when soft deletes are off."""
        if not self.soft_deletes:
            return None
        return self.trash_route or f"{self.route}.trash"


class CrudPackConfig(BaseModel):
    """Global CrudPack configuration.

    Holds the host project root plus every derived output location.  One
    instance is built by the CLI and passed explicitly to each command.
    """

    project_root: Path = Field(default=Path("."))
    app_name: str = Field(default=DEFAULT_APP_NAME)
    stubs_dir: Optional[Path] = Field(
        default=None,
        description="Directory whose stubs take precedence over the bundled ones",
    )
    collection_path: str = Field(default=DEFAULT_COLLECTION_PATH)
    resources: list[NavResource] = Field(default_factory=list)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def app_path(self) -> Path:
        return self.project_root / "app"

    @property
    def controllers_dir(self) -> Path:
        return self.app_path / "Http" / "Controllers"

    @property
    def api_controllers_dir(self) -> Path:
        return self.controllers_dir / "Api"

    @property
    def concerns_dir(self) -> Path:
        """Directory holding the shared ``HandlesDeletes`` trait."""
        return self.controllers_dir / "Concerns"

    @property
    def trait_path(self) -> Path:
        return self.concerns_dir / "HandlesDeletes.php"

    @property
    def requests_dir(self) -> Path:
        return self.app_path / "Http" / "Requests"

    @property
    def models_dir(self) -> Path:
        return self.app_path / "Models"

    @property
    def policies_dir(self) -> Path:
        return self.app_path / "Policies"

    @property
    def migrations_dir(self) -> Path:
        return self.project_root / "database" / "migrations"

    @property
    def views_dir(self) -> Path:
        return self.project_root / "resources" / "views"

    @property
    def web_routes_path(self) -> Path:
        return self.project_root / "routes" / "web.php"

    @property
    def api_routes_path(self) -> Path:
        return self.project_root / "routes" / "api.php"

    @property
    def bootstrap_app_path(self) -> Path:
        return self.project_root / "bootstrap" / "app.php"

    @property
    def artisan_path(self) -> Path:
        return self.project_root / "artisan"

    @property
    def collection_file(self) -> Path:
        """Absolute location of the Postman collection document."""
        return self.project_root / self.collection_path

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<project_root>/crud-pack.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.project_root / CONFIG_FILENAME)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "CrudPackConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, project_root: Path | None = None) -> "CrudPackConfig":
        """Build a ``CrudPackConfig`` from environment variables.

        Recognised variables (all optional):
            CRUDPACK_PROJECT_ROOT, CRUDPACK_APP_NAME, CRUDPACK_STUBS_DIR,
            CRUDPACK_COLLECTION_PATH.

        Without ``CRUDPACK_APP_NAME`` the host project's ``.env`` ``APP_NAME``
        is used, then ``"Laravel"``.
        """
        root = project_root or Path(os.environ.get("CRUDPACK_PROJECT_ROOT", "."))
        kwargs: dict[str, Any] = {"project_root": root}

        app_name = os.environ.get("CRUDPACK_APP_NAME") or read_dotenv_app_name(root)
        if app_name:
            kwargs["app_name"] = app_name
        if os.environ.get("CRUDPACK_STUBS_DIR"):
            kwargs["stubs_dir"] = Path(os.environ["CRUDPACK_STUBS_DIR"])
        if os.environ.get("CRUDPACK_COLLECTION_PATH"):
            kwargs["collection_path"] = os.environ["CRUDPACK_COLLECTION_PATH"]

        return cls(**kwargs)


_APP_NAME_LINE = re.compile(r"^\s*APP_NAME\s*=\s*(.*?)\s*$")


def read_dotenv_app_name(project_root: Path) -> Optional[str]:
    """Return ``APP_NAME`` from ``<project_root>/.env``, unquoted, or ``None``."""
    env_file = Path(project_root) / ".env"
    if not env_file.is_file():
        return None
    for line in env_file.read_text(encoding="utf-8").splitlines():
        match = _APP_NAME_LINE.match(line)
        if match:
            value = match.group(1).strip().strip("'\"")
            return value or None
    return None
