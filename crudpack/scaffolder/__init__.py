"""Artifact generation for CrudPack.

Exports the individual generators, the stub renderer and the file-write
policy.  The orchestrator lives in :mod:`crudpack.scaffolder.generator`;
it depends on :mod:`crudpack.routes`, which itself builds on the renderer
and writer exported here.
"""

from .api_install import dedupe_api_routing, ensure_api_routes_installed
from .controller_gen import ControllerGenerator
from .layout_gen import LayoutInstaller
from .migration_gen import MigrationGenerator
from .model_gen import ModelGenerator
from .policy_gen import PolicyGenerator
from .request_gen import RequestGenerator
from .templates import TemplateRenderer, substitute
from .trait_gen import TraitGenerator
from .view_gen import ViewGenerator
from .writer import ArtifactResult, ArtifactStatus, FileWriter

__all__ = [
    "ArtifactResult",
    "ArtifactStatus",
    "ControllerGenerator",
    "FileWriter",
    "LayoutInstaller",
    "MigrationGenerator",
    "ModelGenerator",
    "PolicyGenerator",
    "RequestGenerator",
    "TemplateRenderer",
    "TraitGenerator",
    "ViewGenerator",
    "dedupe_api_routing",
    "ensure_api_routes_installed",
    "substitute",
]
