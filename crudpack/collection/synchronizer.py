"""Merge parsed route blocks into the request collection document."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Optional

from crudpack.config import CrudPackConfig
from crudpack.errors import FileSystemError
from crudpack.utils import load_json, print_info, print_warning, read_text, save_json

from .builder import OWNED_FOLDER_MARKER, build_resource_folder, empty_collection, ensure_variables
from .parser import ParsedResource, parse_resources


def is_owned(item: Any) -> bool:
    return isinstance(item, dict) and item.get("description") == OWNED_FOLDER_MARKER


def _is_folder(item: Any) -> bool:
    return isinstance(item, dict) and isinstance(item.get("item"), list)


def is_well_formed(document: Any) -> bool:
    return isinstance(document, dict) and "info" in document and isinstance(document.get("item"), list)


class CollectionSynchronizer:
    """Rebuilds generator-owned folders from a route file.

    Args:
        app_name: Name of the top-level folder holding the resource folders.
    """

    def __init__(self, app_name: str) -> None:
        self.app_name = app_name

    def _app_folder(self, document: dict[str, Any]) -> dict[str, Any]:
        for item in document["item"]:
            if _is_folder(item) and item.get("name") == self.app_name:
                return item
        folder: dict[str, Any] = {"name": self.app_name, "item": []}
        document["item"].append(folder)
        return folder

    def merge(
        self,
        resources: list[ParsedResource],
        existing: Optional[dict[str, Any]],
        force: bool = False,
    ) -> dict[str, Any]:
        """Upsert one folder per resource into a copy of *existing*.

        ``force`` first removes every generator-owned folder, so the result
        mirrors the route file exactly.  Without it, folders of resources no
        longer in the route file are left in place.
        """
        if is_well_formed(existing):
            document = copy.deepcopy(existing)
            document["variable"] = ensure_variables(document.get("variable") or [])
        else:
            document = empty_collection(self.app_name)

        folder = self._app_folder(document)
        if force:
            folder["item"] = [item for item in folder["item"] if not is_owned(item)]

        for resource in resources:
            built = build_resource_folder(resource.name, resource.uri, resource.soft)
            for index, item in enumerate(folder["item"]):
                if is_owned(item) and item.get("name") == resource.name:
                    folder["item"][index] = built
                    break
            else:
                folder["item"].append(built)
        return document

    def sync(
        self,
        route_content: str,
        existing: Optional[dict[str, Any]] = None,
        force: bool = False,
    ) -> dict[str, Any]:
        """Parse *route_content* and merge the result into *existing*."""
        return self.merge(parse_resources(route_content), existing, force)


def _load_existing(path: Path) -> Optional[dict[str, Any]]:
    if not path.exists():
        return None
    try:
        document = load_json(path)
    except FileSystemError as exc:
        print_warning(f"{exc}; starting a new collection.")
        return None
    except json.JSONDecodeError:
        print_warning(f"{path} is not valid JSON; starting a new collection.")
        return None
    if not is_well_formed(document):
        print_warning(f"{path} is not a Postman collection; starting a new collection.")
        return None
    return document


def sync_collection_file(
    config: CrudPackConfig,
    routes_file: Optional[Path] = None,
    force: bool = False,
) -> Optional[Path]:
    """Sync the collection file from the API route file.

    Returns:
        The written collection path, or ``None`` when the route file holds
        no usable blocks.

    Raises:
        FileSystemError: If the route file is missing or a file cannot be
            read or written.
    """
    routes_path = Path(routes_file) if routes_file is not None else config.api_routes_path
    if not routes_path.exists():
        raise FileSystemError(f"Route file not found: {routes_path}", routes_path)

    resources = parse_resources(read_text(routes_path))
    if not resources:
        print_warning(f"No CRUDPACK blocks found in {routes_path}. Nothing to generate.")
        return None

    target = config.collection_file
    synchronizer = CollectionSynchronizer(config.app_name)
    document = synchronizer.merge(resources, _load_existing(target), force)
    save_json(document, target)
    print_info(f"Postman collection updated: {target}")
    return target
