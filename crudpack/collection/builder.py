"""Postman v2.1 document pieces.

URLs reference the collection variables ``{{base_url}}`` and
``{{api_prefix}}``.  The paginated list endpoints use the structured URL
form with a disabled ``page`` query parameter: Postman renders a raw
``?page=`` string with no value as a broken request.
"""

from __future__ import annotations

import json
from typing import Any

COLLECTION_NAME = "CrudPack"
COLLECTION_SCHEMA = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
OWNED_FOLDER_MARKER = "generated-by-crud-pack"

DEFAULT_VARIABLES: tuple[tuple[str, str], ...] = (
    ("base_url", "http://localhost"),
    ("api_prefix", "api"),
)

BULK_EXAMPLE_BODY: dict[str, Any] = {"ids": [1, 2, 3]}
RECORD_EXAMPLE_BODY: dict[str, Any] = {"name": "Example"}

_URL_BASE = "{{base_url}}/{{api_prefix}}"


def api_url(path: str) -> str:
    return f"{_URL_BASE}/{path.lstrip('/')}"


def paginated_url(path: str) -> dict[str, Any]:
    segments = ["{{api_prefix}}", *path.strip("/").split("/")]
    return {
        "raw": api_url(path),
        "host": ["{{base_url}}"],
        "path": segments,
        "query": [
            {
                "key": "page",
                "value": "1",
                "disabled": True,
                "description": "Page number for paginated results",
            }
        ],
    }


def postman_request(
    name: str,
    method: str,
    path: str,
    *,
    body: dict[str, Any] | None = None,
    paginated: bool = False,
) -> dict[str, Any]:
    """A single request item.  Requests with a body send raw JSON."""
    headers = [{"key": "Accept", "value": "application/json"}]
    request: dict[str, Any] = {
        "method": method.upper(),
        "header": headers,
        "url": paginated_url(path) if paginated else api_url(path),
    }
    if body is not None:
        headers.append({"key": "Content-Type", "value": "application/json"})
        request["body"] = {
            "mode": "raw",
            "raw": json.dumps(body, indent=4),
            "options": {"raw": {"language": "json"}},
        }
    return {"name": name, "request": request}


def build_resource_folder(name: str, uri: str, soft: bool) -> dict[str, Any]:
    """The generator-owned folder for one resource."""
    items = [
        postman_request(f"GetAll{name}", "GET", uri, paginated=True),
        postman_request(f"Get{name}", "GET", f"{uri}/:id"),
        postman_request(f"Store{name}", "POST", uri, body=RECORD_EXAMPLE_BODY),
        postman_request(f"Update{name}", "PUT", f"{uri}/:id", body=RECORD_EXAMPLE_BODY),
        postman_request(f"Destroy{name}", "DELETE", f"{uri}/:id"),
        postman_request(f"Destroy{name}Bulk", "DELETE", f"{uri}/bulk", body=BULK_EXAMPLE_BODY),
    ]
    if soft:
        items += [
            postman_request(f"Trash{name}", "GET", f"{uri}/trash", paginated=True),
            postman_request(f"Restore{name}", "POST", f"{uri}/:id/restore"),
            postman_request(f"Restore{name}Bulk", "POST", f"{uri}/restore-bulk", body=BULK_EXAMPLE_BODY),
            postman_request(f"ForceDelete{name}", "DELETE", f"{uri}/:id/force"),
            postman_request(f"ForceDelete{name}Bulk", "DELETE", f"{uri}/force-bulk", body=BULK_EXAMPLE_BODY),
        ]
    return {"name": name, "description": OWNED_FOLDER_MARKER, "item": items}


def ensure_variables(variables: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Add missing default variables; existing entries keep their values."""
    present = {var.get("key") for var in variables if isinstance(var, dict)}
    merged = list(variables)
    for key, value in DEFAULT_VARIABLES:
        if key not in present:
            merged.append({"key": key, "value": value})
    return merged


def empty_collection(app_name: str) -> dict[str, Any]:
    return {
        "info": {"name": COLLECTION_NAME, "schema": COLLECTION_SCHEMA},
        "item": [{"name": app_name, "item": []}],
        "variable": ensure_variables([]),
    }
