"""Recover resource metadata from CRUDPACK route blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass

from crudpack.utils import print_warning

BLOCK_PATTERN = re.compile(
    r"//\s*CRUDPACK:([A-Za-z0-9_]+):START\s*(.*?)//\s*CRUDPACK:\1:END",
    re.DOTALL,
)
RESOURCE_URI_PATTERN = re.compile(r"Route::(?:apiResource|resource)\(\s*'([^']+)'\s*,")


@dataclass(frozen=True)
class ParsedResource:
    name: str
    uri: str
    soft: bool


def _trash_route_pattern(uri: str) -> re.Pattern[str]:
    # Anchored to line start so a commented-out trash route does not count.
    return re.compile(r"^\s*Route::get\(\s*'" + re.escape(uri) + r"/trash'", re.MULTILINE)


def parse_resources(contents: str) -> list[ParsedResource]:
    """Every well-formed resource block in *contents*, in file order.

    A block without a resourceful registration has no recoverable URI and
    is skipped with a warning.  When the same name appears twice the later
    block wins.
    """
    resources: dict[str, ParsedResource] = {}
    for match in BLOCK_PATTERN.finditer(contents):
        name, block = match.group(1), match.group(2)
        uri_match = RESOURCE_URI_PATTERN.search(block)
        if uri_match is None:
            print_warning(f"Skipping route block [{name}]: no resource registration found.")
            continue
        uri = uri_match.group(1)
        resources[name] = ParsedResource(
            name=name,
            uri=uri,
            soft=bool(_trash_route_pattern(uri).search(block)),
        )
    return list(resources.values())
