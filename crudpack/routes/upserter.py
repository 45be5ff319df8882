"""Insert or replace a marker-delimited block inside a route file.

The merge itself (:func:`merge_block`) is a pure text function; the
:class:`RouteBlockUpserter` adds the read, the overwrite confirmation and
the whole-file write.  Applying the same block twice yields byte-identical
output.
"""

from __future__ import annotations

import re
from pathlib import Path

from crudpack.errors import MalformedStateError
from crudpack.prompts import PromptPort
from crudpack.scaffolder.writer import ArtifactResult, ArtifactStatus
from crudpack.utils import read_text, write_text

ROUTE_FACADE_IMPORT = "use Illuminate\\Support\\Facades\\Route;"
EMPTY_ROUTES_FILE = f"<?php\n\n{ROUTE_FACADE_IMPORT}\n\n"
MARKER_PREFIX = "// CRUDPACK:"

# Optional BOM and leading blank lines are kept ahead of the tag.
_PHP_OPEN_TAG = re.compile(r"^(\ufeff?\s*)<\?php\s*")


def start_marker(key: str) -> str:
    return f"{MARKER_PREFIX}{key}:START"


def end_marker(key: str) -> str:
    return f"{MARKER_PREFIX}{key}:END"


def build_block(key: str, body: str) -> str:
    """``START`` line, body, ``END`` line, newline-terminated."""
    return f"{start_marker(key)}\n{body.strip(chr(10))}\n{end_marker(key)}\n"


def ensure_route_import(contents: str) -> str:
    """Add the ``Route`` facade import right after ``<?php`` unless already present."""
    if ROUTE_FACADE_IMPORT in contents:
        return contents
    if _PHP_OPEN_TAG.match(contents):
        return _PHP_OPEN_TAG.sub(
            lambda m: f"{m.group(1)}<?php\n\n{ROUTE_FACADE_IMPORT}\n\n", contents, count=1
        )
    return f"{ROUTE_FACADE_IMPORT}\n\n{contents}"


def has_block(contents: str, key: str) -> bool:
    """Whether *contents* holds a well-formed block for *key*.

    Raises:
        MalformedStateError: On orphaned, duplicated or reversed markers.
    """
    start, end = start_marker(key), end_marker(key)
    starts, ends = contents.count(start), contents.count(end)
    if starts == 0 and ends == 0:
        return False
    if starts != 1 or ends != 1:
        raise MalformedStateError(
            f"Route block [{key}] is malformed: found {starts} START and {ends} END marker(s). "
            "Fix the route file by hand before regenerating."
        )
    if contents.index(start) > contents.index(end):
        raise MalformedStateError(f"Route block [{key}] has its END marker before its START marker.")
    return True


def merge_block(contents: str, key: str, body: str) -> str:
    """Replace the block for *key* in *contents*, or append it at the end."""
    block = build_block(key, body)

    if not has_block(contents, key):
        if contents and not contents.endswith("\n"):
            contents += "\n"
        if contents and not contents.endswith("\n\n"):
            contents += "\n"
        return contents + block

    pattern = re.compile(
        re.escape(start_marker(key)) + r".*?" + re.escape(end_marker(key)) + r"\n?",
        re.DOTALL,
    )
    return pattern.sub(lambda _m: block, contents, count=1)


class RouteBlockUpserter:
    """Reads a route file, merges one block and writes the whole file back."""

    label = "routes"

    def __init__(self, prompt: PromptPort) -> None:
        self.prompt = prompt

    def upsert(self, path: Path, key: str, body: str, force: bool = False) -> ArtifactResult:
        """Insert or replace the block for *key* in the route file at *path*.

        A missing file is created with a minimal ``<?php`` header.  An
        existing block is replaced only with ``force`` or after the user
        confirms; declining leaves the file untouched.

        Raises:
            MalformedStateError: If the file holds a broken block for *key*.
            FileSystemError: If the file cannot be read or written.
        """
        path = Path(path)
        existed = path.exists()
        original = read_text(path) if existed else EMPTY_ROUTES_FILE
        contents = ensure_route_import(original)

        if has_block(contents, key) and not force:
            if not self.prompt.confirm(f"Routes block already exists for [{key}]. Replace it?", False):
                return ArtifactResult(
                    label=self.label, path=path, status=ArtifactStatus.SKIPPED, message="kept existing block"
                )

        merged = merge_block(contents, key, body)
        write_text(path, merged)
        return ArtifactResult(
            label=self.label,
            path=path,
            status=ArtifactStatus.UPDATED if existed else ArtifactStatus.CREATED,
            message="unchanged" if existed and merged == original else "",
        )
