"""Laravel 11+ API routing bootstrap.

Fresh Laravel 11 applications ship without ``routes/api.php``; it is added
by ``php artisan install:api``.  That command can leave ``bootstrap/app.php``
with the ``api:`` routing entry registered twice, which
:func:`dedupe_api_routing` collapses.
"""

from __future__ import annotations

import re
import subprocess
from typing import Callable

from crudpack.config import CrudPackConfig
from crudpack.utils import print_error, print_info, print_warning, read_text, write_text

API_ROUTING_ENTRY = "api: __DIR__.'/../routes/api.php'"

_API_LINE = re.compile(r"^\s*api\s*:\s*__DIR__\s*\.\s*'/\.\./routes/api\.php'\s*,?\s*$")
_CLOSE_CALL = re.compile(r"^\s*\)\s*[,;]?\s*$")

Runner = Callable[..., subprocess.CompletedProcess]


def dedupe_api_routing(content: str) -> str:
    """Keep only the first ``api:`` entry inside each ``->withRouting(...)`` call."""
    if content.count(API_ROUTING_ENTRY) <= 1:
        return content

    out: list[str] = []
    in_routing = False
    api_seen = False
    for line in content.split("\n"):
        if not in_routing and "->withRouting(" in line:
            in_routing = True
            api_seen = False
        elif in_routing and _CLOSE_CALL.match(line):
            in_routing = False
        elif in_routing and (_API_LINE.match(line) or API_ROUTING_ENTRY in line):
            if api_seen:
                continue
            api_seen = True
        out.append(line)
    return "\n".join(out)


def ensure_api_routes_installed(config: CrudPackConfig, runner: Runner = subprocess.run) -> bool:
    """Make sure ``routes/api.php`` exists, running ``install:api`` if possible.

    Returns:
        ``True`` when ``routes/api.php`` exists afterwards.  Without an
        ``artisan`` script nothing is run; the route upserter creates the
        file itself.
    """
    if config.api_routes_path.exists():
        print_info("routes/api.php already exists. Skipping install:api.")
        return True

    if not config.artisan_path.exists():
        print_info("routes/api.php not found and no artisan script; it will be created.")
        return False

    print_info("routes/api.php not found. Running: php artisan install:api")
    try:
        runner(
            ["php", "artisan", "install:api", "--no-interaction"],
            cwd=str(config.project_root),
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        print_error(f"Failed to run install:api: {exc}")
        return False

    if not config.api_routes_path.exists():
        print_error("install:api finished but routes/api.php is still missing.")
        return False

    bootstrap = config.bootstrap_app_path
    if bootstrap.exists():
        content = read_text(bootstrap)
        fixed = dedupe_api_routing(content)
        if fixed != content:
            write_text(bootstrap, fixed)
            print_warning("Fixed duplicated 'api:' routing entry in bootstrap/app.php")
    return True
