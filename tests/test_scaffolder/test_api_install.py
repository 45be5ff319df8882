"""Unit tests for the Laravel 11 API routing bootstrap."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest

from crudpack.scaffolder.api_install import (
    API_ROUTING_ENTRY,
    dedupe_api_routing,
    ensure_api_routes_installed,
)

pytestmark = pytest.mark.unit

DUPLICATED_BOOTSTRAP = """<?php

return Application::configure(basePath: dirname(__DIR__))
    ->withRouting(
        web: __DIR__.'/../routes/web.php',
        api: __DIR__.'/../routes/api.php',
        api: __DIR__.'/../routes/api.php',
        commands: __DIR__.'/../routes/console.php',
        health: '/up',
    )
    ->create();
"""


class TestDedupeApiRouting:
    def test_removes_second_entry(self):
        fixed = dedupe_api_routing(DUPLICATED_BOOTSTRAP)
        assert fixed.count(API_ROUTING_ENTRY) == 1
        assert "commands: __DIR__.'/../routes/console.php'," in fixed
        assert "->create();" in fixed

    def test_single_entry_untouched(self):
        content = DUPLICATED_BOOTSTRAP.replace("        api: __DIR__.'/../routes/api.php',\n", "", 1)
        assert dedupe_api_routing(content) == content


class TestEnsureApiRoutesInstalled:
    def test_existing_api_routes(self, config):
        config.api_routes_path.write_text("<?php\n", encoding="utf-8")
        runner = MagicMock()
        assert ensure_api_routes_installed(config, runner=runner) is True
        runner.assert_not_called()

    def test_without_artisan_nothing_runs(self, config):
        runner = MagicMock()
        assert ensure_api_routes_installed(config, runner=runner) is False
        runner.assert_not_called()

    def test_runs_install_and_fixes_bootstrap(self, config):
        config.artisan_path.write_text("#!/usr/bin/env php\n", encoding="utf-8")
        config.bootstrap_app_path.write_text(DUPLICATED_BOOTSTRAP, encoding="utf-8")

        def fake_install(cmd, **kwargs):
            config.api_routes_path.write_text("<?php\n", encoding="utf-8")
            return subprocess.CompletedProcess(cmd, 0, "", "")

        runner = MagicMock(side_effect=fake_install)
        assert ensure_api_routes_installed(config, runner=runner) is True

        args, kwargs = runner.call_args
        assert args[0] == ["php", "artisan", "install:api", "--no-interaction"]
        assert kwargs["cwd"] == str(config.project_root)
        assert config.bootstrap_app_path.read_text(encoding="utf-8").count(API_ROUTING_ENTRY) == 1

    def test_failed_install(self, config):
        config.artisan_path.write_text("#!/usr/bin/env php\n", encoding="utf-8")
        runner = MagicMock(side_effect=subprocess.CalledProcessError(1, ["php"]))
        assert ensure_api_routes_installed(config, runner=runner) is False
