"""Command-line interface for CrudPack.

Sub-commands::

    crudpack make Product --web --soft-deletes --all
    crudpack make Order --api --routes --model --policy --policy-style gate
    crudpack install
    crudpack postman --force
    crudpack trait --force

Exit status is 0 when a run completes (skipped artifacts included) and 1
on validation errors or when any artifact failed.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from crudpack import __version__
from crudpack.collection import sync_collection_file
from crudpack.config import CONFIG_FILENAME, CrudPackConfig
from crudpack.errors import CrudPackError, ValidationError
from crudpack.naming import ResourceNames, derive
from crudpack.planner import GenerationFlags, GenerationPlan, PlanResolver
from crudpack.planner.resolver import POLICY_STYLE_CHOICES
from crudpack.prompts import DefaultPrompt, PromptPort, RichPrompt
from crudpack.scaffolder import FileWriter, LayoutInstaller, TemplateRenderer, TraitGenerator
from crudpack.scaffolder.generator import ResourceGenerator
from crudpack.scaffolder.writer import (
    ArtifactResult,
    ArtifactStatus,
    failed_result,
    report_result,
    report_summary,
)
from crudpack.utils import console, print_error, print_header, print_info, print_success, print_summary_table

# Switches whose absence must stay distinguishable from an explicit "no".
TRI_STATE_SWITCHES: tuple[tuple[str, str], ...] = (
    ("--web", "Generate a web (Blade) controller"),
    ("--api", "Generate an API (JSON) controller"),
    ("--soft-deletes", "Enable soft deletes (trash, restore, force delete)"),
    ("--no-soft-deletes", "Disable soft deletes (generated code is commented out)"),
    ("--all", "Generate every artifact (views only for web)"),
    ("--routes", "Append the route block"),
    ("--request", "Generate a FormRequest shared by store and update"),
    ("--model", "Generate the Eloquent model"),
    ("--migration", "Generate the create-table migration"),
    ("--views", "Generate Blade views (web only)"),
    ("--policy", "Generate the policy"),
)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_interaction_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing files without asking",
    )
    parser.add_argument(
        "--no-interaction", "-n",
        dest="no_interaction",
        action="store_true",
        help="Never prompt; answer every question with its default",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crudpack",
        description="CrudPack -- CRUD scaffolding for Laravel resources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  crudpack make Product --web --soft-deletes --all\n"
            "  crudpack make Order --api --routes --model --policy --policy-style gate\n"
            "  crudpack install\n"
            "  crudpack postman --force\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--project-root",
        default=None,
        help="Laravel project root (default: $CRUDPACK_PROJECT_ROOT or the current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Load settings from a saved {CONFIG_FILENAME}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    make = subparsers.add_parser("make", help="Generate CRUD artifacts for one resource")
    make.add_argument("name", help="Singular StudlyCase resource name, e.g. ProductCategory")
    for flag, help_text in TRI_STATE_SWITCHES:
        make.add_argument(flag, action="store_const", const=True, default=None, help=help_text)
    make.add_argument(
        "--policy-style",
        default=None,
        metavar="STYLE",
        help=f"Authorization style when --policy is used: {'|'.join(POLICY_STYLE_CHOICES)}",
    )
    _add_interaction_flags(make)

    install = subparsers.add_parser("install", help="Install the base Blade layout views")
    _add_interaction_flags(install)

    postman = subparsers.add_parser("postman", help="Sync the Postman collection from routes/api.php")
    postman.add_argument(
        "--force",
        action="store_true",
        help="Rebuild every generated folder from the current route file",
    )
    postman.add_argument(
        "--routes-file",
        default=None,
        help="Route file to parse (default: routes/api.php)",
    )

    trait = subparsers.add_parser("trait", help="(Re)generate the shared HandlesDeletes trait")
    _add_interaction_flags(trait)

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def load_config(args: argparse.Namespace) -> CrudPackConfig:
    """Saved config (``--config``) or environment, with ``--project-root`` on top."""
    if args.config:
        config = CrudPackConfig.load(Path(args.config))
        if args.project_root:
            config = config.model_copy(update={"project_root": Path(args.project_root)})
        return config
    root = Path(args.project_root) if args.project_root else None
    return CrudPackConfig.from_env(root)


def make_prompt(args: argparse.Namespace) -> PromptPort:
    if getattr(args, "no_interaction", False):
        return DefaultPrompt()
    return RichPrompt()


def flags_from_args(args: argparse.Namespace) -> GenerationFlags:
    return GenerationFlags(
        web=args.web,
        api=args.api,
        soft_deletes=args.soft_deletes,
        no_soft_deletes=args.no_soft_deletes,
        all=args.all,
        routes=args.routes,
        request=args.request,
        model=args.model,
        migration=args.migration,
        policy=args.policy,
        views=args.views,
        policy_style=args.policy_style,
        force=args.force,
    )


def report(results: list[ArtifactResult]) -> int:
    """Print every result plus the summary; 1 if anything failed."""
    for result in results:
        report_result(result)
    console.print()
    report_summary(results)
    if any(r.status is ArtifactStatus.FAILED for r in results):
        print_error("Some artifacts failed. See the messages above.")
        return 1
    return 0


def nav_hint(names: ResourceNames, plan: GenerationPlan) -> None:
    """Show the navigation entry matching the generated routes."""
    entry = names.nav_resource(plan.soft_deletes)
    soft = "true" if entry.soft_deletes else "false"
    print_info("Add this entry to config/crud-pack.php 'resources' to show it in the navigation:")
    console.print(
        f"    ['label' => '{entry.label}', 'route' => '{entry.route}', 'soft_deletes' => {soft}],",
        markup=False,
        highlight=False,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_make(args: argparse.Namespace, config: CrudPackConfig, prompt: PromptPort) -> int:
    try:
        names = derive(args.name)
        plan = PlanResolver(prompt).resolve(flags_from_args(args))
    except ValidationError as exc:
        print_error(f"Error: {exc}")
        return 1

    print_header(f"CRUD for {names.class_name}")
    print_summary_table(plan.summary(), title="Plan")

    results = ResourceGenerator(config, prompt).generate(plan, names)
    status = report(results)

    if plan.is_web and plan.routes:
        nav_hint(names, plan)
    if status == 0:
        print_success(f"CRUD for {names.class_name} generated.")
    return status


def cmd_install(args: argparse.Namespace, config: CrudPackConfig, prompt: PromptPort) -> int:
    print_header("Install base layout")
    writer = FileWriter(prompt, force=args.force)
    renderer = TemplateRenderer(override_dir=config.stubs_dir)
    return report(LayoutInstaller(config, renderer, writer).install())


def cmd_postman(args: argparse.Namespace, config: CrudPackConfig, prompt: PromptPort) -> int:
    print_header("Sync Postman collection")
    try:
        sync_collection_file(config, routes_file=args.routes_file, force=args.force)
    except CrudPackError as exc:
        print_error(f"Error: {exc}")
        return 1
    return 0


def cmd_trait(args: argparse.Namespace, config: CrudPackConfig, prompt: PromptPort) -> int:
    print_header("HandlesDeletes trait")
    writer = FileWriter(prompt, force=args.force)
    generator = TraitGenerator(config, TemplateRenderer(override_dir=config.stubs_dir), writer)
    try:
        result = generator.generate(ask=True)
    except CrudPackError as exc:
        result = failed_result(generator.label, generator.target_path(), exc)
    return report([result])


COMMANDS = {
    "make": cmd_make,
    "install": cmd_install,
    "postman": cmd_postman,
    "trait": cmd_trait,
}


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def run(argv: Optional[Sequence[str]] = None, prompt: Optional[PromptPort] = None) -> int:
    """Parse *argv*, run the command and return the exit status.

    Args:
        argv: Arguments without the program name.  Defaults to ``sys.argv[1:]``.
        prompt: Overrides the prompt chosen from ``--no-interaction``.
    """
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        print_error(f"Error: cannot load configuration: {exc}")
        return 1
    return COMMANDS[args.command](args, config, prompt or make_prompt(args))


def main() -> None:
    """CLI entry point for ``crudpack`` and ``python -m crudpack``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
