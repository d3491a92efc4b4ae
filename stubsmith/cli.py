"""stubsmith command-line interface.

Thin layer over the scaffolder: parses flags, builds a ``Config`` and hands
the request to a generator or the resource composer, then renders the
structured result with Rich.

Usage::

    stubsmith make model Song
    stubsmith make controller Song --resource
    stubsmith make service Song --on-conflict fail
    stubsmith resource Song --with-service
    stubsmith templates
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from stubsmith.config import Config
from stubsmith.scaffolder import (
    ArtifactKind,
    CollisionPolicy,
    GenerateOptions,
    GenerationResult,
    ResourceComposer,
    ResourceGenerationError,
    ResourceOptions,
    ResourceResult,
    ScaffoldError,
    TemplateStore,
    generator_for,
)
from stubsmith.scaffolder.naming import strip_suffix
from stubsmith.utils import (
    configure_logging,
    console,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Result rendering
# ---------------------------------------------------------------------------


def _relative(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root.absolute()))
    except ValueError:
        return str(path)


def report_artifact(result: GenerationResult, root: Path) -> None:
    """Print the outcome of a single artifact generation."""
    label = result.kind.value.capitalize()
    print_success(f"{label} created: {_relative(result.path, root)}")


def report_resource(result: ResourceResult, root: Path) -> None:
    """Print the files of a (possibly partial) resource as a table."""
    rows = {
        r.kind.value: _relative(r.path, root) + (" (renamed)" if r.collision_resolved else "")
        for r in result.generated
    }
    rows["routes"] = f"/{result.names.plural}/"
    rows["table"] = result.names.table_name
    print_summary_table(rows, title=f"Resource {result.names.model_name}")


def next_steps_for_artifact(result: GenerationResult) -> list[str]:
    """Follow-up hints after ``make``."""
    name = result.final_name
    if result.kind is ArtifactKind.MODEL:
        return [
            f"Define columns and relationships in {name}",
            f"Create a migration for the {name} table",
            f"Create a service: stubsmith make service {name}",
        ]
    if result.kind is ArtifactKind.SERVICE:
        return [
            f"Implement business logic in {name}",
            f"Create a controller: stubsmith make controller {strip_suffix(name, 'Service')}",
        ]
    return [
        f"Create the service: stubsmith make service {strip_suffix(name, 'Controller')}",
        "Register the router in your application",
    ]


def next_steps_for_resource(result: ResourceResult) -> list[str]:
    """Follow-up hints after ``resource``."""
    names = result.names
    steps = [
        f"Create a migration for the {names.table_name} table",
        "Run the migration",
        f"Register the {names.model_name}Controller router under /{names.plural}",
    ]
    if result.service is None:
        steps.insert(2, f"Create the service: stubsmith make service {names.model_name}")
    return steps


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_make(args: argparse.Namespace, config: Config) -> int:
    generator = generator_for(args.kind).from_config(config)
    policy = CollisionPolicy(args.on_conflict) if args.on_conflict else config.make_conflict_policy
    options = GenerateOptions(resource=args.resource, on_conflict=policy)

    result = generator.generate(args.name, config.project_root, options)
    report_artifact(result, config.project_root)
    print_next_steps(next_steps_for_artifact(result))
    return 0


def cmd_resource(args: argparse.Namespace, config: Config) -> int:
    composer = ResourceComposer.from_config(config)
    policy = (
        CollisionPolicy(args.on_conflict) if args.on_conflict else config.resource_conflict_policy
    )
    options = ResourceOptions(on_conflict=policy, service=args.with_service)

    try:
        result = composer.generate(args.name, config.project_root, options)
    except ResourceGenerationError as exc:
        if exc.result.generated:
            report_resource(exc.result, config.project_root)
            print_warning("Files above were written before the failure and were kept.")
        raise

    report_resource(result, config.project_root)
    print_success(f"Successfully generated {result.names.model_name} resource!")
    print_next_steps(next_steps_for_resource(result))
    return 0


def cmd_templates(args: argparse.Namespace, config: Config) -> int:
    store = TemplateStore(config.template_dirs())
    for name in store.list_templates():
        console.print(name)
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stubsmith",
        description="stubsmith -- scaffold models, controllers and services from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  stubsmith make model Song\n"
            "  stubsmith make controller Song --resource\n"
            "  stubsmith resource Song --with-service\n"
        ),
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Project root the artifacts are written under (default: current directory)",
    )
    parser.add_argument(
        "--stubs",
        default=None,
        help=(
            "Directory of .stub templates overriding the bundled ones; "
            "a relative path is resolved against --root"
        ),
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (otherwise read from STUBSMITH_* variables)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    make = sub.add_parser("make", help="Generate a single artifact")
    make.add_argument("kind", choices=[k.value for k in ArtifactKind])
    make.add_argument("name", help="Artifact name, e.g. Song or SongController")
    make.add_argument("--resource", action="store_true", help="Use the CRUD-shaped template")
    make.add_argument(
        "--on-conflict",
        choices=[p.value for p in CollisionPolicy],
        default=None,
        help="fail, or rename to <Name>Copy (default: rename)",
    )
    make.set_defaults(handler=cmd_make)

    resource = sub.add_parser("resource", help="Generate a model and controller together")
    resource.add_argument("name", help="Resource name, e.g. Song")
    resource.add_argument(
        "--with-service", action="store_true", help="Also generate the service artifact"
    )
    resource.add_argument(
        "--on-conflict",
        choices=[p.value for p in CollisionPolicy],
        default=None,
        help="fail, or rename to <Name>Copy (default: fail)",
    )
    resource.set_defaults(handler=cmd_resource)

    templates = sub.add_parser("templates", help="List available templates")
    templates.set_defaults(handler=cmd_templates)

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the ``Config`` from ``--config`` or the environment, then apply flags."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    updates: dict[str, object] = {}
    if args.root:
        updates["project_root"] = Path(args.root)
    if args.stubs:
        updates["stubs_dir"] = Path(args.stubs)
    return config.model_copy(update=updates) if updates else config


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``stubsmith`` / ``python -m stubsmith.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        config = load_config(args)
        return args.handler(args, config)
    except (ScaffoldError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
