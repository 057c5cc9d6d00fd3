"""CLI entry point for nullability-policy."""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

import nullability_policy.app.configure
import nullability_policy.core.options
import nullability_policy.io.logging_setup
import nullability_policy.io.settings
from nullability_policy.app.extension import NullabilityExtension
from nullability_policy.core.classifier import Category

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

_CATEGORY_STYLES = {
    Category.MAIN: "bold green",
    Category.TEST: "bold cyan",
    Category.DISABLED: "dim",
}


def _parse_source_set(value: str) -> tuple[str, str | None]:
    name, sep, source_set_type = value.partition("=")
    name = name.strip()
    if not name:
        raise argparse.ArgumentTypeError(f"invalid source set {value!r}: expected NAME[=TYPE]")
    return name, (source_set_type.strip() if sep else None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nullability-policy",
        description="Derive NullAway checker options for compile tasks",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: $NULLABILITY_POLICY_CONFIG or ~/.config/nullability-policy/settings.json)",
    )
    parser.add_argument(
        "--source-set",
        dest="source_sets",
        action="append",
        type=_parse_source_set,
        default=[],
        metavar="NAME[=TYPE]",
        help="Opt a source set into checking; TYPE is 'main' (default) or 'test'. Repeatable.",
    )
    parser.add_argument("--error-prone-version", default=None, help="Error Prone version override")
    parser.add_argument("--nullaway-version", default=None, help="NullAway version override")
    parser.add_argument("--json", action="store_true", default=False, help="Emit JSON instead of a table")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $NULLABILITY_POLICY_LOG_LEVEL or WARNING)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    classify = commands.add_parser("classify", help="Classify compile tasks and show checker arguments")
    classify.add_argument("tasks", nargs="+", metavar="TASK", help="Task names, e.g. compileTestJava")
    options = commands.add_parser("options", help="Show the checker options for one category")
    options.add_argument("category", choices=[c.value for c in Category])
    commands.add_parser("dependencies", help="Show checker dependency coordinates")
    return parser


def load_extension(args: argparse.Namespace) -> NullabilityExtension:
    """Merge settings file and command-line overrides; CLI flags win."""
    path = args.config or nullability_policy.io.settings.get_config_path()
    # A path named on the command line must exist; the default location is optional.
    settings = nullability_policy.io.settings.load_settings(path, required=args.config is not None)
    logger.debug("loaded settings from %s keys=%s", path, sorted(settings))
    extension = NullabilityExtension.from_settings(settings)
    if args.error_prone_version:
        extension.error_prone_version = args.error_prone_version
    if args.nullaway_version:
        extension.nullaway_version = args.nullaway_version
    for name, source_set_type in args.source_sets:
        extension.source_set(name, source_set_type)
    return extension


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2))


def _run_classify(console: Console, extension: NullabilityExtension, tasks: list[str], as_json: bool) -> None:
    configured = nullability_policy.app.configure.configure_tasks(tasks, extension)
    rows = [
        {
            "task": name,
            "category": config.category.name,
            "enabled": config.enabled,
            "args": config.args,
        }
        for name, config in configured.items()
    ]
    if as_json:
        _print_json(rows)
        return
    table = Table(title="Nullability checking")
    table.add_column("Task", no_wrap=True)
    table.add_column("Category", no_wrap=True)
    table.add_column("Checker arguments", overflow="fold")
    for row, config in zip(rows, configured.values()):
        table.add_row(
            row["task"],
            f"[{_CATEGORY_STYLES[config.category]}]{row['category']}[/]",
            "\n".join(row["args"]) or "-",
        )
    console.print(table)


def _run_options(console: Console, category_value: str, as_json: bool) -> None:
    option_set = nullability_policy.core.options.build_options(Category(category_value))
    if as_json:
        _print_json(option_set.to_dict())
        return
    if not option_set.enabled:
        console.print("checking disabled", highlight=False)
        return
    console.print(" ".join(option_set.to_args()), soft_wrap=True, highlight=False, markup=False)


def _run_dependencies(console: Console, extension: NullabilityExtension, as_json: bool) -> None:
    coordinates = list(extension.checker_dependencies())
    if as_json:
        _print_json(coordinates)
        return
    for coordinate in coordinates:
        console.print(coordinate, soft_wrap=True, highlight=False, markup=False)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # [LAW:single-enforcer] Runtime logger configuration is centralized in io.logging_setup.
    log_runtime = nullability_policy.io.logging_setup.configure(level=args.log_level)
    logger.debug("logging configured level=%s file=%s", log_runtime.level_name, log_runtime.file_path)

    console = Console()
    error_console = Console(stderr=True)
    try:
        extension = load_extension(args)
        if args.command == "classify":
            _run_classify(console, extension, args.tasks, args.json)
        elif args.command == "options":
            _run_options(console, args.category, args.json)
        elif args.command == "dependencies":
            _run_dependencies(console, extension, args.json)
    except ValueError as exc:
        # SourceSetTypeError included: a bad override type must stop configuration.
        logger.error("configuration error: %s", exc)
        error_console.print(f"[bold red]error:[/] {escape(str(exc))}", soft_wrap=True, highlight=False)
        return EXIT_CONFIG_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
