"""Command-line entry point.

Usage::

    fragmentkit my-app --fragments ./fragments --template react --flavor ts -m pnpm
    python -m fragmentkit.cli my-app --fragments ./fragments -t yew -m cargo --force
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from rich.markup import escape

from fragmentkit.config import Config
from fragmentkit.scaffolder import (
    DirectoryAssetStore,
    Flavor,
    ProjectGenerator,
    ScaffoldError,
    TemplateRenderer,
    parse_package_manager,
    parse_template,
)
from fragmentkit.utils import (
    clear_directory,
    console,
    format_duration,
    is_dir_empty,
    is_valid_package_name,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    to_valid_package_name,
)

_FLAVORS: dict[str, Flavor] = {
    "js": Flavor.JAVASCRIPT,
    "ts": Flavor.TYPESCRIPT,
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fragmentkit",
        description="Scaffold a new app from a library of template fragments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fragmentkit my-app --fragments ./fragments\n"
            "  fragmentkit my-app --fragments ./fragments -t react --flavor ts -m npm\n"
            "  fragmentkit my-app --fragments ./fragments -t vanilla --alpha --mobile\n"
        ),
    )
    parser.add_argument(
        "project_name",
        help="Project name; also the directory created under --output",
    )
    parser.add_argument(
        "--fragments", "-f",
        default=None,
        help="Fragment library directory (default: $FRAGMENTKIT_FRAGMENTS_DIR)",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help="Template identifier (default: vanilla)",
    )
    parser.add_argument(
        "--manager", "-m",
        default=None,
        help="Package manager: cargo, pnpm, yarn, npm or bun (default: pnpm)",
    )
    parser.add_argument(
        "--flavor",
        choices=sorted(_FLAVORS),
        default=None,
        help="Language flavour for templates that offer one",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory of the new project (default: .)",
    )
    parser.add_argument("--alpha", action="store_true", help="Use the pre-release channel")
    parser.add_argument(
        "--mobile", action="store_true", help="Include mobile targets (implies --alpha)"
    )
    parser.add_argument(
        "--force", action="store_true", help="Empty a non-empty project directory first"
    )
    return parser


def config_from_args(args: argparse.Namespace, base: Optional[Config] = None) -> Config:
    """Merge parsed arguments over *base* (environment defaults).

    Raises:
        CatalogParseError: If the template or manager identifier is unknown.
        ValueError: If no fragment directory is configured.
    """
    config = base or Config.from_env()
    # Mobile targets only exist on the alpha channel, whichever source set them.
    mobile = config.mobile or args.mobile
    updates: dict[str, object] = {
        "project_name": args.project_name,
        "alpha": config.alpha or args.alpha or mobile,
        "mobile": mobile,
        "force": args.force,
    }
    if args.fragments:
        updates["fragments_dir"] = Path(args.fragments)
    if args.output:
        updates["output_dir"] = Path(args.output)
    if args.template:
        updates["template"] = parse_template(args.template)
    if args.manager:
        updates["package_manager"] = parse_package_manager(args.manager)
    if args.flavor:
        updates["flavor"] = _FLAVORS[args.flavor]

    config = config.model_copy(update=updates)
    if config.fragments_dir is None:
        raise ValueError("No fragment library given (use --fragments)")
    return config


# ---------------------------------------------------------------------------
# Scaffolding
# ---------------------------------------------------------------------------


def scaffold(config: Config) -> int:
    """Render the project described by *config*. Returns an exit code."""
    package_name = config.project_name
    if not is_valid_package_name(package_name):
        package_name = to_valid_package_name(package_name)
        print_warning(
            escape(f"{config.project_name!r} is not a valid package name, using {package_name!r}")
        )

    config.validate_compatibility()
    template = config.resolved_template()
    target = config.project_dir

    if not is_dir_empty(target):
        if not config.force:
            print_error(
                f"Directory {escape(str(target))} is not empty (use --force to overwrite)"
            )
            return 1
        print_warning(f"Removing existing files in {escape(str(target))}")
        clear_directory(target)

    store = DirectoryAssetStore(config.fragments_dir)
    generator = ProjectGenerator(store, template)

    started = time.monotonic()
    report = generator.render(
        target,
        config.package_manager,
        package_name,
        alpha=config.alpha,
        mobile=config.mobile,
    )
    elapsed = time.monotonic() - started

    print_summary_table(
        {
            "Template": template.value,
            "Package manager": config.package_manager.value,
            "Package name": package_name,
            "Channel": _channel_label(config),
            "Files written": str(len(report.files)),
            "Conditional files skipped": str(len(report.skipped)),
            "Elapsed": format_duration(elapsed),
        },
        title="Scaffold",
    )
    print_success(f"Project created in {escape(str(target))}")

    renderer = TemplateRenderer()
    console.print(
        escape(
            renderer.render_next_steps(
                target,
                template,
                config.package_manager,
                alpha=config.alpha,
                mobile=config.mobile,
            )
        )
    )
    return 0


def _channel_label(config: Config) -> str:
    if config.alpha and config.mobile:
        return "mobile"
    return "alpha" if config.alpha else "stable"


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``fragmentkit`` / ``python -m fragmentkit.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        code = scaffold(config)
    except (ScaffoldError, ValueError, NotADirectoryError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
