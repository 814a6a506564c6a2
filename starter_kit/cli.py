"""Command-line entry points.

Usage::

    starter-kit                           # prompt for everything
    starter-kit demo                      # prompt for the two frameworks
    starter-kit demo --contracts foundry --frontend VITE
    starter-kit-codegen --format wagmi --write wagmi.config.ts
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from starter_kit import __version__
from starter_kit.codegen.wagmi import ConfigRenderer, build_codegen_config
from starter_kit.config import Config
from starter_kit.models import (
    ContractFramework,
    FrontendFramework,
    InitResult,
    ProjectNameError,
    ProjectRequest,
)
from starter_kit.scaffolder.initializer import InitializerError, ProjectInitializer
from starter_kit.scaffolder.prompts import collect_request
from starter_kit.utils import (
    console,
    create_progress,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


# ---------------------------------------------------------------------------
# starter-kit
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starter-kit",
        description="Scaffold a web3 project from contract and frontend templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  starter-kit\n"
            "  starter-kit my-dapp\n"
            "  starter-kit my-dapp --contracts hardhat --frontend NEXT\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--contracts",
        choices=[fw.value for fw in ContractFramework],
        default=None,
        help="Smart contract framework (prompted for when omitted)",
    )
    parser.add_argument(
        "--frontend",
        choices=[fw.value for fw in FrontendFramework],
        default=None,
        help="Frontend framework (prompted for when omitted)",
    )
    parser.add_argument(
        "--templates",
        default=None,
        help="Template root directory (default: bundled templates)",
    )
    parser.add_argument(
        "--directory", "-C",
        default=None,
        help="Create the project inside this directory instead of the current one",
    )
    parser.add_argument(
        "--atomic",
        action="store_true",
        default=None,
        help="Build the project in a staging directory and move it into place on success",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _config_from_args(args: argparse.Namespace) -> Config:
    """Environment-based config with command-line overrides applied."""
    config = Config.from_env()
    updates: dict[str, object] = {}
    if args.templates:
        updates["templates_root"] = Path(args.templates)
    if args.directory:
        updates["working_directory"] = Path(args.directory)
    if args.atomic:
        updates["atomic"] = True
    return config.model_copy(update=updates) if updates else config


async def _initialize(initializer: ProjectInitializer, request: ProjectRequest) -> InitResult:
    with create_progress() as progress:
        progress.add_task("Setting up project...", total=None)
        return await initializer.initialize(request)


def run(argv: list[str] | None = None) -> int:
    """Run ``starter-kit`` and return its exit status."""
    args = build_parser().parse_args(argv)
    config = _config_from_args(args)
    initializer = ProjectInitializer(config)

    print_banner("Welcome to Starter Kit!", "Smart contracts + frontend, ready to hack on.")

    missing = initializer.check_templates()
    for path in missing:
        print_warning(f"Template missing: {path}")

    try:
        request = collect_request(args.name, args.contracts, args.frontend)
        result = asyncio.run(_initialize(initializer, request))
    except (ProjectNameError, InitializerError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        console.print()
        print_warning("Aborted.")
        return EXIT_INTERRUPTED

    print_summary_table(
        {
            "Project": str(result.project_path),
            "Contracts": f"{request.contract_framework.value} -> {result.contracts_path.name}/",
            "Frontend": f"{request.frontend_framework.value} -> {result.frontend_path.name}/",
            "Files": str(result.files_copied),
        },
        title="Project created",
    )
    print_success("Project setup complete!")
    console.print(f"cd {request.name} && code .", markup=False, highlight=False)
    return EXIT_OK


def main() -> None:
    """Console-script entry point for ``starter-kit``."""
    sys.exit(run())


# ---------------------------------------------------------------------------
# starter-kit-codegen
# ---------------------------------------------------------------------------


def build_codegen_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starter-kit-codegen",
        description="List compiled contracts for the code generator's foundry plugin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  starter-kit-codegen\n"
            "  starter-kit-codegen --base-dir packages/web --format json\n"
            "  starter-kit-codegen --format wagmi --write wagmi.config.ts\n"
        ),
    )
    parser.add_argument(
        "--base-dir",
        default=".",
        help="Frontend package directory the generator runs from (default: .)",
    )
    parser.add_argument(
        "--project",
        default="../foundry",
        help="Foundry project, relative to --base-dir (default: ../foundry)",
    )
    parser.add_argument("--src", default="src", help="Source directory inside the project")
    parser.add_argument("--artifacts", default="out", help="Build output directory inside the project")
    parser.add_argument("--out", default="src/generated.ts", help="Generated file path")
    parser.add_argument(
        "--format",
        choices=["list", "json", "wagmi"],
        default="list",
        help="list: one include path per line; json: config object; wagmi: wagmi.config.ts",
    )
    parser.add_argument("--write", default=None, help="Write output to this file instead of stdout")
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep directory-listing order instead of sorting source files",
    )
    return parser


def run_codegen(argv: list[str] | None = None) -> int:
    """Run ``starter-kit-codegen`` and return its exit status."""
    args = build_codegen_parser().parse_args(argv)
    config = build_codegen_config(
        args.base_dir,
        project=args.project,
        src=args.src,
        artifacts=args.artifacts,
        out=args.out,
        sort_files=not args.no_sort,
    )

    if args.format == "wagmi":
        content = ConfigRenderer().render(config)
    elif args.format == "json":
        content = json.dumps(config.model_dump(), indent=2) + "\n"
    else:
        foundry = config.foundry
        include = foundry.include if foundry else []
        content = "".join(f"{path}\n" for path in include)

    if args.write:
        out = write_text_file(args.write, content)
        print_success(f"Wrote {out}")
    else:
        sys.stdout.write(content)
    return EXIT_OK


def codegen_main() -> None:
    """Console-script entry point for ``starter-kit-codegen``."""
    sys.exit(run_codegen())


if __name__ == "__main__":
    main()
