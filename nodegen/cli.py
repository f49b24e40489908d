"""Command-line entry point.

Usage::

    create-node-app my-new-app
    python -m nodegen.cli my-new-app --template-dir ./my-template
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from nodegen.config import PROGRAM_NAME, Config
from nodegen.errors import AlreadyExistsError, GenerationError, UnexpectedError
from nodegen.scaffolder import ProjectGenerator
from nodegen.utils import print_error, print_success


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UnexpectedError(message)


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=config.program_name,
        description="Create a new Node.js + Express + MongoDB project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            f"  $ {config.program_name} my-new-app\n"
        ),
    )
    parser.add_argument(
        "name",
        help="Project name; the project is created in ./<name>",
    )
    parser.add_argument(
        "--template-dir",
        type=Path,
        default=None,
        help="Template source to copy (default: the bundled template)",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {config.version}",
    )
    return parser


def main(argv: Sequence[str] | None = None, cwd: str | Path | None = None) -> int:
    """CLI entry point for ``create-node-app``.

    Returns the process exit status. ``--help`` and ``--version`` exit
    through argparse with status 0.
    """
    args_list = list(sys.argv[1:] if argv is None else argv)
    config = Config.from_env()
    if cwd is not None:
        config.cwd = Path(cwd)
    parser = build_parser(config)

    if not args_list:
        parser.print_help(sys.stderr)
        return 1

    try:
        args = parser.parse_args(args_list)
        if args.template_dir is not None:
            config.template_dir = args.template_dir
        generator = ProjectGenerator(config)
        asyncio.run(generator.generate(args.name))
    except AlreadyExistsError as exc:
        print_error(f"Error: {exc.message}")
        return 1
    except GenerationError as exc:
        print_error(f"Error creating project: {exc.message}")
        return 1
    except Exception as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    print_success(f"Project {args.name} created successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
