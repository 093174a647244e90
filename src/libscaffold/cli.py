"""Command line interface for the library generator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .errors import ScaffoldError
from .hooks import InstallDependencies, setup_playground
from .io.adapters import ConsoleInputSource, MappingInputSource
from .io.interfaces import InputSource
from .io.store import DEFAULT_STORE_PATH, AnswerStore
from .prompts import collect, default_prompts
from .scaffold import LibraryScaffolder
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

BANNER = "Welcome to the [red]Angular Library[/] generator!"


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, str]:
    context: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid key/value pair '{pair}'. Expected KEY=VALUE syntax."
            )
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise argparse.ArgumentTypeError("keys must not be empty")
        context[key] = value
    return context


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Angular library projects")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every written file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="generate a new library")
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory the library is generated in (defaults to the current directory)",
    )
    init_parser.add_argument(
        "--answers",
        type=Path,
        help="JSON file with answers keyed by prompt name instead of asking interactively",
    )
    init_parser.add_argument(
        "--store",
        type=Path,
        default=DEFAULT_STORE_PATH,
        help="File where answers such as the repository URL are remembered",
    )
    init_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    init_parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run npm install after generating the files",
    )

    render_parser = subparsers.add_parser(
        "render", help="render a template file or directory with {{ placeholder }} syntax"
    )
    render_parser.add_argument("template", type=Path, help="Path to the template file or directory")
    render_parser.add_argument(
        "-c",
        "--context",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Values exposed to the template renderer",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )
    render_parser.add_argument(
        "--missing",
        choices=["keep", "empty", "error"],
        default="keep",
        help="Behaviour when a placeholder cannot be resolved",
    )

    return parser


def _input_source(args: argparse.Namespace, console: Console) -> InputSource:
    if args.answers is not None:
        return MappingInputSource.from_file(args.answers)
    return ConsoleInputSource(console)


def _handle_init(args: argparse.Namespace) -> int:
    target = (args.directory or Path.cwd()).expanduser().resolve()
    console = Console()
    source = _input_source(args, console)
    if isinstance(source, ConsoleInputSource):
        console.print(BANNER)

    store = AnswerStore(args.store)
    prompts = default_prompts(target.name)
    try:
        config = collect(prompts, source, defaults=store.load())
    except (ScaffoldError, ValidationError) as exc:
        LOGGER.error("Could not collect answers: %s", exc)
        return 1
    store.remember(config.to_answers(), prompts)

    hooks = [setup_playground]
    if not args.skip_install:
        hooks.append(InstallDependencies(bower=False))
    scaffolder = LibraryScaffolder(TemplateRenderer(), hooks=hooks)
    project_path = scaffolder.materialize(config, target, force=args.force)
    console.print(f"Library [bold]{escape(config.package_name)}[/] created at {escape(str(project_path))}")
    return 0


def _handle_render(args: argparse.Namespace) -> int:
    renderer = TemplateRenderer()
    context = _parse_key_value_pairs(args.context)
    if args.template.is_dir():
        if args.output is None:
            LOGGER.error("Rendering a directory requires --output")
            return 2
        renderer.render_directory(args.template, args.output, context, missing=args.missing)
        return 0

    rendered = renderer.render_file(args.template, context, missing=args.missing)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command == "init":
        return _handle_init(args)
    if args.command == "render":
        return _handle_render(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
