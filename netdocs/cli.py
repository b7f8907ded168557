"""CLI entrypoints for netdocs commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config, resolve_version
from .errors import ConfigError, SetupError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netdocs",
        description="Build cross-linked HTML documentation from the .NET API docs corpus.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Parse the corpus for one framework version and write the pages.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding .netdocs.yml (defaults to current directory).",
    )
    build_parser.add_argument(
        "--version",
        dest="doc_version",
        default=None,
        help="Version key from the configuration, e.g. 'core' or 'framework'.",
    )
    build_parser.add_argument(
        "--framework-id",
        default=None,
        help="Override the framework id used to filter signatures and attributes.",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to write pages into (defaults to output_dir from the config).",
    )
    build_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output to this file.",
    )

    versions_parser = subparsers.add_parser(
        "versions",
        help="List the configured framework versions.",
    )
    _add_verbose_option(versions_parser, suppress_default=True)
    versions_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding .netdocs.yml (defaults to current directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for netdocs commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.path))
        version = None
        if args.command == "build":
            version = resolve_version(
                config, args.doc_version, framework_id=args.framework_id
            )
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
        framework_id=version.framework_id if version else None,
    )

    if args.command == "build":
        try:
            result = Orchestrator(config, version).run(args.output)
        except SetupError as exc:
            parser.exit(1, f"{exc}\n")
        print(f"Wrote {result.pages} pages to {_relativize(result.output_dir)}")
        if result.skipped:
            print(f"Skipped {len(result.skipped)} files; run with --verbose for details")
    elif args.command == "versions":
        for key, listed in sorted(config.versions.items()):
            marker = "*" if key == config.version else " "
            print(f"{marker} {key}: {listed.title} ({listed.framework_id})")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
