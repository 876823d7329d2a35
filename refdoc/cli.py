"""CLI entrypoints for refdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .errors import RefDocError
from .logging import configure_logging
from .models import GenerationIssue
from .orchestrator import Orchestrator, RunOutcome

EXIT_FATAL = 2


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


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root or .refdoc.yml path (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refdoc",
        description="Generate a Markdown API reference from a README, doc-comments and examples.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Assemble the reference, print it and write it to disk.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        help="Write the reference here instead of the configured output path.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the reference without writing it.",
    )
    generate_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the generated markdown.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Generate without writing and report missing examples.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_path_argument(check_parser)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for refdoc commands; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(getattr(args, "quiet", False)),
        log_file=getattr(args, "log_file", None),
    )
    console = Console(stderr=True)
    orchestrator = Orchestrator()

    is_check = args.command == "check"
    try:
        outcome = orchestrator.run(
            args.path,
            output=getattr(args, "output", None),
            dry_run=is_check or bool(getattr(args, "dry_run", False)),
        )
    except (RefDocError, OSError) as exc:
        console.print(f"[red]refdoc {args.command} failed:[/red] {escape(str(exc))}")
        console.print("Run with --verbose for more details.")
        return EXIT_FATAL

    if not is_check and not getattr(args, "quiet", False):
        sys.stdout.write(outcome.result.document)

    _print_summary(console, outcome)
    return outcome.result.exit_code


def _print_summary(console: Console, outcome: RunOutcome) -> None:
    issues = outcome.result.issues
    if issues:
        console.print(f"[yellow]{len(issues)} issue(s) found:[/yellow]")
        for issue in issues:
            console.print(_format_issue(issue))
    else:
        console.print("[green]No issues found.[/green]")
    if outcome.written:
        console.print(f"Wrote [cyan]{escape(str(outcome.output_path))}[/cyan]")
    console.print(f"Generated in [cyan]{outcome.elapsed:.3f}s[/cyan]")


def _format_issue(issue: GenerationIssue) -> str:
    return f"  [yellow]-[/yellow] [dim]{escape(issue.code)}[/dim] {escape(issue.message)}"


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
