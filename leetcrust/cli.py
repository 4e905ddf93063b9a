"""Command line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .clip import handle_clip_command
from .config import handle_config_command
from .create import (
    check_allow_dead_code,
    check_premium,
    create_solution_file,
    fetch_slug,
)
from .fetch import FetchContentError, fetch_content, handle_fetch_command
from .read_write import AbortError, read_slug_locally


def _bounded(maximum: int) -> Callable[[str], int]:
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid digit found in {text!r}") from None
        if not 0 <= value <= maximum:
            raise argparse.ArgumentTypeError(f"{value} is not in 0..={maximum}")
        return value

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="leetcrust", description="Create and manage solution files for coding problems."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser(
        "create",
        aliases=["c"],
        help="Creates a solution file for the given problem, with default code",
    )
    create.add_argument("problem_id", type=_bounded(0xFFFF), help="The problem's id")
    create.set_defaults(action="create")

    clip = commands.add_parser(
        "clip", help="Reads a solution file and puts the relevant content to your clipboard"
    )
    clip.add_argument("problem_id", type=_bounded(0xFFFF), help="The problem's id")
    clip.set_defaults(action="clip")

    config = commands.add_parser("config", help="Configure your information")
    config.set_defaults(action="config")
    settings = config.add_subparsers(dest="setting", required=True)
    settings.add_parser("username", help="Set up your leetcode's username").add_argument(
        "value", metavar="username"
    )
    settings.add_parser("cookie", help="Set up your leetcode session cookie").add_argument(
        "value", metavar="cookie"
    )
    settings.add_parser(
        "premium", help="Tell if you are a premium leetcode user (0 or 1)"
    ).add_argument("value", metavar="premium", type=_bounded(0xFF), help="0 or 1")
    settings.add_parser(
        "allow-dead-code",
        help="Use the #[allow(dead_code)] attribute instead of the #[cfg(test)] one",
    ).add_argument("value", metavar="allow_dead_code", type=_bounded(0xFF), help="0 or 1")

    fetch = commands.add_parser("fetch", aliases=["f"], help="Fetch something from the api")
    fetch.set_defaults(action="fetch")
    fetch_commands = fetch.add_subparsers(dest="fetch_command", required=True)
    fetch_commands.add_parser(
        "slugs", help="Fetch each problem's id, slug and whether they're premium-only"
    )
    fetch_commands.add_parser("unimplemented", help="Not implemented yet")

    return parser


def _run_create(problem_id: int) -> None:
    """Create the solution file of a problem from its starter code."""
    print("Checking if you're premium...")
    premium = check_premium()

    print("Checking how you'd like to escape rust's dead code warnings...")
    allow_dead_code = check_allow_dead_code()

    print("Trying to find slug locally...")
    slug = read_slug_locally(problem_id, premium)
    if slug is None:
        print("Couldn't find slug locally, trying to fetch it...")
        slug = fetch_slug(problem_id, premium)

    print("Trying to fetch problem content...")
    try:
        content = fetch_content(slug)
    except FetchContentError as error:
        error.log(problem_id)
        raise AbortError(problem_id) from error

    print("Trying to create a solution file...")
    if not create_solution_file(content, "", problem_id, slug, allow_dead_code):
        raise AbortError(problem_id)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.action == "config":
            return 0 if handle_config_command(args.setting, args.value) else 1
        if args.action == "create":
            _run_create(args.problem_id)
        elif args.action == "clip":
            handle_clip_command(args.problem_id)
        else:
            handle_fetch_command(args.fetch_command)
    except AbortError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())