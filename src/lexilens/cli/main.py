"""
LexiLens CLI.
"""

import argparse
import sys

import redis

from lexilens.cli.commands import define, history, quota, serve
from lexilens.cli.render import console
from lexilens.config import CLIENT_ID
from lexilens.log import setup_logging


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="lexilens", description="Explore the beauty of words with AI")
    parser.add_argument("--client", default=CLIENT_ID, help="Client ID owning history and quota")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs")
    subparsers = parser.add_subparsers(dest="command")

    define.add_subparser(subparsers)
    history.add_subparser(subparsers)
    quota.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    if not hasattr(args, "func"):
        parser.print_help()
        return

    try:
        args.func(args)
    except redis.RedisError as e:
        console.print(f"[red]✗ Storage error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
