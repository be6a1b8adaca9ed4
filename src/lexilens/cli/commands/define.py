"""Define command."""

import sys
from datetime import datetime, timezone

from lexilens.cli import client
from lexilens.cli.render import console, print_result
from lexilens.core.lookup import LookupClient, LookupFailure
from lexilens.core.result import LookupResult


def add_subparser(subparsers):
    parser = subparsers.add_parser("define", help="Look up a word (up to 3 words)")
    parser.add_argument("word", nargs="+", help="Word or short phrase")
    parser.add_argument("--direct", action="store_true", help="Call OpenAI directly instead of the API")
    parser.set_defaults(func=run_define)


def run_define(args):
    session = client.open_session(args.client, direct=args.direct)
    word = " ".join(args.word)

    with console.status("Looking up..."):
        outcome = session.lookup(word)

    show_outcome(session, word.strip(), outcome)


def show_outcome(session: LookupClient, word: str, outcome: LookupResult | LookupFailure):
    if isinstance(outcome, LookupFailure):
        console.print(f"[red]✗ {outcome.message}[/red]")
        sys.exit(1)

    remaining = session.quota.remaining(datetime.now(timezone.utc))
    print_result(word, outcome, remaining)
