"""History commands."""

import sys

from rich.markup import escape

from lexilens.cli import client
from lexilens.cli.commands.define import show_outcome
from lexilens.cli.render import console


def add_subparser(subparsers):
    parser = subparsers.add_parser("history", help="Recent lookups")
    parser.add_argument("--direct", action="store_true", help="Call OpenAI directly when looking up again")
    hist_sub = parser.add_subparsers(dest="history_command")

    again_p = hist_sub.add_parser("again", help="Look up a history entry again")
    again_p.add_argument("n", type=int, help="Entry number, as listed (1 = most recent)")

    hist_sub.add_parser("clear", help="Forget all history")

    parser.set_defaults(func=run_history)


def run_history(args):
    session = client.open_session(args.client, direct=args.direct)

    if args.history_command == "again":
        history_again(session, args.n)
    elif args.history_command == "clear":
        session.history.clear()
        console.print("✓ History cleared")
    else:
        history_list(session)


def history_list(session):
    entries = session.history.all()
    if not entries:
        console.print("No lookups yet.")
        return
    for i, entry in enumerate(entries, start=1):
        console.print(f"  {i}. {escape(entry)}")


def history_again(session, n: int):
    word = session.history.get(n - 1)
    if word is None:
        console.print(f"[red]✗ No history entry {n}[/red]")
        sys.exit(1)

    with console.status("Looking up..."):
        outcome = session.relookup(n - 1)

    show_outcome(session, word, outcome)
