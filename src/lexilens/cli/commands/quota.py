"""Quota commands."""

from datetime import datetime, timezone

from lexilens.cli import client
from lexilens.cli.render import console


def add_subparser(subparsers):
    parser = subparsers.add_parser("quota", help="Daily lookup quota")
    quota_sub = parser.add_subparsers(dest="quota_command")
    quota_sub.add_parser("reset", help="Reset today's counter")
    parser.set_defaults(func=run_quota)


def run_quota(args):
    session = client.open_session(args.client)

    if args.quota_command == "reset":
        session.quota.reset()
        console.print("✓ Quota reset")
        return

    now = datetime.now(timezone.utc)
    state = session.quota.state(now)
    remaining = session.quota.remaining(now)
    console.print(f"Lookups left today: [bold]{remaining}[/bold] of {session.quota.limit}")
    if state.count:
        local_expiry = state.window_expiry.astimezone()
        console.print(f"[dim]Window resets at {local_expiry:%Y-%m-%d %H:%M}[/dim]")
