"""
Contact Book command-line client.

Usage:
    contactbook register you@example.com
    contactbook login you@example.com
    contactbook list
    contactbook add --name Bob --email bob@example.com --phone 5551234567
    contactbook update <id> --name Bob --email bob@example.com --phone 5551234567
    contactbook delete <id>
    contactbook logout

The API root defaults to CONTACTBOOK_BASE_URL and can be overridden with
--base-url.
"""

import argparse
import sys
from typing import Optional, Sequence

from rich.prompt import Prompt

from .auth import AuthClient
from .contacts import ContactsClient
from .display import console, show_contact, show_contacts, show_failure, show_user
from .forms import SubmissionGuard
from .http import ApiClient
from .results import Failure, Ok


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contactbook",
        description="Manage your contacts from the terminal",
    )
    parser.add_argument("--base-url", help="API root, e.g. http://localhost:8000/api")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (("register", "Create an account"), ("login", "Log in")):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("email")
        sub.add_argument("--password", help="Password (prompted if omitted)")
        if name == "register":
            sub.add_argument("--name", help="Display name")

    commands.add_parser("logout", help="Forget the stored session")
    commands.add_parser("whoami", help="Show the logged-in user")
    commands.add_parser("list", help="List your contacts")

    add = commands.add_parser("add", help="Add a contact")
    update = commands.add_parser("update", help="Replace a contact's details")
    update.add_argument("contact_id")
    for sub in (add, update):
        sub.add_argument("--name", required=True)
        sub.add_argument("--email", required=True)
        sub.add_argument("--phone", required=True)

    delete = commands.add_parser("delete", help="Delete a contact")
    delete.add_argument("contact_id")

    return parser


def _password(args: argparse.Namespace) -> str:
    return args.password or Prompt.ask("Password", password=True)


def run(args: argparse.Namespace, api: ApiClient) -> int:
    """Execute one command; returns the process exit code."""
    auth = AuthClient(api)
    contacts = ContactsClient(api)

    if args.command == "logout":
        auth.logout()
        console.print("Logged out.")
        return 0

    if args.command == "whoami":
        if not auth.is_authenticated:
            console.print("Not logged in.")
            return 1
        result = auth.refresh_profile()
    elif args.command == "login":
        result = auth.login(args.email, _password(args))
    elif args.command == "register":
        result = auth.register(args.email, _password(args), args.name)
    elif args.command == "list":
        result = contacts.list_contacts()
    elif args.command == "add":
        guard = SubmissionGuard(contacts.create_contact)
        result = guard.submit({"name": args.name, "email": args.email, "phone": args.phone})
    elif args.command == "update":
        result = contacts.update_contact(
            args.contact_id,
            {"name": args.name, "email": args.email, "phone": args.phone},
        )
    elif args.command == "delete":
        result = contacts.delete_contact(args.contact_id)
    else:
        raise ValueError(f"Unknown command: {args.command}")

    match result:
        case Ok(value):
            _show_success(args.command, value, auth)
            return 0
        case Failure():
            show_failure(result)
    return 1


def _show_success(command: str, value, auth: AuthClient) -> None:
    if command in ("login", "register", "whoami"):
        show_user(auth.current_user())
    elif command == "list":
        show_contacts(value)
    elif command == "add":
        show_contact(value, "Added")
    elif command == "update":
        show_contact(value, "Updated")
    elif command == "delete":
        console.print("[green]✓[/green] Deleted.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    with ApiClient(base_url=args.base_url) as api:
        return run(args, api)


if __name__ == "__main__":
    sys.exit(main())
