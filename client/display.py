"""Rich terminal output for the command-line client."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .contacts import Contact
from .credentials import UserProfile
from .results import ErrorKind, Failure

console = Console()


def contacts_table(contacts: list[Contact]) -> Table:
    """Build a table of contacts in the order given."""
    table = Table(title="Contacts")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Email", style="cyan")
    table.add_column("Phone")
    for contact in contacts:
        table.add_row(contact.id, escape(contact.name), escape(contact.email), escape(contact.phone))
    return table


def show_contacts(contacts: list[Contact]) -> None:
    if not contacts:
        console.print("[dim]No contacts yet. Add one with 'contactbook add'.[/dim]")
        return
    console.print(contacts_table(contacts))


def show_contact(contact: Contact, verb: str) -> None:
    console.print(f"[green]✓[/green] {verb} {escape(contact.name)} [dim]({contact.id})[/dim]")


def show_user(user: UserProfile | None) -> None:
    if user is None:
        console.print("[yellow]Logged in[/yellow] [dim](profile unavailable)[/dim]")
        return
    label = escape(f"{user.name} <{user.email}>" if user.name else user.email)
    console.print(f"Logged in as [bold]{label}[/bold] [dim]({user.id})[/dim]")


def show_failure(failure: Failure) -> None:
    console.print(f"[red]Error:[/red] {escape(failure.message)}")
    if failure.kind == ErrorKind.UNAUTHENTICATED:
        console.print("Run [bold]contactbook login[/bold] to sign in.")
