import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..api.client import LinkedInClient
from ..api.fields import ALL_FIELDS
from ..config import CONFIG_FILE, get_access_token, get_api_base_url, set_access_token
from ..domain.errors import LinkedInError
from ..domain.models import Date, Location, Profile

app = typer.Typer(help="Fetch LinkedIn basic profile data with an access token.")
console = Console()


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _format_location(location: Optional[Location]) -> str:
    if location is None:
        return ""
    parts = [location.name or ""]
    if location.country and location.country.code:
        parts.append(location.country.code.upper())
    return ", ".join(p for p in parts if p)


def _format_date(date: Optional[Date]) -> str:
    if date is None or date.year is None:
        return ""
    if date.month:
        return f"{date.year}-{date.month:02d}"
    return str(date.year)


def render_profile(profile: Profile):
    """print a profile as rich tables."""
    table = Table(title="Profile", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    # only fields the response actually carried
    for name in Profile.model_fields:
        value = getattr(profile, name)
        if value is None or name == "positions":
            continue
        if name == "location":
            value = _format_location(value)
        elif name == "picture_urls":
            value = "\n".join(profile.picture_url_list)
        table.add_row(name.replace("_", " "), str(value))

    console.print(table)

    positions = profile.position_list
    if not positions:
        return

    pos_table = Table(title="Positions")
    pos_table.add_column("Title", style="cyan")
    pos_table.add_column("Company", style="white")
    pos_table.add_column("Location", style="dim")
    pos_table.add_column("From", style="dim")
    pos_table.add_column("To", style="dim")
    pos_table.add_column("Current", style="green")

    for position in positions:
        company = position.company.name if position.company and position.company.name else ""
        end = "present" if position.is_current else _format_date(position.end_date)
        pos_table.add_row(
            position.title or "",
            company,
            _format_location(position.location),
            _format_date(position.start_date),
            end,
            "yes" if position.is_current else "",
        )

    console.print(pos_table)


@app.command()
def show(
    fields: Optional[List[str]] = typer.Argument(None, help='Field names, or "all"'),
    token: Optional[str] = typer.Option(None, "--token", "-t", help="Access token (defaults to config)"),
    as_json: bool = typer.Option(False, "--json", help="Print the profile as JSON"),
    strict: bool = typer.Option(False, "--strict", help="Fail on non-2xx responses"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests"),
):
    """fetch the profile of the member who owns the token."""
    _setup_logging(verbose)

    access_token = token or get_access_token()
    if not access_token:
        console.print("[red]Error:[/red] no access token configured.")
        console.print("\nPass one with [cyan]--token[/cyan] or run: [cyan]linkedin-profile set-token <token>[/cyan]")
        raise typer.Exit(1)

    try:
        with LinkedInClient(access_token, base_url=get_api_base_url(), check_status=strict) as client:
            profile = client.fetch_basic_profile(*(fields or []))
    except LinkedInError as e:
        console.print(f"[red]Request failed:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(profile.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    else:
        render_profile(profile)


@app.command("fields")
def list_fields():
    """list the fields requested by "all"."""
    for field in ALL_FIELDS:
        typer.echo(field)


@app.command("set-token")
def set_token(token: str):
    """save an access token for later commands."""
    try:
        set_access_token(token)
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Token saved to [cyan]{CONFIG_FILE}[/cyan]")


if __name__ == "__main__":
    app()
