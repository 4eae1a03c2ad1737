"""Work journal CLI."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.memory_entry_store import InMemoryEntryStore
from .config import load_config
from .core.entries import ENTRY_TYPES, Entry
from .core.errors import NotFoundError, ValidationError
from .workflows import get_store, list_weeks


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


def _show_entry(entry: Entry) -> None:
    click.echo(f"#{entry.id}  {entry.date.isoformat()}  [{entry.type.value}]  {entry.text}")


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Work journal - weekly notes on work, learnings and thoughts."""
    config = load_config()
    _setup_logging("DEBUG" if debug else config.log_level)
    ctx.obj = config


@main.command()
@click.option("--host", default=None, help="Interface to bind (default from config)")
@click.option("--port", type=int, default=None, help="Port to listen on (default from config)")
@click.option("--memory", is_flag=True, help="Serve from a throwaway in-memory store")
@click.pass_obj
def serve(config, host: str | None, port: int | None, memory: bool):
    """Run the web app."""
    from .web import create_app

    store = InMemoryEntryStore() if memory else get_store(config)
    app = create_app(store, config)
    click.echo("Press Ctrl+C to stop")
    app.run(host=host or config.host, port=port or config.port)


@main.command("init-db")
@click.pass_obj
def init_db(config):
    """Create the database schema."""
    get_store(config)
    click.echo(f"✓ Database ready at {config.database_url}")


@main.command()
@click.argument("text")
@click.option("--type", "-t", "entry_type", type=click.Choice(ENTRY_TYPES), default="work",
              show_default=True, help="Kind of entry")
@click.option("--date", "-d", "entry_date", default=None, help="Entry date (YYYY-MM-DD), default today")
@click.pass_obj
def add(config, text: str, entry_type: str, entry_date: str | None):
    """Add a journal entry."""
    store = get_store(config)
    try:
        entry = store.create_entry(entry_date or date.today(), entry_type, text)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Created entry #{entry.id}")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_cmd(config, as_json: bool):
    """List entries grouped by week, newest first."""
    store = get_store(config)
    weeks = list_weeks(store, config)

    if as_json:
        click.echo(json.dumps([w.to_dict() for w in weeks], indent=2))
        return

    if not weeks:
        click.echo("No entries yet.")
        return

    for i, week in enumerate(weeks):
        if i:
            click.echo()
        click.echo(f"### {week.label}")
        for name in ENTRY_TYPES:
            items = getattr(week, name)
            click.echo(f"  {name.capitalize()}")
            if not items:
                click.echo("    -")
            for entry in items:
                click.echo(f"    • {entry.text} (#{entry.id}, {entry.date.strftime('%a %b %d')})")


@main.command()
@click.argument("entry_id", type=int)
@click.pass_obj
def show(config, entry_id: int):
    """Show a single entry."""
    store = get_store(config)
    try:
        entry = store.get_entry(entry_id)
    except NotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _show_entry(entry)


@main.command()
@click.argument("entry_id", type=int)
@click.option("--text", default=None, help="New text")
@click.option("--type", "-t", "entry_type", type=click.Choice(ENTRY_TYPES), default=None, help="New type")
@click.option("--date", "-d", "entry_date", default=None, help="New date (YYYY-MM-DD)")
@click.pass_obj
def edit(config, entry_id: int, text: str | None, entry_type: str | None, entry_date: str | None):
    """Edit an entry. Omitted fields keep their current value."""
    store = get_store(config)
    try:
        current = store.get_entry(entry_id)
        entry = store.update_entry(
            entry_id,
            entry_date if entry_date is not None else current.date,
            entry_type if entry_type is not None else current.type,
            text if text is not None else current.text,
        )
    except (NotFoundError, ValidationError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _show_entry(entry)


@main.command()
@click.argument("entry_id", type=int)
@click.pass_obj
def delete(config, entry_id: int):
    """Delete an entry."""
    store = get_store(config)
    try:
        store.delete_entry(entry_id)
    except NotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Deleted entry #{entry_id}")


if __name__ == "__main__":
    main()
