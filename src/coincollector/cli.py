"""Command-line interface for CoinCollector.

This module provides commands for initializing the store and inspecting
the collections kept in it.
"""

from typing import NoReturn

import click
from pydantic import TypeAdapter

from coincollector import __version__
from coincollector.application.schemas import GroupResponse
from coincollector.application.services import GroupStorageService
from coincollector.core.config import Settings, get_settings
from coincollector.core.logging import LoggingContext, configure_logging, get_logger
from coincollector.domain.exceptions import CoinCollectorError, NotFoundError
from coincollector.infrastructure.persistence.database import DatabaseManager, init_database
from coincollector.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)

_GROUP_LIST = TypeAdapter(list[GroupResponse])


@click.group()
@click.version_option(version=__version__, prog_name="CoinCollector")
@click.option(
    "--database",
    "database_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the SQLite database file (overrides config)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, database_path: str | None, log_level: str | None) -> None:
    """CoinCollector - Euro coin collection store."""
    overrides = {}
    if database_path is not None:
        overrides["database_path"] = database_path
    if log_level is not None:
        overrides["log_level"] = log_level

    settings = Settings(**overrides) if overrides else get_settings()
    configure_logging(settings)
    ctx.obj = settings


@cli.command("init-db")
@click.pass_obj
def init_db(settings: Settings) -> None:
    """Create the database tables if they do not exist yet."""
    db = DatabaseManager(settings)
    try:
        init_database(db)
    except CoinCollectorError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    finally:
        db.disconnect()
    click.echo(f"Database initialized at {settings.database_path}")


@cli.command()
@click.argument("user_id")
@click.pass_obj
def groups(settings: Settings, user_id: str) -> None:
    """Print every collection group owned by USER_ID as JSON."""
    db = DatabaseManager(settings)
    try:
        with LoggingContext(user_id=user_id):
            if not UserRepository(db).exists(user_id):
                raise NotFoundError("user", user_id)
            loaded = GroupStorageService(db).get_all_by_owner(user_id)
            logger.debug("Groups loaded", count=len(loaded))
    except CoinCollectorError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    finally:
        db.disconnect()

    responses = [GroupResponse.from_domain(group) for group in loaded]
    click.echo(_GROUP_LIST.dump_json(responses, indent=2).decode())


@cli.command()
@click.argument("group_id")
@click.pass_obj
def group(settings: Settings, group_id: str) -> None:
    """Print one collection group with its collections and coins as JSON."""
    db = DatabaseManager(settings)
    try:
        with LoggingContext(group_id=group_id):
            loaded = GroupStorageService(db).get_by_id(group_id)
    except CoinCollectorError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    finally:
        db.disconnect()

    click.echo(GroupResponse.from_domain(loaded).model_dump_json(indent=2))


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `coincollector` command is run
    or when using `python -m coincollector`.
    """
    cli()


if __name__ == "__main__":
    main()
