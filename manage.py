import logging
import sys

import click
from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from sqlalchemy.exc import SQLAlchemyError

from insurance_platform.app.bootstrap.admin_seeder import ADMIN_USERNAME, SeedOutcome
from insurance_platform.app.bootstrap.exceptions import StartupAbortedError
from insurance_platform.app.bootstrap.startup import seed_default_admin
from insurance_platform.app.core.config import get_settings
from insurance_platform.app.database.database import get_session_local
from insurance_platform.app.services.base import configure_logging


log = logging.getLogger(__name__)


@click.group()
def cli():
    """Management script for the insurance platform services."""
    configure_logging(get_settings().log_level)


@cli.command("apply-migrations")
@click.option(
    "--revision",
    default="head",
    show_default=True,
    help="Target revision to upgrade the schema and role catalog to.",
)
@click.option(
    "--config",
    "config_path",
    default="alembic.ini",
    show_default=True,
    help="Path to the Alembic configuration file.",
)
def apply_migrations(revision: str, config_path: str):
    """
    Create the schema and populate the role catalog.

    The seeding task depends on the roles these migrations insert, so a
    failure here exits with status 1.

    Args:
        revision (str): The revision to upgrade to.
        config_path (str): The Alembic configuration file to load.

    """
    _msg = "apply_migrations starting"
    log.debug(_msg)
    click.echo(f"Upgrading database to revision '{revision}'...")

    try:
        command.upgrade(Config(config_path), revision)
    except (CommandError, SQLAlchemyError) as e:
        _error_msg = f"Error applying migrations: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
        sys.exit(1)

    _success_msg = f"Database upgraded to revision '{revision}'."
    click.echo(_success_msg)
    log.info(_success_msg)
    _msg = "apply_migrations returning"
    log.debug(_msg)


@cli.command("seed-admin")
def seed_admin():
    """
    Ensure the default administrator account exists.

    Runs the same seeding task the auth service runs at startup.

    Notes:
        1. Establishes a database session factory.
        2. Calls `seed_default_admin` and reports whether the account was created.
        3. Exits with status 1 if a prerequisite such as the ADMIN role is missing.

    """
    _msg = "seed_admin starting"
    log.debug(_msg)
    click.echo("Seeding default admin user...")

    try:
        outcome = seed_default_admin(get_session_local(), get_settings())
    except StartupAbortedError as e:
        click.echo(f"Error seeding admin user: {e}", err=True)
        sys.exit(1)

    if outcome is SeedOutcome.CREATED:
        click.echo(f"Admin user '{ADMIN_USERNAME}' created.")
    else:
        click.echo(f"Admin user '{ADMIN_USERNAME}' already exists.")

    _msg = "seed_admin returning"
    log.debug(_msg)


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
