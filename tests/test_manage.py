import logging
from unittest.mock import patch

from alembic.util import CommandError
from click.testing import CliRunner
from sqlalchemy.exc import OperationalError

from insurance_platform.app.bootstrap.admin_seeder import SeedOutcome
from insurance_platform.app.bootstrap.exceptions import StartupAbortedError
from manage import cli, main

log = logging.getLogger(__name__)


@patch("manage.Config")
@patch("manage.command.upgrade")
def test_apply_migrations_success(mock_upgrade, mock_config):
    """Test the apply-migrations command upgrades to head by default."""
    runner = CliRunner()
    result = runner.invoke(cli, ["apply-migrations"])
    assert result.exit_code == 0
    assert "Upgrading database to revision 'head'..." in result.output
    assert "Database upgraded to revision 'head'." in result.output
    mock_config.assert_called_once_with("alembic.ini")
    mock_upgrade.assert_called_once_with(mock_config.return_value, "head")


@patch("manage.Config")
@patch("manage.command.upgrade")
def test_apply_migrations_custom_revision_and_config(mock_upgrade, mock_config):
    """Test the apply-migrations command passes through its options."""
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["apply-migrations", "--revision", "3b8d1f6a2c90", "--config", "deploy/alembic.ini"],
    )
    assert result.exit_code == 0
    mock_config.assert_called_once_with("deploy/alembic.ini")
    mock_upgrade.assert_called_once_with(mock_config.return_value, "3b8d1f6a2c90")


@patch("manage.Config")
@patch("manage.command.upgrade")
def test_apply_migrations_command_error_exits_nonzero(mock_upgrade, mock_config):
    """Test the apply-migrations command fails loudly on an Alembic error."""
    mock_upgrade.side_effect = CommandError("Can't locate revision identified by 'nope'")
    runner = CliRunner()
    result = runner.invoke(cli, ["apply-migrations", "--revision", "nope"])
    assert result.exit_code == 1
    assert "Error applying migrations: Can't locate revision" in result.output
    assert "Database upgraded" not in result.output


@patch("manage.Config")
@patch("manage.command.upgrade")
def test_apply_migrations_database_error_exits_nonzero(mock_upgrade, mock_config):
    """Test the apply-migrations command fails loudly when the database is unreachable."""
    mock_upgrade.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))
    runner = CliRunner()
    result = runner.invoke(cli, ["apply-migrations"])
    assert result.exit_code == 1
    assert "Error applying migrations:" in result.output
    assert "connection refused" in result.output


@patch("manage.get_session_local")
@patch("manage.seed_default_admin")
def test_seed_admin_created(mock_seed, mock_get_session_local):
    """Test the seed-admin command reports a newly created admin."""
    mock_seed.return_value = SeedOutcome.CREATED
    runner = CliRunner()
    result = runner.invoke(cli, ["seed-admin"])
    assert result.exit_code == 0
    assert "Seeding default admin user..." in result.output
    assert "Admin user 'admin' created." in result.output
    args, _ = mock_seed.call_args
    assert args[0] is mock_get_session_local.return_value


@patch("manage.get_session_local")
@patch("manage.seed_default_admin")
def test_seed_admin_already_present(mock_seed, mock_get_session_local):
    """Test the seed-admin command reports an existing admin."""
    mock_seed.return_value = SeedOutcome.ALREADY_PRESENT
    runner = CliRunner()
    result = runner.invoke(cli, ["seed-admin"])
    assert result.exit_code == 0
    assert "Admin user 'admin' already exists." in result.output


@patch("manage.get_session_local")
@patch("manage.seed_default_admin")
def test_seed_admin_missing_role(mock_seed, mock_get_session_local):
    """Test the seed-admin command exits non-zero when the role catalog is empty."""
    mock_seed.side_effect = StartupAbortedError("Role 'ADMIN' not found")
    runner = CliRunner()
    result = runner.invoke(cli, ["seed-admin"])
    assert result.exit_code == 1
    assert "Error seeding admin user: Role 'ADMIN' not found" in result.output


@patch("manage.cli")
def test_main(mock_cli):
    """Test that main calls cli."""
    main()
    mock_cli.assert_called_once_with()
