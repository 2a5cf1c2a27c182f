import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from insurance_platform.app.bootstrap.admin_seeder import (
    ADMIN_EMAIL,
    AdminAccountSeeder,
    SeedOutcome,
)
from insurance_platform.app.bootstrap.exceptions import (
    MissingPrerequisiteError,
    StartupAbortedError,
)
from insurance_platform.app.bootstrap.stores import SqlAccountStore, SqlRoleCatalog
from insurance_platform.app.core.config import Settings
from insurance_platform.app.core.security import get_password_hash

log = logging.getLogger(__name__)


def seed_default_admin(session_factory: sessionmaker, settings: Settings) -> SeedOutcome:
    """
    Run the admin seeding task as part of process startup.

    Args:
        session_factory (sessionmaker): Factory for the session the task runs in.
        settings (Settings): Settings supplying the bootstrap secret and rotation flag.

    Returns:
        SeedOutcome: The outcome reported by the seeder.

    Raises:
        StartupAbortedError: If a prerequisite such as the ADMIN role is missing,
            or if another account already holds the admin email.

    Notes:
        1. Opens a session and wires the role catalog, account store and hasher explicitly.
        2. Runs `AdminAccountSeeder.ensure_admin_exists`.
        3. Translates a missing prerequisite into a startup abort with a diagnostic.
        4. Translates a conflicting insert that is not the admin username race into
           a startup abort naming the email.
        5. Always closes the session.

    """
    _msg = "seed_default_admin starting"
    log.debug(_msg)

    db = session_factory()
    try:
        seeder = AdminAccountSeeder(
            role_catalog=SqlRoleCatalog(db),
            account_store=SqlAccountStore(db),
            password_hasher=get_password_hash,
            password=settings.admin_password,
            force_password_change=settings.admin_force_password_change,
        )
        outcome = seeder.ensure_admin_exists()
    except MissingPrerequisiteError as e:
        _msg = (
            f"Cannot seed the admin account: {e} "
            "The role catalog has not been populated; run 'manage.py apply-migrations'."
        )
        log.critical(_msg)
        raise StartupAbortedError(_msg) from e
    except IntegrityError as e:
        _msg = (
            f"Cannot seed the admin account: the email '{ADMIN_EMAIL}' "
            "already belongs to another account. Free the address or rename that account."
        )
        log.critical(_msg)
        raise StartupAbortedError(_msg) from e
    finally:
        db.close()

    _msg = f"seed_default_admin returning {outcome.value}"
    log.debug(_msg)
    return outcome
