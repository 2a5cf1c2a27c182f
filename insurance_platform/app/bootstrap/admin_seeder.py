import logging
from collections.abc import Callable
from enum import Enum

from sqlalchemy.exc import IntegrityError

from insurance_platform.app.bootstrap.exceptions import MissingPrerequisiteError
from insurance_platform.app.bootstrap.stores import SqlAccountStore, SqlRoleCatalog
from insurance_platform.app.core.config import DEFAULT_ADMIN_PASSWORD
from insurance_platform.app.core.security import get_password_hash
from insurance_platform.app.models.role import RoleName
from insurance_platform.app.models.user import User

log = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@insurance.com"
ADMIN_ROLE = RoleName.ADMIN


class SeedOutcome(str, Enum):
    """Result of a seeding run."""

    CREATED = "created"
    ALREADY_PRESENT = "already_present"


class AdminAccountSeeder:
    """
    Ensures the default administrative account exists.

    The seeder is idempotent: an existing `admin` account is never touched,
    and a concurrent insert that wins the race on the unique username is
    reported as already present.

    Args:
        role_catalog (SqlRoleCatalog): Lookup of roles by canonical name.
        account_store (SqlAccountStore): Existence check and insert of accounts.
        password_hasher (Callable[[str], str]): One-way transform applied to the secret.
        password (str): The plain text bootstrap secret.
        force_password_change (bool): Whether the admin must rotate the secret on first login.

    """

    def __init__(
        self,
        role_catalog: SqlRoleCatalog,
        account_store: SqlAccountStore,
        password_hasher: Callable[[str], str] = get_password_hash,
        password: str = DEFAULT_ADMIN_PASSWORD,
        force_password_change: bool = True,
    ):
        self.role_catalog = role_catalog
        self.account_store = account_store
        self.password_hasher = password_hasher
        self.password = password
        self.force_password_change = force_password_change

    def ensure_admin_exists(self) -> SeedOutcome:
        """
        Create the admin account if it is absent.

        Returns:
            SeedOutcome: CREATED if a new account was persisted, ALREADY_PRESENT otherwise.

        Raises:
            MissingPrerequisiteError: If the ADMIN role is missing from the catalog.
                No account is created in that case.

        Notes:
            1. If an account named `admin` exists, return without changes.
            2. Look up the ADMIN role; a `None` result is a misconfigured environment.
            3. Build the account with the hashed secret and attach the role.
            4. Persist the account. A username conflict on insert means another
               process seeded first; any other integrity error propagates.
            5. This function performs database reads and at most one write.

        """
        _msg = "ensure_admin_exists starting"
        log.debug(_msg)

        if self.account_store.exists_by_username(ADMIN_USERNAME):
            _msg = f"Admin user '{ADMIN_USERNAME}' already exists. No action taken."
            log.debug(_msg)
            return SeedOutcome.ALREADY_PRESENT

        role = self.role_catalog.find_by_name(ADMIN_ROLE.value)
        if role is None:
            raise MissingPrerequisiteError(ADMIN_ROLE.value)

        if self.password == DEFAULT_ADMIN_PASSWORD:
            _msg = (
                "Seeding the admin account with the built-in default password. "
                "Set ADMIN_PASSWORD before deploying."
            )
            log.warning(_msg)

        admin = User(
            username=ADMIN_USERNAME,
            email=ADMIN_EMAIL,
            hashed_password=self.password_hasher(self.password),
            force_password_change=self.force_password_change,
        )
        admin.roles.append(role)

        try:
            self.account_store.add(admin)
        except IntegrityError:
            if self.account_store.exists_by_username(ADMIN_USERNAME):
                _msg = f"Admin user '{ADMIN_USERNAME}' was created concurrently."
                log.info(_msg)
                return SeedOutcome.ALREADY_PRESENT
            raise

        _msg = f"Default admin user created with username: {ADMIN_USERNAME}"
        log.info(_msg)
        return SeedOutcome.CREATED
