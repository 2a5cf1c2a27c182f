import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from insurance_platform.app.models.role import Role
from insurance_platform.app.models.user import User

log = logging.getLogger(__name__)


class SqlRoleCatalog:
    """Read-only lookup of roles by canonical name, backed by the `roles` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_name(self, name: str) -> Role | None:
        """
        Retrieve a role from the database by its unique name.

        Args:
            name (str): The canonical name of the role to retrieve.

        Returns:
            Role | None: The `Role` object if found, otherwise `None`.

        Notes:
            1. Queries the database for a role with the given name.
            2. This function performs a database read operation.

        """
        _msg = "find_by_name starting"
        log.debug(_msg)
        role = self.db.query(Role).filter(Role.name == name).first()
        _msg = "find_by_name returning"
        log.debug(_msg)
        return role


class SqlAccountStore:
    """Existence checks and inserts for user accounts, backed by the `users` table."""

    def __init__(self, db: Session):
        self.db = db

    def exists_by_username(self, username: str) -> bool:
        """
        Check whether a user with the given username exists.

        Args:
            username (str): The username to look for.

        Returns:
            bool: True if a matching user row exists.

        Notes:
            1. Issues an EXISTS query rather than loading the row.
            2. This function performs a database read operation.

        """
        _msg = "exists_by_username starting"
        log.debug(_msg)
        exists = self.db.query(
            self.db.query(User).filter(User.username == username).exists(),
        ).scalar()
        _msg = "exists_by_username returning"
        log.debug(_msg)
        return bool(exists)

    def add(self, user: User) -> User:
        """
        Persist a new user.

        Args:
            user (User): The transient user to insert.

        Returns:
            User: The persisted user, with its generated ID.

        Raises:
            IntegrityError: If a unique constraint is violated. The session is
                rolled back before the error propagates.

        Notes:
            1. Adds the user to the session and commits.
            2. On an integrity failure, rolls back so the session stays usable.
            3. This function performs a database write operation.

        """
        _msg = f"Adding user {user.username} to database"
        log.debug(_msg)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            _msg = f"Integrity error while inserting user {user.username}, rolling back"
            log.warning(_msg)
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
