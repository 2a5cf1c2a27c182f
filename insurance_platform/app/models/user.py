import logging

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Table,
)
from sqlalchemy.orm import relationship, validates

from insurance_platform.app.models import Base

log = logging.getLogger(__name__)


# The composite primary key keeps each role unique per user.
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id"), primary_key=True),
)


class User(Base):
    """
    User model for the accounts that authenticate against the auth service.

    Attributes:
        id (int): Unique identifier for the user.
        username (str): Unique username for the user.
        email (str): Unique email address for the user.
        hashed_password (str): Hashed password for the user.
        is_active (bool): Whether the user account is active.
        force_password_change (bool): If true, user must change password on next login.
        roles (list[Role]): Roles assigned to the user for authorization.

    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    force_password_change = Column(Boolean, default=False, nullable=False)

    # Relationship to Role
    roles = relationship(
        "Role",
        secondary=user_roles,
        back_populates="users",
    )

    def __init__(
        self,
        username: str,
        email: str,
        hashed_password: str,
        is_active: bool = True,
        force_password_change: bool = False,
        id: int | None = None,
    ):
        """
        Initialize a User instance.

        Args:
            username (str): Unique username for the user. Must be a non-empty string.
            email (str): Unique email address for the user. Must be a non-empty string.
            hashed_password (str): Hashed password for the user. Must be a non-empty string.
            is_active (bool): Whether the user account is active. Must be a boolean.
            force_password_change (bool): Whether the user must rotate the password on next login.
            id (int | None): The unique identifier of the user, for testing purposes.

        Returns:
            None

        Notes:
            1. Field validation is delegated to the `validates` hooks below.
            2. This operation does not involve network, disk, or database access.

        """
        _msg = f"Initializing User with username: {username}"
        log.debug(_msg)

        if id is not None:
            self.id = id
        self.username = username
        self.email = email
        self.hashed_password = hashed_password
        self.is_active = is_active
        self.force_password_change = force_password_change

    @validates("username")
    def validate_username(self, key, username):
        """
        Validate the username field.

        Args:
            key (str): The field name being validated (should be 'username').
            username (str): The username value to validate. Must be a non-empty string.

        Returns:
            str: The validated username (stripped of leading/trailing whitespace).

        """
        if not isinstance(username, str):
            raise ValueError("Username must be a string")
        if not username.strip():
            raise ValueError("Username cannot be empty")
        return username.strip()

    @validates("email")
    def validate_email(self, key, email):
        """
        Validate the email field.

        Args:
            key (str): The field name being validated (should be 'email').
            email (str): The email value to validate. Must be a non-empty string.

        Returns:
            str: The validated email (stripped of leading/trailing whitespace).

        """
        if not isinstance(email, str):
            raise ValueError("Email must be a string")
        if not email.strip():
            raise ValueError("Email cannot be empty")
        return email.strip()

    @validates("hashed_password")
    def validate_hashed_password(self, key, hashed_password):
        if not isinstance(hashed_password, str):
            raise ValueError("Hashed password must be a string")
        if not hashed_password.strip():
            raise ValueError("Hashed password cannot be empty")
        return hashed_password.strip()

    @validates("is_active", "force_password_change")
    def validate_flags(self, key, value):
        """Ensure boolean flags are real booleans."""
        if not isinstance(value, bool):
            raise ValueError(f"{key} must be a boolean")
        return value
