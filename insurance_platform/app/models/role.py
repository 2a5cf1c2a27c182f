import logging
from enum import Enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from insurance_platform.app.models import Base

log = logging.getLogger(__name__)


class RoleName(str, Enum):
    """Canonical names of the roles in the role catalog."""

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class Role(Base):
    """
    Role model for user authorization.

    Roles are shared: many users reference the same row. The catalog is
    populated by a migration, never by the services themselves.

    Attributes:
        id (int): Unique identifier for the role.
        name (str): Unique canonical name for the role (see `RoleName`).
        users (list["User"]): The users associated with this role.

    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)

    users = relationship("User", secondary="user_roles", back_populates="roles")
