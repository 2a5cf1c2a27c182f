import logging
from functools import lru_cache

from pydantic import Field, PostgresDsn, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

log = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "admin123"


class Settings(BaseSettings):
    """
    Platform settings loaded from environment variables.

    This class defines the configuration shared by the auth, customer and
    policy services: database connection details, the bootstrap admin
    credential, and the network binding of each service.
    Values are loaded from environment variables with fallback defaults.

    Attributes:
        database_url (PostgresDsn): Database connection URL for PostgreSQL.
        db_echo (bool): Whether SQLAlchemy logs every statement it emits.
        admin_password (str): Plain text secret given to the seeded admin account.
            The default is a bootstrap convenience and must be overridden in production.
        admin_force_password_change (bool): Whether the seeded admin must rotate
            the secret on first login.
        service_host (str): Address the service processes bind to.
        auth_service_port (int): Port of the auth service.
        customer_service_port (int): Port of the customer service.
        policy_service_port (int): Port of the policy service.
        cors_origins (list[str]): Origins allowed by the CORS middleware.
        log_level (str): Root log level used by the entry points.

    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
    )

    # Database settings
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="insurance_auth", validation_alias="DB_NAME")
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: str | None = Field(default=None, validation_alias="DB_PASSWORD")
    db_echo: bool = Field(default=False, validation_alias="DB_ECHO")

    @computed_field
    @property
    def database_url(self) -> PostgresDsn:
        """
        Assembled database URL from components.

        Returns:
            PostgresDsn: The fully assembled PostgreSQL connection URL.

        Notes:
            1. The scheme is set to "postgresql".
            2. The username, password, host, port, and database name are retrieved from the instance attributes.

        """
        return PostgresDsn.build(
            scheme="postgresql",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            path=self.db_name,
        )

    # Bootstrap admin settings
    admin_password: str = Field(
        default=DEFAULT_ADMIN_PASSWORD,
        validation_alias="ADMIN_PASSWORD",
    )
    admin_force_password_change: bool = Field(
        default=True,
        validation_alias="ADMIN_FORCE_PASSWORD_CHANGE",
    )

    # Service settings
    service_host: str = Field(default="0.0.0.0", validation_alias="SERVICE_HOST")
    auth_service_port: int = Field(default=8081, validation_alias="AUTH_SERVICE_PORT")
    customer_service_port: int = Field(
        default=8082,
        validation_alias="CUSTOMER_SERVICE_PORT",
    )
    policy_service_port: int = Field(
        default=8083,
        validation_alias="POLICY_SERVICE_PORT",
    )
    cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """
    Get the global settings instance.

    Returns:
        Settings: The global settings instance, containing all configuration values.

    Raises:
        ValidationError: If environment variables are present but invalid.

    Notes:
        1. Reads configuration from environment variables and the .env file.
        2. The function returns a cached instance to avoid repeated parsing of the .env file.

    """
    return Settings()
