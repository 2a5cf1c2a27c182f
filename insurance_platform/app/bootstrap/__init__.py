"""Startup tasks that guarantee baseline data before a service accepts traffic."""

from .admin_seeder import AdminAccountSeeder, SeedOutcome
from .exceptions import MissingPrerequisiteError, StartupAbortedError
from .startup import seed_default_admin

__all__ = [
    "AdminAccountSeeder",
    "MissingPrerequisiteError",
    "SeedOutcome",
    "StartupAbortedError",
    "seed_default_admin",
]
