class MissingPrerequisiteError(RuntimeError):
    """Raised when baseline data that seeding depends on is absent.

    Attributes:
        role_name (str): The role that could not be found in the catalog.

    """

    def __init__(self, role_name: str):
        self.role_name = role_name
        super().__init__(f"Role '{role_name}' not found in the role catalog.")


class StartupAbortedError(RuntimeError):
    """Raised by the startup sequence to stop a service from serving traffic."""
