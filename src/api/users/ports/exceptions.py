"""Domain exceptions for the users bounded context.

These exceptions represent domain-level errors that can occur during
repository and service operations. They should be caught and handled by
the presentation layer.
"""


class DuplicateUserEmailError(Exception):
    """Raised when creating an account for an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(f"User with email '{email}' already exists")
        self.email = email


class LastSuperAdminError(Exception):
    """Raised when deleting the only remaining super admin."""

    def __init__(self, email: str):
        super().__init__("Cannot delete the last super_admin")
        self.email = email
