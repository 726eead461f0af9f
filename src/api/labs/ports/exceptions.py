"""Domain exceptions for the labs bounded context.

These exceptions represent domain-level errors that can occur during
repository operations. They should be caught and handled by the
application or presentation layer.
"""


class LabNotFoundError(Exception):
    """Raised when a lab prefix is not registered.

    Content operations for an unknown lab are rejected before the content
    store is touched.
    """

    def __init__(self, prefix: str):
        super().__init__(f"Lab '{prefix}' not found")
        self.prefix = prefix


class DuplicateLabPrefixError(Exception):
    """Raised when onboarding a lab whose prefix is already registered.

    Prefixes are compared case-insensitively, so "ACME" and "acme" clash.
    """

    def __init__(self, prefix: str):
        super().__init__(f"Lab prefix '{prefix}' already exists")
        self.prefix = prefix
