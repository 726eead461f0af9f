"""Domain exceptions for the documents bounded context."""


class DocumentOwnerNotFoundError(Exception):
    """Raised when a document names an owner that is not a known user."""

    def __init__(self, owner_id: int):
        super().__init__(f"User {owner_id} does not exist")
        self.owner_id = owner_id
