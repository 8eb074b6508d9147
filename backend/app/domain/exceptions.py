"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidIdentifierError(ValueError):
    """Raised when a path identifier is not a well-formed document key."""

    def __init__(self, entity_type: str, value: str):
        self.entity_type = entity_type
        self.value = value
        super().__init__(
            f"'{value}' is not a valid {entity_type} id "
            "(expected a 24-character hex string)"
        )


class StoreError(Exception):
    """Raised when the document store rejects or fails an operation."""


class StoreConnectionError(StoreError, ConnectionError):
    """Raised when no connection to the document store can be established.

    The endpoint may be unreachable, the credentials rejected, or the
    connection string malformed or missing.
    """
