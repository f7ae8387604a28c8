"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when a write would create a duplicate of a unique field."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class EntityValidationError(Exception):
    """Raised when required fields are missing or a field cannot be set.

    ``errors`` maps each offending field path to a short reason.
    """

    def __init__(self, entity_type: str, errors: dict[str, str]):
        self.entity_type = entity_type
        self.errors = errors
        details = ", ".join(f"{name}: {reason}" for name, reason in errors.items())
        super().__init__(f"Invalid {entity_type}: {details}")


class ApiTransportError(Exception):
    """Raised when the article API is unreachable or answers with an error.

    ``status_code`` is None when no HTTP response was received at all.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        self.message = message
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")
