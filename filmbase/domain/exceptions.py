import uuid


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        super().__init__(message)


class MissingRequiredFieldError(ValidationError):
    """Raised when a request payload is built without one of its mandatory fields.

    It derives from DomainError rather than ValueError so that pydantic lets it
    propagate instead of folding it into a pydantic ValidationError.
    """

    def __init__(self, field_name: str):
        super().__init__(field_name, f"Field '{field_name}' is required")


class UnstorableValueError(ValidationError):
    """Raised when a well-formed value falls outside what the database column holds."""

    def __init__(self, field_name: str, reason: str):
        super().__init__(field_name, f"Value of '{field_name}' cannot be stored: {reason}")


class NotFoundError(DomainError):
    pass


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id: uuid.UUID):
        self.movie_id = movie_id
        super().__init__(f"Movie with id {movie_id} not found")
