class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmptyRosterError(ValidationError):
    """Raised when there are no students to split into groups."""

    def __init__(self, message: str = "There are no students to group"):
        super().__init__(message)


class InvalidGroupCountError(ValidationError):
    """Raised when the requested number of groups is outside [1, roster size]."""

    def __init__(self, num_groups, max_groups: int):
        self.num_groups = num_groups
        self.max_groups = int(max_groups)
        super().__init__(
            f"Number of groups must be within [1, {self.max_groups}] (got {num_groups!r})"
        )
