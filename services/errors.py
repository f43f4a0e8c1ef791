"""Exceptions raised by the service layer."""


class NotFoundError(Exception):
    """A lookup matched no record."""


class CategoryNotFoundError(NotFoundError):
    """No category matches the given field value.

    Attributes:
        field: Name of the field used for the lookup (uuid, name, description).
        value: The value that matched nothing.
    """

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Category with {field} '{value}' not found")
