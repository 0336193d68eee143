"""
Exceptions raised by the list/todo operations.

Route handlers translate these: ValidationError becomes a failure flash
on the re-rendered form, NotFoundError becomes a 404.
"""


class ValidationError(Exception):
    """A submitted list or todo name was rejected."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(Exception):
    """No list or todo exists with the requested id."""

    def __init__(self, kind: str, entity_id: int):
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id
