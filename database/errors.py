# database/errors.py


class DatabaseError(Exception):
    """Raised by the query layer when a statement fails; the message names the operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
