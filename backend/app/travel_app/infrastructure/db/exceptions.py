"""Persistence-layer exceptions."""


class CorruptDatabaseObjectException(Exception):
    """Raised when stored data no longer satisfies the rules enforced on write.

    This signals a data-integrity bug (tampering, schema drift or a defect
    elsewhere), not bad user input. It must propagate and abort the read.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
