"""Domain-level exceptions.

The Product aggregate raises DomainError whenever one of its invariants
would be broken. Use cases translate it into a result value so the
transport layer never has to catch it.
"""


class DomainError(Exception):
    """An aggregate invariant rejected a construction or mutation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
