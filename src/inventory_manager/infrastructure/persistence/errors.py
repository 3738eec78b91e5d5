"""Storage-level failures.

These are not part of the use case result taxonomy: they propagate
unchanged to the transport layer, which reports them generically.
"""


class StorageError(Exception):
    """The backing store could not complete an operation."""


class DuplicateSkuError(StorageError):
    """A write would give two products the same SKU."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"SKU '{sku}' is already used by another product")
        self.sku = sku
