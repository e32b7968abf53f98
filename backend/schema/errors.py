"""Exceptions raised by the schema pipeline.

Only batch-level and export-level problems are raised.  Per-URL problems are
returned as :class:`~backend.schema.models.Failure` values and title-fetch
problems never leave the resolver.
"""

from __future__ import annotations


class BatchError(ValueError):
    """The batch as a whole cannot be processed."""


class EmptyBatchError(BatchError):
    def __init__(self) -> None:
        super().__init__("Por favor, ingresa al menos una URL.")


class BatchTooLargeError(BatchError):
    def __init__(self, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(f"Por favor, ingresa un máximo de {limit} URLs.")


class InvalidUrlError(ValueError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"URL inválida: {value}")


class ExportError(ValueError):
    def __init__(self, message: str = "No hay schemas para exportar.") -> None:
        super().__init__(message)
