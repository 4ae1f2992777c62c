"""Discussion context use cases."""

from .open_context import OpenContextRequest, OpenContextResponse, OpenContextUseCase

__all__ = [
    "OpenContextRequest",
    "OpenContextResponse",
    "OpenContextUseCase",
]
