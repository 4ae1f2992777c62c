"""Highlight use cases."""

from .toggle_highlight import (
    ToggleHighlightRequest,
    ToggleHighlightResponse,
    ToggleHighlightUseCase,
)

__all__ = [
    "ToggleHighlightRequest",
    "ToggleHighlightResponse",
    "ToggleHighlightUseCase",
]
