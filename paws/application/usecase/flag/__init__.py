"""Flag use cases."""

from .flag_comment import FlagCommentRequest, FlagCommentResponse, FlagCommentUseCase
from .withdraw_flag import (
    WithdrawFlagRequest,
    WithdrawFlagResponse,
    WithdrawFlagUseCase,
)

__all__ = [
    "FlagCommentRequest",
    "FlagCommentResponse",
    "FlagCommentUseCase",
    "WithdrawFlagRequest",
    "WithdrawFlagResponse",
    "WithdrawFlagUseCase",
]
