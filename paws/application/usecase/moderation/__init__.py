"""Moderation use cases."""

from .approve_comment import (
    ApproveCommentRequest,
    ApproveCommentResponse,
    ApproveCommentUseCase,
)
from .get_moderation_queue import (
    FlagItem,
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
    QueueItem,
)
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)

__all__ = [
    "ApproveCommentRequest",
    "ApproveCommentResponse",
    "ApproveCommentUseCase",
    "FlagItem",
    "GetModerationQueueRequest",
    "GetModerationQueueResponse",
    "GetModerationQueueUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
    "QueueItem",
]
