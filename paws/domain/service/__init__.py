"""Domain services."""

from .base import Service
from .comment_service import CommentService, Thread
from .flag_ledger import FlagLedger
from .highlight_selector import Highlights, HighlightSelector
from .moderation import MODERATION_TRANSITIONS, ModerationStateMachine
from .permission_evaluator import PermissionEvaluator
from .reaction_ledger import ReactionLedger
from .tree_builder import CommentNode, TreeBuilder, find, walk
from .visibility_filter import VisibilityFilter

__all__ = [
    "CommentNode",
    "CommentService",
    "FlagLedger",
    "HighlightSelector",
    "Highlights",
    "MODERATION_TRANSITIONS",
    "ModerationStateMachine",
    "PermissionEvaluator",
    "ReactionLedger",
    "Service",
    "Thread",
    "TreeBuilder",
    "VisibilityFilter",
    "find",
    "walk",
]
