"""Strongly typed identifiers for comment engine entities.

Identifiers are opaque strings handed to us by the host application, so
they are NewTypes over ``str`` rather than UUIDs.
"""

from typing import NewType

CommentId = NewType("CommentId", str)
UserId = NewType("UserId", str)
ContextId = NewType("ContextId", str)
