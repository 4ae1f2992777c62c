"""Tree builder for threaded comments."""

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field

import logfire

from paws.domain.model import Comment
from paws.domain.value import CommentId, SortMode

from .base import Service

_VISITING = 1
_DONE = 2


@dataclass
class CommentNode:
    """Node in a comment thread.

    A disposable projection of the flat comment records: built fresh on every
    read and never written back.
    """

    comment: Comment
    depth: int
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    def subtree_ids(self) -> list[CommentId]:
        """Ids of this node and all of its descendants, in pre-order."""
        return [node.id for node in walk([self])]


def walk(nodes: list[CommentNode]) -> Iterator[CommentNode]:
    """Iterate a forest in pre-order (parent before its replies)."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def find(nodes: list[CommentNode], comment_id: CommentId) -> CommentNode | None:
    """Find the node for a comment id anywhere in a forest."""
    return next((node for node in walk(nodes) if node.id == comment_id), None)


class TreeBuilder(Service):
    """Converts a flat comment list into a nested reply forest.

    Algorithm:
    1. Resolve each comment's parent; a parent that is missing from the input,
       is the comment itself, or lives in another context is ignored and the
       comment becomes a root (orphan promotion)
    2. Break parent cycles by promoting every comment on a cycle to root
    3. Attach children to parents, oldest reply first
    4. Order roots by sort mode and assign depths top-down
    """

    def build(
        self, comments: list[Comment], sort_mode: SortMode = SortMode.TOP
    ) -> list[CommentNode]:
        """Build the reply forest.

        Args:
            comments: Flat list of comments (typically already filtered)
            sort_mode: Root ordering; replies are always chronological

        Returns:
            Root nodes with children populated recursively
        """
        with logfire.span(
            "tree_builder.build", count=len(comments), sort_mode=sort_mode.value
        ):
            by_id: dict[CommentId, Comment] = {c.id: c for c in comments}
            parents = self._resolve_parents(by_id)

            children: dict[CommentId, list[Comment]] = defaultdict(list)
            roots: list[Comment] = []
            for comment in by_id.values():
                parent_id = parents[comment.id]
                if parent_id is None:
                    roots.append(comment)
                else:
                    children[parent_id].append(comment)

            roots.sort(key=self._root_sort_key(sort_mode), reverse=True)

            forest = [CommentNode(comment=c, depth=0) for c in roots]
            stack = list(forest)
            while stack:
                node = stack.pop()
                replies = sorted(
                    children.get(node.id, []), key=lambda c: (c.created_at, c.id)
                )
                node.children = [
                    CommentNode(comment=c, depth=node.depth + 1) for c in replies
                ]
                stack.extend(node.children)

            logfire.debug("Comment tree built", roots=len(forest))
            return forest

    @staticmethod
    def _root_sort_key(sort_mode: SortMode):
        if sort_mode == SortMode.TOP:
            return lambda c: (c.total_reactions, c.created_at, c.id)
        return lambda c: (c.created_at, c.id)

    @staticmethod
    def _resolve_parents(
        by_id: dict[CommentId, Comment],
    ) -> dict[CommentId, CommentId | None]:
        """Map each comment id to its usable parent id (None for roots)."""
        parents: dict[CommentId, CommentId | None] = {}
        for comment_id, comment in by_id.items():
            parent = by_id.get(comment.parent_id) if comment.parent_id else None
            if (
                parent is None
                or parent.id == comment_id
                or parent.context != comment.context
            ):
                parents[comment_id] = None
            else:
                parents[comment_id] = parent.id

        state: dict[CommentId, int] = {}
        for start in by_id:
            path: list[CommentId] = []
            current = start
            while current is not None and current not in state:
                state[current] = _VISITING
                path.append(current)
                current = parents[current]

            if current is not None and state[current] == _VISITING:
                cycle = path[path.index(current) :]
                logfire.warn(
                    "Comment ancestry cycle promoted to roots",
                    comment_ids=[str(c) for c in cycle],
                )
                for member in cycle:
                    parents[member] = None

            for member in path:
                state[member] = _DONE

        return parents
