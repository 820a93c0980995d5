"""Comment entity.

Comments nest under an optional parent with unlimited depth. Each one stores a
materialized path so a whole subtree can be read or deleted with a single
prefix predicate instead of a recursive query.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import Field

from commenttree.domain.model.common import DomainModel
from commenttree.domain.value import CommentId, MaterializedPath, PathId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - path_id: Opaque segment identifying this comment inside paths
    - path: Parent's path with path_id appended; never changes after creation
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    path_id: PathId
    path: MaterializedPath
    text: str = Field(min_length=1)
    created_at: datetime

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None


@dataclass
class CommentNode:
    """Node in an assembled comment tree.

    Children exist only in memory; they are populated by the tree assembler
    and never persisted.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        """ID of the wrapped comment."""
        return self.comment.id

    def walk(self) -> Iterator["CommentNode"]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()
