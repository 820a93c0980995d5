"""Domain value objects for the comment store."""

from commenttree.domain.value.identifiers import CommentId, PathId
from commenttree.domain.value.types import (
    PATH_SEPARATOR,
    MaterializedPath,
    SortField,
    SortOrder,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PathId",
    # Types
    "PATH_SEPARATOR",
    "MaterializedPath",
    "SortField",
    "SortOrder",
]
