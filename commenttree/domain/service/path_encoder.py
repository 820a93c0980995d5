"""Materialized path construction for new comments."""

from typing import Callable, Optional
from uuid import UUID, uuid4

from commenttree.domain.value import MaterializedPath, PathId


class PathEncoder:
    """Builds the path of a new comment from its parent's path.

    Paths grow by appending, never prepending, and every segment is
    terminated by the separator. That keeps "all descendants of N" a single
    ``path LIKE N.path || '%'`` predicate and "is ancestor" a string prefix
    comparison, without recursive queries or a closure table.

    The encoder does no I/O: resolving the parent id to a path is the
    caller's job.
    """

    def __init__(self, id_factory: Callable[[], UUID] = uuid4) -> None:
        """Initialize path encoder.

        Args:
            id_factory: Source of globally unique path segments
        """
        self.id_factory = id_factory

    def new_path_id(self) -> PathId:
        """Generate a fresh, never reused path segment."""
        return PathId(self.id_factory())

    def encode(
        self,
        parent_path: Optional[MaterializedPath],
        path_id: Optional[PathId] = None,
    ) -> tuple[PathId, MaterializedPath]:
        """Compute the path of a new comment.

        Args:
            parent_path: Path of the parent (None for a top-level comment)
            path_id: Segment to use; generated when omitted

        Returns:
            The segment and the full path ``parent_path + path_id + "/"``
        """
        if path_id is None:
            path_id = self.new_path_id()
        if parent_path is None:
            return path_id, MaterializedPath.for_root(path_id)
        return path_id, parent_path.child(path_id)
