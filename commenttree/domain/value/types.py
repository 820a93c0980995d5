"""Domain value objects for the comment store.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from commenttree.domain.value.common import RootValueObject
from commenttree.domain.value.identifiers import PathId

PATH_SEPARATOR = "/"


class SortField(str, Enum):
    """Column used to order top-level comments."""

    ID = "id"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    """Direction used to order top-level comments."""

    ASC = "asc"
    DESC = "desc"


class MaterializedPath(RootValueObject[str]):
    """Ancestry chain of a comment encoded as a string.

    Every segment is a path id terminated by the separator, starting at the
    root: ``A/`` for a root, ``A/B/`` for its child. A comment's path is its
    parent's path with its own segment appended, so "is X a descendant of Y"
    is a plain prefix test and a whole subtree matches ``LIKE 'Y.path%'``.
    """

    @field_validator("root")
    @classmethod
    def validate_path_format(cls, v: str) -> str:
        """Validate path is a non-empty run of separator-terminated segments."""
        if not v.endswith(PATH_SEPARATOR):
            raise ValueError("Path must end with the separator")
        if any(not segment for segment in v[:-1].split(PATH_SEPARATOR)):
            raise ValueError("Path segments must not be empty")
        return v

    @classmethod
    def for_root(cls, path_id: PathId) -> "MaterializedPath":
        """Path of a top-level comment."""
        return cls(f"{path_id}{PATH_SEPARATOR}")

    def child(self, path_id: PathId) -> "MaterializedPath":
        """Path of a direct child with the given segment."""
        return MaterializedPath(f"{self.root}{path_id}{PATH_SEPARATOR}")

    @property
    def segments(self) -> list[str]:
        """Path ids from the root down to this node."""
        return self.root[:-1].split(PATH_SEPARATOR)

    @property
    def depth(self) -> int:
        """Nesting level (0 for top-level)."""
        return len(self.segments) - 1

    @property
    def leaf(self) -> str:
        """This node's own segment."""
        return self.segments[-1]

    def parent(self) -> "MaterializedPath | None":
        """Path of the parent, or None for a top-level comment."""
        if self.depth == 0:
            return None
        return MaterializedPath(self.root[: -len(self.leaf) - 1])

    def is_ancestor_of(self, other: "MaterializedPath") -> bool:
        """Whether other lies strictly below this path."""
        return other.root != self.root and other.root.startswith(self.root)

    def contains(self, other: "MaterializedPath") -> bool:
        """Whether other is this node or one of its descendants."""
        return other.root.startswith(self.root)
