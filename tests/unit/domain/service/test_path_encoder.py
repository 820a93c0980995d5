"""Unit tests for PathEncoder."""

from uuid import UUID

from commenttree.domain.service import PathEncoder
from commenttree.domain.value import MaterializedPath, PathId


def _fixed_ids(*values: str):
    ids = iter(UUID(v) for v in values)
    return lambda: next(ids)


A = "aaaaaaaa-0000-4000-8000-000000000001"
B = "bbbbbbbb-0000-4000-8000-000000000002"
C = "cccccccc-0000-4000-8000-000000000003"


class TestEncode:
    """Tests for encode method."""

    def test_root_path_is_own_segment(self):
        """A top-level comment's path is its path id plus the separator."""
        encoder = PathEncoder(id_factory=_fixed_ids(A))

        path_id, path = encoder.encode(None)

        assert path_id == UUID(A)
        assert path == MaterializedPath(f"{A}/")

    def test_child_path_extends_parent(self):
        """A reply's path is the parent path with its own segment appended."""
        encoder = PathEncoder(id_factory=_fixed_ids(A, B, C))

        _, root = encoder.encode(None)
        _, child = encoder.encode(root)
        _, grandchild = encoder.encode(child)

        assert child.root == f"{A}/{B}/"
        assert grandchild.root == f"{A}/{B}/{C}/"
        assert grandchild.root.startswith(child.root)
        assert child.root.startswith(root.root)

    def test_explicit_path_id_is_used(self):
        """A supplied segment is used instead of a generated one."""
        encoder = PathEncoder(id_factory=_fixed_ids())
        path_id = PathId(UUID(B))

        returned_id, path = encoder.encode(MaterializedPath(f"{A}/"), path_id=path_id)

        assert returned_id == path_id
        assert path.root == f"{A}/{B}/"

    def test_generated_segments_are_unique(self):
        """Default segments are random UUIDs and never collide in practice."""
        encoder = PathEncoder()

        segments = {encoder.new_path_id() for _ in range(100)}

        assert len(segments) == 100

    def test_sibling_paths_are_not_prefixes_of_each_other(self):
        """The terminating separator keeps sibling subtrees apart."""
        encoder = PathEncoder()
        _, root = encoder.encode(None)

        _, first = encoder.encode(root)
        _, second = encoder.encode(root)

        assert not second.root.startswith(first.root)
        assert not first.root.startswith(second.root)
