"""Unit tests for assemble_tree."""

import random

from commenttree.domain.model import CommentNode
from commenttree.domain.service import assemble_tree
from tests.conftest import make_comment


def _shape(node: CommentNode) -> dict:
    """Reduce a tree to {id: [child shapes]} for comparison."""
    return {node.id: [_shape(child) for child in node.children]}


def _sorted_shape(node: CommentNode) -> dict:
    """Like _shape, with siblings ordered by id."""
    children = sorted(node.children, key=lambda n: n.id)
    return {node.id: [_sorted_shape(child) for child in children]}


class TestAssembleTree:
    """Tests for assemble_tree function."""

    def test_single_chain(self):
        """Nested replies form one branch under the root."""
        root = make_comment(1)
        child = make_comment(2, parent=root)
        grandchild = make_comment(3, parent=child)

        tree = assemble_tree(root, [root, child, grandchild])

        assert _shape(tree) == {1: [{2: [{3: []}]}]}

    def test_root_only(self):
        """A comment without replies has no children."""
        root = make_comment(1)

        tree = assemble_tree(root, [root])

        assert tree.comment == root
        assert tree.children == []

    def test_empty_records_falls_back_to_root(self):
        """If the subtree read returns nothing the root stands alone."""
        root = make_comment(1)

        tree = assemble_tree(root, [])

        assert tree.comment == root
        assert tree.children == []

    def test_siblings_keep_input_order(self):
        """Siblings appear in the order storage returned them."""
        root = make_comment(1)
        first = make_comment(2, parent=root)
        second = make_comment(3, parent=root)

        tree = assemble_tree(root, [root, second, first])

        assert [child.id for child in tree.children] == [3, 2]

    def test_subtree_root_with_parent_is_not_attached_above(self):
        """A non-top-level root keeps its own subtree and nothing else."""
        top = make_comment(1)
        middle = make_comment(2, parent=top)
        leaf = make_comment(3, parent=middle)

        tree = assemble_tree(middle, [middle, leaf])

        assert _shape(tree) == {2: [{3: []}]}

    def test_orphans_are_dropped(self):
        """Records whose parent is outside the set are not linked anywhere."""
        root = make_comment(1)
        other = make_comment(10)
        stray = make_comment(11, parent=other)

        tree = assemble_tree(root, [root, stray])

        assert tree.children == []

    def test_invariant_to_input_order(self):
        """Shuffled input builds the same tree up to sibling order."""
        root = make_comment(1)
        records = [root]
        for comment_id in range(2, 40):
            parent = random.Random(comment_id).choice(records)
            records.append(make_comment(comment_id, parent=parent))

        expected = _sorted_shape(assemble_tree(root, records))
        for seed in range(5):
            shuffled = records[:]
            random.Random(seed).shuffle(shuffled)

            assert _sorted_shape(assemble_tree(root, shuffled)) == expected

    def test_every_record_appears_once(self):
        """Walking the tree visits each record exactly once."""
        root = make_comment(1)
        a = make_comment(2, parent=root)
        b = make_comment(3, parent=root)
        c = make_comment(4, parent=a)

        tree = assemble_tree(root, [c, b, a, root])

        assert sorted(node.id for node in tree.walk()) == [1, 2, 3, 4]
