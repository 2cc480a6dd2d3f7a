"""Unit tests for the Node tree model.

Covers building, chaining, parent links, search and visiting order.
"""

import unittest
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import treeprint
from treeprint import Node


class TestBuilding(unittest.TestCase):
    """Test the add_* operations."""

    def test_new_tree(self):
        tree = treeprint.new()
        self.assertEqual(tree.value, ".")
        self.assertIsNone(tree.meta)
        self.assertIsNone(tree.parent)
        self.assertEqual(tree.children, [])

    def test_add_node_returns_parent(self):
        tree = treeprint.new()
        result = tree.add_node("A")

        self.assertIs(result, tree)
        self.assertEqual(len(tree.children), 1)
        self.assertEqual(tree.children[0].value, "A")
        self.assertIs(tree.children[0].parent, tree)

    def test_add_meta_node_returns_parent(self):
        tree = treeprint.new()
        result = tree.add_meta_node("m", "A")

        self.assertIs(result, tree)
        self.assertEqual(tree.children[0].meta, "m")
        self.assertEqual(tree.children[0].value, "A")

    def test_add_branch_returns_child(self):
        tree = treeprint.new()
        branch = tree.add_branch("A")

        self.assertIsNot(branch, tree)
        self.assertIs(branch.parent, tree)
        self.assertIs(tree.children[0], branch)

    def test_add_meta_branch_returns_child(self):
        tree = treeprint.new()
        branch = tree.add_meta_branch(5, "A")

        self.assertIs(branch.parent, tree)
        self.assertEqual(branch.meta, 5)

    def test_children_keep_insertion_order(self):
        tree = treeprint.new()
        tree.add_node("c").add_node("a")
        tree.add_branch("b")

        self.assertEqual([c.value for c in tree.children], ["c", "a", "b"])
        self.assertEqual([c.value for c in tree], ["c", "a", "b"])
        self.assertEqual(len(tree), 3)

    def test_parent_links_are_consistent(self):
        tree = treeprint.new()
        tree.add_branch("a").add_branch("b").add_node("c")

        for node in treeprint.traverse_tree(tree, min_depth=1):
            self.assertIn(node, node.parent.children)

    def test_printf_style_builders(self):
        tree = treeprint.new()
        tree.add_nodef("%s-%d", "leaf", 1)
        tree.add_meta_nodef("m", "%05.1f", 3.14159)
        branch = tree.add_branchf("branch %d", 2)
        meta_branch = tree.add_meta_branchf(9, "%s", "mb")

        self.assertEqual(tree.children[0].value, "leaf-1")
        self.assertEqual(tree.children[1].value, "003.1")
        self.assertEqual(branch.value, "branch 2")
        self.assertEqual(meta_branch.meta, 9)
        self.assertEqual(meta_branch.value, "mb")

    def test_builders_are_documented(self):
        for name in ("add_node", "add_nodef", "add_meta_node", "add_meta_nodef",
                     "add_branch", "add_branchf", "add_meta_branch", "add_meta_branchf"):
            with self.subTest(name=name):
                self.assertTrue(getattr(Node, name).__doc__)

    def test_printf_without_args_keeps_percent(self):
        tree = treeprint.new()
        tree.add_nodef("100%")

        self.assertEqual(tree.children[0].value, "100%")

    def test_new_with_rootf(self):
        tree = treeprint.new_with_rootf("%s (%d)", "pkg", 3)
        self.assertEqual(tree.value, "pkg (3)")

    def test_set_valuef(self):
        tree = treeprint.new()
        tree.set_valuef("%d items", 4)
        self.assertEqual(tree.value, "4 items")

    def test_leaf_node_is_truthy(self):
        leaf = Node("x")
        self.assertEqual(len(leaf), 0)
        self.assertTrue(leaf)
        self.assertTrue(leaf.is_leaf())

    def test_repr(self):
        tree = treeprint.new()
        tree.add_node("A")
        self.assertEqual(repr(tree), "Node(value='.', meta=None, children=1)")


class TestNavigation(unittest.TestCase):
    """Test last-child lookup, depth and sibling position."""

    def test_find_last_child_empty(self):
        self.assertIsNone(treeprint.new().find_last_child())

    def test_find_last_child(self):
        tree = treeprint.new()
        tree.add_node("A").add_node("B")
        last = tree.add_branch("C")

        self.assertIs(tree.find_last_child(), last)

    def test_find_last_node_is_deprecated(self):
        tree = treeprint.new()
        tree.add_node("A")

        with pytest.warns(DeprecationWarning):
            last = tree.find_last_node()

        self.assertIs(last, tree.children[0])

    def test_is_last(self):
        tree = treeprint.new()
        first = tree.add_branch("A")
        second = tree.add_branch("B")

        self.assertFalse(first.is_last())
        self.assertTrue(second.is_last())
        self.assertTrue(tree.is_last())

    def test_depth(self):
        tree = treeprint.new()
        deep = tree.add_branch("a").add_branch("b").add_branch("c")

        self.assertEqual(tree.depth(), 0)
        self.assertEqual(deep.depth(), 3)

    def test_as_branch_detaches_parent_only(self):
        tree = treeprint.new()
        branch = tree.add_branch("A")
        branch.add_node("B")

        branch.as_branch()

        self.assertIsNone(branch.parent)
        self.assertIs(tree.children[0], branch)
        self.assertIs(branch.children[0].parent, branch)

    def test_branch_alias(self):
        tree = treeprint.new()
        branch = tree.add_branch("A")
        self.assertIs(branch.branch(), branch)
        self.assertIsNone(branch.parent)

    def test_as_branch_on_root_is_noop(self):
        tree = treeprint.new()
        tree.add_node("A")
        before = tree.string()

        tree.as_branch()

        self.assertEqual(tree.string(), before)


class TestSearch(unittest.TestCase):
    """Test find_by_value and find_by_meta."""

    def setUp(self):
        """Create a tree with duplicate and composite payloads.

        .
        ├─ [1]  x
        │   └─ [dup]  deep
        │       └─ {'k': [1, 2]}
        ├─ [dup]  second
        └─ 1
        """
        self.tree = treeprint.new()
        x = self.tree.add_meta_branch(1, "x")
        x.add_meta_branch("dup", "deep").add_node({"k": [1, 2]})
        self.tree.add_meta_node("dup", "second")
        self.tree.add_node(1)

    def test_find_by_value(self):
        node = self.tree.find_by_value("second")
        self.assertIsNotNone(node)
        self.assertEqual(node.meta, "dup")

    def test_find_by_value_deep_structural(self):
        target = {"k": [1, 2]}
        node = self.tree.find_by_value(target)

        self.assertIsNotNone(node)
        self.assertIsNot(node.value, target)
        self.assertEqual(node.value, target)

    def test_find_by_value_beyond_first_level(self):
        node = self.tree.find_by_value("deep")
        self.assertIsNotNone(node)
        self.assertEqual(node.depth(), 2)

    def test_find_by_value_type_sensitive(self):
        self.assertIsNone(self.tree.find_by_value(1.0))
        self.assertIsNone(self.tree.find_by_value(True))
        self.assertIs(self.tree.find_by_value(1), self.tree.children[-1])

    def test_find_by_value_not_found(self):
        self.assertIsNone(self.tree.find_by_value("missing"))
        self.assertIsNone(self.tree.find_by_value({"k": [1]}))

    def test_find_by_meta_first_preorder_match(self):
        node = self.tree.find_by_meta("dup")
        # The nested one comes before the later sibling in pre-order
        self.assertEqual(node.value, "deep")

    def test_find_by_meta_not_found(self):
        self.assertIsNone(self.tree.find_by_meta("nope"))

    def test_find_by_meta_none_matches_plain_nodes(self):
        node = self.tree.find_by_meta(None)
        self.assertEqual(node.value, {"k": [1, 2]})

    def test_find_does_not_match_self(self):
        tree = treeprint.new_with_root("root")
        self.assertIsNone(tree.find_by_value("root"))

    def test_find_on_empty_tree(self):
        tree = treeprint.new()
        self.assertIsNone(tree.find_by_value("."))
        self.assertIsNone(tree.find_by_meta(None))


class TestVisitAll(unittest.TestCase):
    """Test visiting order."""

    def test_visit_order_is_child_then_subtree(self):
        tree = treeprint.new()
        a = tree.add_branch("A")
        a.add_branch("B").add_node("X")
        a.add_node("C")
        tree.add_node("D")

        visited = []
        tree.visit_all(lambda node: visited.append(node.value))

        self.assertEqual(visited, ["A", "B", "X", "C", "D"])

    def test_visit_excludes_start_node(self):
        tree = treeprint.new()
        visited = []
        tree.visit_all(visited.append)
        self.assertEqual(visited, [])

    def test_visit_from_subtree(self):
        tree = treeprint.new()
        a = tree.add_branch("A")
        a.add_node("B").add_node("C")
        tree.add_node("D")

        visited = []
        a.visit_all(lambda node: visited.append(node.value))

        self.assertEqual(visited, ["B", "C"])


if __name__ == "__main__":
    unittest.main()
