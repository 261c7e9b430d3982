"""Tests for flattening a tree into display rows."""

from core.tree import change_level
from ui.model import EditTracker, find_row_index, flatten_tree
from ui.types import Row


class TestFlattenTree:
    """Tests for flatten_tree."""

    def test_rows_in_preorder_including_root(self, sample_tree):
        rows = flatten_tree(sample_tree)
        assert [r.entry_id for r in rows] == ["n1", "n2", "n4", "n3"]
        assert rows[0] == Row(entry_id="n1", title="Root", level=0, depth=0)

    def test_level_can_drift_from_depth(self, sample_tree):
        tree = change_level(sample_tree, "n3", 4)
        row = flatten_tree(tree)[find_row_index(flatten_tree(tree), "n3")]
        assert (row.level, row.depth) == (5, 1)

    def test_find_row_index(self, sample_tree):
        rows = flatten_tree(sample_tree)
        assert find_row_index(rows, "n4") == 2
        assert find_row_index(rows, "missing") is None


class TestEditTracker:
    """Tests for EditTracker."""

    def test_toggle(self):
        edits = EditTracker()
        assert edits.toggle("n2") is True
        assert edits.is_editing("n2")
        assert edits.toggle("n2") is False
        assert not edits.is_editing("n2")

    def test_sync_keeps_selected_editor(self, sample_tree):
        edits = EditTracker()
        edits.toggle("n2")
        edits.sync(flatten_tree(sample_tree), "n2")
        assert edits.is_editing("n2")

    def test_deselecting_row_closes_its_editor(self, sample_tree):
        edits = EditTracker()
        edits.toggle("n2")
        edits.sync(flatten_tree(sample_tree), None)
        assert not edits.is_editing("n2")

    def test_selecting_other_row_closes_editor(self, sample_tree):
        edits = EditTracker()
        edits.toggle("n2")
        edits.sync(flatten_tree(sample_tree), "n3")
        assert not edits.is_editing("n2")

    def test_deleted_row_closes_editor(self, sample_tree):
        edits = EditTracker()
        edits.toggle("n4")
        smaller = sample_tree.with_children(sample_tree.children[1:])
        edits.sync(flatten_tree(smaller), "n4")
        assert not edits.is_editing("n4")
