"""Tests for SelectionController."""

from core.selection import SelectionController
from core.tree import delete_node


class TestSelectionController:
    """State machine: empty <-> selected(id)."""

    def test_starts_empty(self):
        sel = SelectionController()
        assert sel.is_empty
        assert sel.selected_id is None
        assert not sel.is_selected("a")

    def test_select_and_replace(self):
        sel = SelectionController()
        sel.select("a")
        assert sel.is_selected("a")
        sel.select("b")
        assert sel.is_selected("b")
        assert not sel.is_selected("a")

    def test_select_same_id_keeps_selection(self):
        sel = SelectionController()
        sel.select("a")
        sel.select("a")
        assert sel.selected_id == "a"

    def test_deselect(self):
        sel = SelectionController()
        sel.select("a")
        sel.deselect()
        assert sel.is_empty

    def test_toggle(self):
        sel = SelectionController()
        assert sel.toggle("a") is True
        assert sel.toggle("b") is True
        assert sel.selected_id == "b"
        assert sel.toggle("b") is False
        assert sel.is_empty

    def test_node_deleted_clears_only_matching(self):
        sel = SelectionController()
        sel.select("a")
        sel.node_deleted("b")
        assert sel.selected_id == "a"
        sel.node_deleted("a")
        assert sel.is_empty

    def test_prune_stale_selection(self, sample_tree):
        sel = SelectionController()
        sel.select("n4")
        assert sel.prune(sample_tree) is False
        assert sel.selected_id == "n4"

        smaller = delete_node(sample_tree, "n2")
        assert sel.prune(smaller) is True
        assert sel.is_empty

    def test_prune_when_empty(self, sample_tree):
        assert SelectionController().prune(sample_tree) is False
