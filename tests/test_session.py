"""Tests for Session command dispatch."""

import itertools

import pytest

from core.export import deserialize
from core.session import (
    OP_ADD,
    OP_DELETE,
    OP_LEVEL,
    OP_MOVE,
    OP_RENAME,
    Command,
    Session,
)
from core.tree import find_node


@pytest.fixture
def session():
    # Own counter so ids never collide with the sample_tree fixture
    counter = itertools.count(1)
    return Session(new_id=lambda: f"n{next(counter)}")


class TestSession:
    """Tests for Session."""

    def test_starts_with_root(self, session):
        assert session.root.id == "n1"
        assert session.root.title == "Root"
        assert session.root.level == 0
        assert session.root.children == ()
        assert session.selection.is_empty

    def test_apply_each_op(self, session):
        session.apply(Command(OP_ADD, "n1", "A"))
        session.apply(Command(OP_ADD, "n1", "B"))
        session.apply(Command(OP_RENAME, "n2", "A!"))
        session.apply(Command(OP_LEVEL, "n2", 3))
        session.apply(Command(OP_MOVE, "n2", 1))
        assert [c.title for c in session.root.children] == ["B", "A!"]
        assert find_node(session.root, "n2").level == 4
        session.apply(Command(OP_DELETE, "n2"))
        assert [c.title for c in session.root.children] == ["B"]

    def test_apply_returns_current_root(self, session):
        result = session.apply(Command(OP_ADD, "n1", "A"))
        assert result is session.root

    def test_noop_returns_same_snapshot(self, session):
        before = session.root
        assert session.apply(Command(OP_RENAME, "missing", "x")) is before

    def test_unknown_op_raises(self, session):
        with pytest.raises(ValueError, match="Unknown command"):
            session.apply(Command("explode", "n1"))

    def test_selection_edits_without_selection_are_noops(self, session):
        before = session.root
        assert session.add_to_selected("A") is before
        assert session.delete_selected() is before
        assert session.change_selected_level(1) is before
        assert session.move_selected(1) is before
        assert session.rename_selected("x") is before

    def test_edits_target_selection(self, session):
        session.selection.select("n1")
        session.add_to_selected("A")
        session.selection.select("n2")
        session.add_to_selected("A1")
        session.rename_selected("Alpha")
        session.change_selected_level(-100)
        node = session.selected_node()
        assert (node.title, node.level) == ("Alpha", 0)
        assert node.children[0].level == 2

    def test_delete_clears_selection(self, session):
        session.selection.select("n1")
        session.add_to_selected("A")
        session.selection.select("n2")
        session.delete_selected()
        assert session.selection.is_empty
        assert session.root.children == ()

    def test_deleting_ancestor_clears_descendant_selection(self, session):
        session.apply(Command(OP_ADD, "n1", "A"))
        session.apply(Command(OP_ADD, "n2", "B"))
        session.selection.select("n3")
        session.apply(Command(OP_DELETE, "n2"))
        assert find_node(session.root, "n3") is None
        assert session.selection.is_empty
        # Later selection edits are plain no-ops on the remaining tree
        assert session.add_to_selected("x") is session.root

    def test_deleting_other_branch_keeps_selection(self, session):
        session.apply(Command(OP_ADD, "n1", "A"))
        session.apply(Command(OP_ADD, "n1", "B"))
        session.selection.select("n3")
        session.apply(Command(OP_DELETE, "n2"))
        assert session.selection.selected_id == "n3"

    def test_root_delete_is_rejected(self, session):
        session.selection.select("n1")
        session.add_to_selected("A")
        before = session.root
        assert session.delete_selected() is before
        assert session.root.title == "Root"
        assert len(session.root.children) == 1
        assert session.selection.is_empty

    def test_rename_any_row(self, session):
        session.apply(Command(OP_ADD, "n1", "A"))
        session.rename("n2", "edited")
        assert find_node(session.root, "n2").title == "edited"

    def test_export_json_round_trips(self, session):
        session.apply(Command(OP_ADD, "n1", "A"))
        assert deserialize(session.export_json()) == session.root

    def test_load_replaces_tree_and_prunes_selection(self, session, sample_tree):
        session.apply(Command(OP_ADD, "n1", "A"))
        session.apply(Command(OP_ADD, "n1", "B"))
        session.selection.select("n3")
        session.load(sample_tree)
        assert session.root is sample_tree
        # n3 exists in sample_tree too, so it stays selected
        assert session.selection.selected_id == "n3"
        session.selection.select("n2")
        session.load(sample_tree.with_children(()))
        assert session.selection.is_empty
        assert session.selected_node() is None
