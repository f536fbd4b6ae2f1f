"""Tests for tree traversal."""

from coderlayout import LayoutString, Nesting, PaneRef, Split, leaves, pane_ids, parse, visit
from tests.samples import FIVE_PANES, FOUR_PANES, SINGLE_PANE


class TestVisit:
    """Tests for visit()."""

    def test_pre_order(self):
        """Test parents are visited before their children."""
        layout = parse("0000,81x24,0,0{40x24,0,0,1,40x24,41,0,2}")
        kinds = []

        visit(layout, lambda node: kinds.append(type(node)))

        assert kinds == [LayoutString, Split, Nesting, Split, PaneRef, Split, PaneRef]

    def test_visits_subtree(self):
        """Test visiting a node below the root."""
        layout = parse(FOUR_PANES)
        seen = []

        visit(layout.root.content.children[1], seen.append)

        assert seen[0] is layout.root.content.children[1]
        assert [n.id for n in seen if isinstance(n, PaneRef)] == [1, 2, 3]

    def test_single_node(self):
        """Test a lone pane reference."""
        seen = []
        visit(PaneRef(4), seen.append)
        assert seen == [PaneRef(4)]


class TestPaneIds:
    """Tests for pane_ids() and leaves()."""

    def test_document_order(self):
        """Test ids come out left to right, depth first."""
        assert pane_ids(parse(FIVE_PANES)) == [1, 2, 3, 4, 5]

    def test_order_follows_layout_not_value(self):
        """Test ids are not sorted."""
        layout = parse("0000,30x10,0,0{9x10,0,0,5,9x10,10,0[9x4,10,0,8,9x5,10,5,2],10x10,20,0,0}")
        assert pane_ids(layout) == [5, 8, 2, 0]

    def test_single_pane(self):
        """Test a window with one pane."""
        assert pane_ids(parse(SINGLE_PANE)) == [7]

    def test_leaves(self):
        """Test leaves are the pane Splits."""
        found = leaves(parse(FOUR_PANES))

        assert [s.content.id for s in found] == [0, 1, 2, 3]
        assert found[0] == Split(100, 50, 0, 0, PaneRef(0))
        assert all(s.is_pane for s in found)
