"""Unit tests for SceneNode."""

import gc

import pytest

from cabinet_scene.domain import (
    Box3D,
    Dimensions3D,
    Position3D,
    PresentationStyle,
    SceneGraphError,
    SceneNode,
    Vector3D,
)


def _leaf(name: str, position=(0.0, 0.0, 0.0), size=(1.0, 1.0, 1.0)) -> SceneNode:
    return SceneNode(name, position=Position3D(*position), size=Dimensions3D(*size))


class TestConstruction:
    """Tests for building nodes."""

    def test_defaults(self) -> None:
        node = SceneNode("lonely")
        assert node.label == "lonely"
        assert node.position == Position3D.origin()
        assert node.size == Dimensions3D.zero()
        assert node.style == PresentationStyle()
        assert node.children == ()
        assert node.is_root
        assert not node.has_geometry

    def test_children_keep_insertion_order(self) -> None:
        a, b, c = _leaf("a"), _leaf("b"), _leaf("c")
        root = SceneNode("root", children=[a, b, c])
        assert [child.name for child in root.children] == ["a", "b", "c"]
        assert all(child.parent is root for child in root.children)

    def test_reattaching_child_raises(self) -> None:
        child = _leaf("shared")
        first = SceneNode("first", children=[child])
        with pytest.raises(SceneGraphError, match="already belongs"):
            SceneNode("second", children=[child])
        assert child.parent is first

    def test_duplicate_child_raises(self) -> None:
        child = _leaf("twice")
        with pytest.raises(SceneGraphError, match="listed twice"):
            SceneNode("root", children=[child, child])
        # Nothing was attached by the failed construction
        assert child.parent is None

    def test_nodes_are_read_only(self) -> None:
        node = _leaf("fixed")
        with pytest.raises(AttributeError):
            node.name = "changed"  # type: ignore[misc]

    def test_parent_link_is_weak(self) -> None:
        child = _leaf("orphan")
        SceneNode("temporary", children=[child])
        gc.collect()
        with pytest.raises(SceneGraphError, match="no longer alive"):
            child.parent

    def test_released_parent_is_not_read_as_root(self) -> None:
        child = _leaf("orphan", position=(1.0, 2.0, 3.0))
        SceneNode("temporary", position=Position3D(10.0, 0.0, 0.0), children=[child])
        gc.collect()
        for lookup in (lambda: child.is_root, lambda: child.depth, child.world_position):
            with pytest.raises(SceneGraphError):
                lookup()


class TestWorldPosition:
    """Tests for world-space placement."""

    def test_sum_of_ancestor_offsets(self) -> None:
        grandchild = _leaf("knob", position=(0.5, 0.5, 0.0))
        child = SceneNode("door", position=Position3D(1.0, 2.0, 3.0), children=[grandchild])
        root = SceneNode("root", position=Position3D(10.0, 0.0, 0.0), children=[child])
        assert root.world_position() == Vector3D(10.0, 0.0, 0.0)
        assert child.world_position() == Vector3D(11.0, 2.0, 3.0)
        assert grandchild.world_position() == Vector3D(11.5, 2.5, 3.0)
        assert grandchild.depth == 2

    def test_world_bounds(self) -> None:
        child = _leaf("part", position=(1.0, 1.0, 1.0), size=(2.0, 2.0, 2.0))
        root = SceneNode("root", position=Position3D(5.0, 0.0, 0.0), children=[child])
        assert child.local_bounds() == Box3D.of(1.0, 1.0, 1.0, 2.0, 2.0, 2.0)
        assert child.world_bounds() == Box3D.of(6.0, 1.0, 1.0, 2.0, 2.0, 2.0)
        assert root.is_root


class TestTotalBounds:
    """Tests for SceneNode.total_bounds()."""

    def test_union_of_children(self) -> None:
        root = SceneNode(
            "root",
            children=[
                _leaf("a", position=(0, 0, 0), size=(1, 1, 1)),
                _leaf("b", position=(3, 2, 1), size=(1, 1, 1)),
            ],
        )
        bounds = root.total_bounds()
        assert bounds.min == Vector3D(0, 0, 0)
        assert bounds.max == Vector3D(4, 3, 2)

    def test_sizeless_root_does_not_stretch_bounds(self) -> None:
        """A root without geometry does not pull the box to its origin."""
        root = SceneNode("root", children=[_leaf("a", position=(2, 2, 2), size=(1, 1, 1))])
        assert root.total_bounds() == Box3D.of(2, 2, 2, 1, 1, 1)


class TestTraversal:
    """Tests for walking and searching the tree."""

    @pytest.fixture
    def tree(self) -> SceneNode:
        return SceneNode(
            "root",
            children=[
                SceneNode("Upper", children=[_leaf("Upper Shelf")]),
                _leaf("Lower Shelf"),
                _leaf("Back"),
            ],
        )

    def test_walk_is_preorder(self, tree: SceneNode) -> None:
        assert [n.name for n in tree.walk()] == [
            "root",
            "Upper",
            "Upper Shelf",
            "Lower Shelf",
            "Back",
        ]

    def test_descendants_exclude_self(self, tree: SceneNode) -> None:
        assert len(tree.descendants()) == 4

    def test_find(self, tree: SceneNode) -> None:
        assert tree.find("Shelf").name == "Upper Shelf"
        assert tree.find("Drawer") is None

    def test_find_all(self, tree: SceneNode) -> None:
        assert [n.name for n in tree.find_all("Shelf")] == ["Upper Shelf", "Lower Shelf"]

    def test_repr(self) -> None:
        assert repr(_leaf("x")).startswith("SceneNode[x, pos=(0.000, 0.000, 0.000)")
