"""Scene graph nodes.

A node owns its children; each child keeps only a weak reference back to
its parent. The back-reference is assigned once, when the child is handed
to its parent's constructor, and is used for nothing but world-position
lookups. A child outliving its root cannot answer those lookups and raises
``SceneGraphError``.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator

from .errors import SceneGraphError
from .presentation import PresentationStyle
from .value_objects import Box3D, Dimensions3D, Position3D, Vector3D


class SceneNode:
    """An object in 3D space, placed relative to its parent.

    Nodes are immutable once constructed. Children are attached by passing
    them to the constructor, in the order they should be traversed.

    Attributes:
        name: Identifier of the node ("cabinet-root", "Left Side", ...).
        label: Display label, defaults to the name.
        position: Offset from the parent's origin.
        size: Extent of the node's own geometry.
        style: Presentation data for renderers.
        children: Child nodes in insertion order.
    """

    __slots__ = ("_name", "_label", "_position", "_size", "_style", "_children", "_parent", "__weakref__")

    def __init__(
        self,
        name: str,
        *,
        label: str | None = None,
        position: Position3D | None = None,
        size: Dimensions3D | None = None,
        style: PresentationStyle | None = None,
        children: Iterable[SceneNode] = (),
    ) -> None:
        self._name = name
        self._label = label if label is not None else name
        self._position = position or Position3D.origin()
        self._size = size or Dimensions3D.zero()
        self._style = style or PresentationStyle()
        self._parent: weakref.ReferenceType[SceneNode] | None = None

        attached: list[SceneNode] = []
        for child in children:
            if child is self or any(child is other for other in attached):
                raise SceneGraphError(f"Node '{child.name}' listed twice under '{name}'")
            if child._parent is not None:
                raise SceneGraphError(
                    f"Node '{child.name}' already belongs to a scene; build a new node instead"
                )
            attached.append(child)
        for child in attached:
            child._parent = weakref.ref(self)
        self._children = tuple(attached)

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def position(self) -> Position3D:
        return self._position

    @property
    def size(self) -> Dimensions3D:
        return self._size

    @property
    def style(self) -> PresentationStyle:
        return self._style

    @property
    def children(self) -> tuple[SceneNode, ...]:
        return self._children

    @property
    def parent(self) -> SceneNode | None:
        """The parent node, or None for a root.

        Parents are held weakly. Reading the parent of a node whose tree has
        been released raises SceneGraphError; keep a reference to the root
        while working with its descendants.
        """
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise SceneGraphError(f"Parent of node '{self._name}' is no longer alive")
        return parent

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def has_geometry(self) -> bool:
        return self._size.has_geometry

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def world_position(self) -> Vector3D:
        """Sum of local positions from this node up to the root."""
        total = self._position.to_vector()
        node = self.parent
        while node is not None:
            total = total.add(node.position.to_vector())
            node = node.parent
        return total

    def local_bounds(self) -> Box3D:
        return Box3D.from_placement(self._position, self._size)

    def world_bounds(self) -> Box3D:
        return Box3D(self.world_position(), self._size.to_vector())

    def total_bounds(self) -> Box3D:
        """Union of this node's world box and every descendant's, depth first."""
        bounds = self.world_bounds()
        for child in self._children:
            bounds = bounds.union(child.total_bounds())
        return bounds

    def walk(self) -> Iterator[SceneNode]:
        """Yield this node and its descendants, depth-first pre-order."""
        yield self
        for child in self._children:
            yield from child.walk()

    def descendants(self) -> list[SceneNode]:
        """All nodes below this one, depth-first pre-order."""
        return [node for child in self._children for node in child.walk()]

    def find(self, name_fragment: str) -> SceneNode | None:
        """First descendant whose name contains ``name_fragment``."""
        for node in self.descendants():
            if name_fragment in node.name:
                return node
        return None

    def find_all(self, name_fragment: str) -> list[SceneNode]:
        return [node for node in self.descendants() if name_fragment in node.name]

    def format(self) -> str:
        return (
            f"SceneNode[{self._name}, pos={self._position.to_vector().format()}, "
            f"size={self._size.to_vector().format()}, children={len(self._children)}]"
        )

    def __repr__(self) -> str:
        return self.format()
