"""
Uniform quadtree decomposition of a rectangular region.

A root region is split into four equal quadrants, and each quadrant is
split again, until a quadrant's width or height falls to the size floor.
Every node gets a sequential id from the builder that created it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

MIN_SIZE = 15  # inclusive: a region with w or h <= MIN_SIZE is a leaf
DEFAULT_ROOT = (0, 0, 100, 100)  # x, y, w, h

CHILD_LABELS = ('NW', 'NE', 'SW', 'SE')


class RegionException(Exception): ...


class SubdivideResult(Enum):
    SUBDIVIDED = 'Subdivided'
    SKIPPED_AT_FLOOR = 'SkippedAtFloor'
    SKIPPED_ALREADY_SUBDIVIDED = 'SkippedAlreadySubdivided'


@dataclass(frozen=True)
class Region:
    ''' rectangle with an integer top-left origin '''
    x: int
    y: int
    w: int
    h: int

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise RegionException(f"Region size must be non-negative, got {self.w}x{self.h} at ({self.x}, {self.y})")

    def __str__(self):
        return f"({self.x}, {self.y})"

    def size_str(self) -> str:
        return f"{self.w}x{self.h}"

    def get_bbox(self):
        """Get bounding box in [x1, x2, y1, y2] format"""
        return [self.x, self.x + self.w, self.y, self.y + self.h]


class QuadNode:
    """A single node of the quadtree: one region and zero or four children"""

    def __init__(self, node_id: int, region: Region, depth: int = 0):
        self.id = node_id
        self.region = region
        self.depth = depth  # Depth in tree (0 = root)
        self.children = []  # NW, NE, SW, SE (empty if leaf)

    def is_leaf(self) -> bool:
        """Check if this is a leaf node (no children)"""
        return len(self.children) == 0

    def _child(self, idx: int) -> Optional['QuadNode']:
        return None if self.is_leaf() else self.children[idx]

    @property
    def north_west(self) -> Optional['QuadNode']:
        return self._child(0)

    @property
    def north_east(self) -> Optional['QuadNode']:
        return self._child(1)

    @property
    def south_west(self) -> Optional['QuadNode']:
        return self._child(2)

    @property
    def south_east(self) -> Optional['QuadNode']:
        return self._child(3)

    def labeled_children(self):
        """Pairs of (compass label, child) in NW, NE, SW, SE order"""
        return list(zip(CHILD_LABELS, self.children))

    def __repr__(self):
        kind = 'Leaf' if self.is_leaf() else 'Internal Node'
        return f"QuadNode(id={self.id}, pos={self.region}, size={self.region.size_str()}, {kind})"


class QuadtreeBuilder:
    """Builds a uniform quadtree and hands out node ids for one session"""

    def __init__(self,
                 min_size: int = MIN_SIZE,
                 start_id: int = 0,
                 verbose: bool = True):
        """
        Initialize quadtree builder

        Args:
            min_size: Size floor; regions with w or h at or below it stay leaves
            start_id: First id handed out by this builder
            verbose: Print a diagnostic for every region that hits the floor
        """
        if min_size < 0:
            raise ValueError(f"min_size must be non-negative, got {min_size}")
        if start_id < 0:
            raise ValueError(f"start_id must be non-negative, got {start_id}")
        self.min_size = min_size
        self.start_id = start_id
        self.verbose = verbose
        self.next_id = start_id

    def reset(self):
        """Start a new id session"""
        self.next_id = self.start_id

    def create(self, region: Region, depth: int = 0) -> QuadNode:
        """Create a leaf node for `region` with the next sequential id"""
        node = QuadNode(self.next_id, region, depth)
        self.next_id += 1
        return node

    def subdivide(self, node: QuadNode) -> SubdivideResult:
        """
        Split `node` into four quadrants and recurse into each of them

        Children are created NW, NE, SW, SE and all four are attached before
        any of them is subdivided, so ids run depth-first in that order.
        Odd sizes truncate: the last row/column of an odd parent is left
        uncovered by its children.

        Returns:
            Which branch was taken for `node` itself
        """
        r = node.region
        if r.w <= self.min_size or r.h <= self.min_size:
            if self.verbose:
                print(f'[Quadtree]: Node {node.id}: Cannot subdivide further (Size={r.size_str()}). Marking as leaf.')
            return SubdivideResult.SKIPPED_AT_FLOOR

        if not node.is_leaf():
            return SubdivideResult.SKIPPED_ALREADY_SUBDIVIDED

        # Scale factor 1/2
        half_w = r.w // 2
        half_h = r.h // 2
        depth = node.depth + 1

        node.children = [
            self.create(Region(r.x, r.y, half_w, half_h), depth),                    # North-west
            self.create(Region(r.x + half_w, r.y, half_w, half_h), depth),           # North-east
            self.create(Region(r.x, r.y + half_h, half_w, half_h), depth),           # South-west
            self.create(Region(r.x + half_w, r.y + half_h, half_w, half_h), depth),  # South-east
        ]

        for child in node.children:
            self.subdivide(child)

        return SubdivideResult.SUBDIVIDED

    def build(self, w: int = DEFAULT_ROOT[2], h: int = DEFAULT_ROOT[3], *,
              x: int = DEFAULT_ROOT[0], y: int = DEFAULT_ROOT[1]) -> QuadNode:
        """
        Create a root for the given region and subdivide it fully

        The origin is keyword-only so `build(w, h)` cannot be confused with
        the x, y, w, h order of `Region`.

        Returns:
            Root node of the built quadtree
        """
        root = self.create(Region(x, y, w, h))
        self.subdivide(root)

        if self.verbose:
            print(f'[Quadtree]: Built quadtree with {count_nodes(root)} nodes, '
                  f'{len(get_leaf_nodes(root))} leaves')

        return root


def iter_nodes(node: QuadNode) -> Iterator[QuadNode]:
    """Depth-first pre-order walk, children NW/NE/SW/SE"""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


def get_leaf_nodes(node: QuadNode, leaves: list = None) -> List[QuadNode]:
    """Get all leaf nodes from the tree"""
    if leaves is None:
        leaves = []

    if node.is_leaf():
        leaves.append(node)
    else:
        for child in node.children:
            get_leaf_nodes(child, leaves)

    return leaves


def count_nodes(node: QuadNode) -> int:
    return sum(1 for _ in iter_nodes(node))


def tree_depth(node: QuadNode) -> int:
    """Deepest level below `node` (0 for a leaf)"""
    if node.is_leaf():
        return 0
    return 1 + max(tree_depth(child) for child in node.children)
