"""
Read-only views of a built quadtree: text dump, Graphviz DOT and numpy rasters.
None of these mutate the tree.
"""

from typing import Callable, List

import numpy as np

from quadtree import QuadNode, get_leaf_nodes, tree_depth

INDENT = ' ' * 4

DOT_HEADER = 'digraph QuadTree {\n'
DOT_NODE_STYLE = '  node [shape=box, style=filled, fillcolor=lightblue];\n'
DOT_LEAF_COLOR = 'lightgreen'
DOT_FOOTER = '}\n'


def _kind(node: QuadNode) -> str:
    return '(Leaf)' if node.is_leaf() else '(Internal Node)'


def describe(node: QuadNode, depth: int = 0, write: Callable[[str], None] = print):
    """Write one line per node, indented 4 spaces per level, children NW/NE/SW/SE"""
    r = node.region
    write(f"{INDENT * depth}Node ID: {node.id}, Pos: {r}, Size: {r.size_str()} {_kind(node)}")
    for child in node.children:
        describe(child, depth + 1, write)


def format_tree(node: QuadNode) -> str:
    lines = []
    describe(node, write=lines.append)
    return '\n'.join(lines)


def _dot_node(node: QuadNode, out: List[str]):
    r = node.region
    label = f"ID: {node.id}\\nPos: {r}\\nSize: {r.size_str()}\\n{_kind(node)}"
    if node.is_leaf():
        out.append(f'  node_{node.id} [label="{label}", fillcolor={DOT_LEAF_COLOR}];\n')
    else:
        out.append(f'  node_{node.id} [label="{label}"];\n')

    # Each edge is followed by the child's whole subtree
    for direction, child in node.labeled_children():
        out.append(f'  node_{node.id} -> node_{child.id} [label="{direction}"];\n')
        _dot_node(child, out)


def to_dot(root: QuadNode) -> str:
    """
    Generate a Graphviz DOT document for the tree rooted at `root`

    Render with e.g. `dot -Tpng quadtree.dot -o quadtree.png`.
    """
    out = [DOT_HEADER, DOT_NODE_STYLE]
    _dot_node(root, out)
    out.append(DOT_FOOTER)
    return ''.join(out)


def leaf_bboxes(root: QuadNode) -> np.ndarray:
    """Leaf regions as an (N, 4) int array of [x, y, w, h] rows, in tree order"""
    leaves = get_leaf_nodes(root)
    boxes = np.array([[l.region.x, l.region.y, l.region.w, l.region.h] for l in leaves], dtype=np.int64)
    return boxes.reshape(-1, 4)


def coverage_mask(root: QuadNode) -> np.ndarray:
    """
    Boolean (H, W) mask over the root region, True where some leaf covers the cell

    Cells are indexed relative to the root's origin.
    """
    rr = root.region
    mask = np.zeros((rr.h, rr.w), dtype=bool)
    for leaf in get_leaf_nodes(root):
        x1, x2, y1, y2 = leaf.region.get_bbox()
        mask[y1 - rr.y:y2 - rr.y, x1 - rr.x:x2 - rr.x] = True
    return mask


def uncovered_cells(root: QuadNode) -> int:
    """Number of root cells left uncovered by truncating division on odd sizes"""
    return int((~coverage_mask(root)).sum())


def render_tiles(root: QuadNode, line_thickness: int = 1) -> np.ndarray:
    """
    Draw leaf outlines into an RGB uint8 image the size of the root region

    Colour runs from blue at `root`'s own depth to red at the deepest leaf
    below it, so `root` may be any subtree.

    Args:
        root: Root of a built quadtree or any node inside one
        line_thickness: Thickness of tile boundary lines

    Returns:
        (H, W, 3) uint8 array
    """
    rr = root.region
    h, w = rr.h, rr.w
    img_np = np.zeros((h, w, 3), dtype=np.uint8)
    max_depth = tree_depth(root)

    for leaf in get_leaf_nodes(root):
        depth_norm = (leaf.depth - root.depth) / max_depth if max_depth else 0.0
        red = int(depth_norm * 255)
        blue = int((1 - depth_norm) * 255)
        color = [red, 0, blue]

        x1, x2, y1, y2 = leaf.region.get_bbox()
        x1, x2 = x1 - rr.x, x2 - rr.x
        y1, y2 = y1 - rr.y, y2 - rr.y

        # Top edge
        img_np[y1:min(y1 + line_thickness, h), x1:x2] = color
        # Bottom edge
        img_np[max(y2 - line_thickness, 0):y2, x1:x2] = color
        # Left edge
        img_np[y1:y2, x1:min(x1 + line_thickness, w)] = color
        # Right edge
        img_np[y1:y2, max(x2 - line_thickness, 0):x2] = color

    return img_np
