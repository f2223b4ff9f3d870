#!/usr/bin/env python3
"""
Test the demo driver end to end: console output and the optional DOT file.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quadtree import QuadtreeBuilder, count_nodes
from quadtree_demo import main
from quadtree_export import to_dot


def test_demo_default(capsys):
    root = main([])
    out = capsys.readouterr().out

    assert count_nodes(root) == 85
    assert "--- QuadTree Structure (Console Print) ---" in out
    assert "--- QuadTree Dotty Code (Graphviz) ---" in out
    assert "Node ID: 0, Pos: (0, 0), Size: 100x100 (Internal Node)" in out
    assert 'digraph QuadTree {' in out
    assert "[Quadtree]: Built quadtree with 85 nodes, 64 leaves" in out


def test_demo_writes_dot_file(tmp_path, capsys):
    dot_path = tmp_path / "quadtree.dot"

    main(["64", "32", str(dot_path)])
    out = capsys.readouterr().out

    expected = to_dot(QuadtreeBuilder(verbose=False).build(64, 32))
    assert dot_path.read_text() == expected, "File should hold exactly the DOT document"
    assert f"Wrote DOT code to {dot_path}" in out


def test_demo_small_region(capsys):
    root = main(["10", "10"])
    out = capsys.readouterr().out

    assert root.is_leaf()
    assert "Node 0: Cannot subdivide further (Size=10x10). Marking as leaf." in out
    assert out.count("(Leaf)") == 2, "One in the structure dump, one in the DOT label"
