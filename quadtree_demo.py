#!/usr/bin/env python3
"""
Build the default quadtree and print its structure and DOT code.

Usage: python quadtree_demo.py [width height [dot_path]]

To visualize, save the DOT block (or pass dot_path) and run:
    dot -Tpng quadtree.dot -o quadtree.png
"""

import sys

from quadtree import DEFAULT_ROOT, QuadtreeBuilder
from quadtree_export import describe, to_dot


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    x, y, w, h = DEFAULT_ROOT
    if len(argv) >= 2:
        w, h = int(argv[0]), int(argv[1])
    dot_path = argv[2] if len(argv) >= 3 else None

    builder = QuadtreeBuilder()
    root = builder.build(w, h, x=x, y=y)

    print("\n--- QuadTree Structure (Console Print) ---")
    describe(root)
    print("------------------------------------------")

    dot_code = to_dot(root)
    print("\n--- QuadTree Dotty Code (Graphviz) ---")
    print(dot_code, end='')
    print("--------------------------------------")

    if dot_path:
        with open(dot_path, 'w') as f:
            f.write(dot_code)
        print(f'[Quadtree]: Wrote DOT code to {dot_path}')

    return root


if __name__ == "__main__":
    main()
