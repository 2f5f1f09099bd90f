"""Classic algorithms and data structures: sorting, searching, graphs, lists,
trees, Huffman coding, backtracking puzzles, dynamic programming and more."""

__version__ = "0.1.0"