"""Byte trie for matching comment leaders.

Nodes are keyed by raw UTF-8 byte rather than by character; the leaders in
use are all ASCII.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TrieNode:
    terminal: bool = False
    children: dict[int, TrieNode] = field(default_factory=dict)


def build_trie(patterns: list[str]) -> TrieNode:
    """Build a trie over the UTF-8 encodings of `patterns`.

    Empty patterns are not supported.
    """
    root = TrieNode()
    for pattern in patterns:
        node = root
        for b in pattern.encode("utf-8"):
            node = node.children.setdefault(b, TrieNode())
        node.terminal = True
    return root


def match_from(root: TrieNode, data: bytes, offset: int) -> int | None:
    """Match a pattern starting at byte `offset` of `data`.

    Returns the byte offset just past the first terminal node reached, or
    None when the walk falls off the trie or runs out of input.
    """
    node = root
    i = offset
    while i < len(data):
        node = node.children.get(data[i])
        if node is None:
            return None
        i += 1
        if node.terminal:
            return i
    return None
