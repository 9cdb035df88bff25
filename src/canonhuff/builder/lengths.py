from collections import deque

from loguru import logger

from .tree import HuffmanTree, Node

# A lone leaf sits at depth 0, which would give it an empty code.
MIN_CODE_LENGTH = 1


def derive_code_lengths(tree: HuffmanTree) -> list[tuple[int, str]]:
    """Returns (length, symbol) for every leaf, ordered by length then symbol.

    The tree is walked level by level from the root (depth 0); the depth of a
    leaf is the length of its code.
    """
    lengths: list[tuple[int, str]] = []
    queue: deque[Node] = deque([tree.root])
    depth = 0
    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.is_leaf():
                lengths.append((max(depth, MIN_CODE_LENGTH), node.symbol))
                continue
            queue.append(node.left)
            queue.append(node.right)
        depth += 1

    if tree.root.is_leaf():
        logger.warning(f"Single symbol alphabet {tree.root.symbol!r}, using code length {MIN_CODE_LENGTH}")

    return sorted(lengths)
