import heapq
import itertools
from typing import Self

from loguru import logger

from .frequency import FrequencyTable
from ..errors import EmptyInputError


class Node:
    def __init__(
        self,
        symbol: str | None,
        weight: int,
        left: Self | None = None,
        right: Self | None = None,
    ) -> None:
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    def __str__(self) -> str:
        return f"symbol: {self.symbol}, weight: {self.weight}, left: {self.left}, right: {self.right}"

    def is_leaf(self) -> bool:
        return (self.left is None) and (self.right is None)


class HuffmanTree:
    def __init__(self, root: Node) -> None:
        self._root = root

    @property
    def root(self) -> Node:
        return self._root

    @property
    def height(self) -> int:
        def depth(node: Node | None) -> int:
            if node is None or node.is_leaf():
                return 0
            return 1 + max(depth(node.left), depth(node.right))
        return depth(self._root)

    def leaves(self) -> list[Node]:
        found: list[Node] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_leaf():
                found.append(node)
                continue
            # Push right first so that leaves come out left to right.
            stack.append(node.right)
            stack.append(node.left)
        return found

    def print(self) -> None:
        def print_tree(node: Node | None, start_depth: int) -> None:
            if node is not None:
                print_tree(node.right, start_depth + 1)
                label = repr(node.symbol) if node.is_leaf() else "*"
                print(f'{" " * 4 * start_depth} -> [{label}:{node.weight}]')
                print_tree(node.left, start_depth + 1)
        print_tree(self._root, 0)

    # Merge the two lightest nodes until a single root remains.
    # At equal weight an internal node is taken before a leaf, internal nodes
    # in the order they were created and leaves by ascending symbol.
    @classmethod
    def from_frequency_table(cls, frequency_table: FrequencyTable) -> Self:
        if len(frequency_table) == 0:
            raise EmptyInputError("Cannot build a Huffman tree from an empty frequency table")

        sequence = itertools.count()
        queue: list[tuple[int, int, int | str, Node]] = [
            (count, 1, symbol, Node(symbol, count)) for count, symbol in frequency_table
        ]
        heapq.heapify(queue)

        while len(queue) > 1:
            *_, left = heapq.heappop(queue)
            *_, right = heapq.heappop(queue)
            merged = Node(None, left.weight + right.weight, left, right)
            heapq.heappush(queue, (merged.weight, 0, next(sequence), merged))

        *_, root = queue[0]
        tree = cls(root)
        logger.debug(f"Huffman tree: {len(frequency_table)} leaves, height {tree.height}")
        return tree
