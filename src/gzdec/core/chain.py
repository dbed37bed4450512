"""Output chain: a block arena that collects inflated bytes.

Each node is a ``bytearray`` sized to one output chunk. Nodes are kept in
stream order and only the last node may be partially filled when a new
one is started.
"""

from __future__ import annotations

from typing import List


class OutputChain:
    """Ordered fixed-capacity output nodes plus a running byte total."""

    def __init__(self, node_capacity: int):
        if node_capacity <= 0:
            raise ValueError("node_capacity must be positive")
        self.node_capacity = node_capacity
        self._nodes: List[bytearray] = [bytearray()]
        self.total = 0
        self._released = False

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def node_lengths(self) -> List[int]:
        """Valid byte count of every node, in order."""
        return [len(node) for node in self._nodes]

    def append(self, data: bytes) -> None:
        """Copy ``data`` into the current node, spilling into new nodes when full."""
        if self._released:
            raise RuntimeError("output chain has already been released")
        view = memoryview(data)
        while view:
            node = self._nodes[-1]
            room = self.node_capacity - len(node)
            if room == 0:
                node = bytearray()
                self._nodes.append(node)
                room = self.node_capacity
            node += view[:room]
            view = view[room:]
        self.total += len(data)

    def start_node(self) -> None:
        """Begin a new node unless the current one is still empty."""
        if self._released:
            raise RuntimeError("output chain has already been released")
        if self._nodes[-1]:
            self._nodes.append(bytearray())

    def linearize(self) -> bytes:
        """Concatenate every node in order and release the chain."""
        if self._released:
            raise RuntimeError("output chain has already been released")
        result = b"".join(self._nodes)
        if len(result) != self.total:
            raise RuntimeError(
                f"output chain holds {len(result)} bytes, expected {self.total}"
            )
        self.release()
        return result

    def release(self) -> None:
        """Drop every node. Safe to call more than once."""
        self._nodes.clear()
        self._released = True


__all__ = ["OutputChain"]
