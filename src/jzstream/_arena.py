"""
Bump-allocation region that owns everything produced by one parse.

Allocations are never freed individually: the whole region is released at
once, after which every value built through it is invalid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Final

from ._errors import AllocationError
from ._errors import ArenaReleasedError

logger = logging.getLogger(__name__)

# Nominal footprint of one value node or map entry
NODE_SIZE: Final = 16


@dataclass(eq=False, slots=True)
class Block:
    """A byte buffer handed out by an arena; `used` counts filled bytes."""

    data: bytearray
    used: int = 0
    _arena_id: int = field(default=0, repr=False)

    @property
    def capacity(self) -> int:
        return len(self.data)

    @property
    def full(self) -> bool:
        return self.used >= len(self.data)

    def append(self, byte: int) -> None:
        self.data[self.used] = byte
        self.used += 1

    def tobytes(self) -> bytes:
        return bytes(self.data[: self.used])


class Arena:
    """
    Single-owner allocation region for one parse.

    Supports bump allocation of byte blocks, in-place growth of the most
    recent ("tail") block, adoption of fixed-size nodes, and one bulk
    release. An optional byte limit turns over-allocation into
    AllocationError.
    """

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must be a non-negative integer")

        self.limit = limit
        self.bytes_used = 0
        self.allocation_count = 0
        self.relocation_count = 0
        self.released = False
        self._blocks: list[Block] = []
        self._nodes: list[Any] = []

    def __enter__(self) -> Arena:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if not self.released:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else "live"
        return (
            f"<Arena {state} bytes_used={self.bytes_used} "
            f"allocations={self.allocation_count}>"
        )

    def _charge(self, size: int) -> None:
        if self.released:
            raise ArenaReleasedError("arena used after release")
        if self.limit is not None and self.bytes_used + size > self.limit:
            raise AllocationError(
                f"arena limit of {self.limit} bytes exceeded"
            )
        self.bytes_used += size

    @property
    def tail(self) -> Block | None:
        return self._blocks[-1] if self._blocks else None

    def allocate(self, size: int) -> Block:
        """Bump-allocates a zero-filled block of `size` bytes."""
        if size < 0:
            raise ValueError("size must be non-negative")

        self._charge(size)
        block = Block(bytearray(size), 0, id(self))
        self._blocks.append(block)
        self.allocation_count += 1
        return block

    def grow(self, block: Block, size: int) -> Block:
        """
        Grows `block` to `size` bytes.

        The tail block is extended in place; any other block is relocated
        into a fresh tail allocation and its contents copied over.
        """
        if block._arena_id != id(self):
            raise ValueError("block was not allocated by this arena")
        if size <= block.capacity:
            return block

        if block is self.tail:
            self._charge(size - block.capacity)
            block.data.extend(bytes(size - block.capacity))
            return block

        relocated = self.allocate(size)
        relocated.data[: block.used] = block.data[: block.used]
        relocated.used = block.used
        self.relocation_count += 1
        return relocated

    def shrink(self, block: Block) -> None:
        """Trims the tail block to its used size, returning the slack."""
        if block is not self.tail:
            return

        slack = block.capacity - block.used
        del block.data[block.used :]
        self.bytes_used -= slack

    def reserve(self, size: int) -> None:
        """Charges `size` bytes of slot storage held outside any block."""
        self._charge(size)
        self.allocation_count += 1

    def adopt(self, node: Any, size: int = NODE_SIZE) -> Any:
        """Charges a fixed-size node to the arena and keeps it alive."""
        self._charge(size)
        self._nodes.append(node)
        self.allocation_count += 1
        return node

    def release(self) -> None:
        """Releases every allocation at once."""
        if self.released:
            raise ArenaReleasedError("arena released twice")

        logger.debug(
            "releasing arena: %d allocations, %d bytes",
            self.allocation_count,
            self.bytes_used,
        )
        self._blocks.clear()
        self._nodes.clear()
        self.bytes_used = 0
        self.released = True
