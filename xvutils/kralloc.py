"""First-fit free-list memory allocator over a simulated, growable heap."""

from __future__ import annotations

from typing import Dict, List, Set, Tuple

HEADER_SIZE = 16
MIN_CORE_UNITS = 4096
_BASE = -1


class Allocator:
    """Address-ordered circular free list with coalescing on free.

    Addresses are byte offsets from the start of the heap.  The heap grows
    in chunks of at least ``MIN_CORE_UNITS`` headers and never past
    ``limit`` bytes.
    """

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self._brk = 0
        self._size: Dict[int, int] = {}
        self._next: Dict[int, int] = {}
        self._allocated: Set[int] = set()
        self._freep = None

    @property
    def heap_size(self) -> int:
        """Bytes obtained from the heap so far."""
        return self._brk * HEADER_SIZE

    def malloc(self, nbytes: int) -> int:
        """Allocate ``nbytes`` and return the address of the block."""
        if nbytes < 0:
            raise ValueError("size must not be negative")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def free(self, addr: int) -> None:
        """Return a block obtained from :meth:`malloc`."""
        unit = addr // HEADER_SIZE - 1
        if addr % HEADER_SIZE or unit not in self._allocated:
            raise ValueError(f"address {addr} was not allocated")
        self._allocated.remove(unit)
        self._release(unit)

    def free_blocks(self) -> List[Tuple[int, int]]:
        """Return ``(offset, length)`` in bytes of each free block, header included."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append((p * HEADER_SIZE, self._size[p] * HEADER_SIZE))
            p = self._next[p]
        return blocks

    def _morecore(self, nunits: int) -> int:
        nunits = max(nunits, MIN_CORE_UNITS)
        if (self._brk + nunits) * HEADER_SIZE > self.limit:
            raise MemoryError("out of heap memory")
        block = self._brk
        self._brk += nunits
        self._size[block] = nunits
        self._release(block)
        return self._freep

    def _release(self, bp: int) -> None:
        p = self._freep
        while not (p < bp < self._next[p]):
            nxt = self._next[p]
            if p >= nxt and (bp > p or bp < nxt):
                break
            p = nxt
        nxt = self._next[p]
        if bp + self._size[bp] == nxt:
            self._size[bp] += self._size.pop(nxt)
            self._next[bp] = self._next.pop(nxt)
        else:
            self._next[bp] = nxt
        if p + self._size[p] == bp:
            self._size[p] += self._size.pop(bp)
            self._next[p] = self._next.pop(bp)
        else:
            self._next[p] = bp
        self._freep = p