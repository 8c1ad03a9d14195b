"""Sv39 paging arithmetic, machine memory layout and kernel parameters."""

from __future__ import annotations

import enum

# Kernel parameters.
NPROC = 64
NCPU = 8
NOFILE = 16
NFILE = 100
NINODE = 50
NDEV = 10
ROOTDEV = 0
MAXARG = 32
MAXOPBLOCKS = 10
LOGSIZE = MAXOPBLOCKS * 3
NBUF = MAXOPBLOCKS * 3
FSSIZE = 2000
MAXPATH = 128

# Paging.
PGSIZE = 4096
PGSHIFT = 12
PXMASK = 0x1FF
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)
SATP_SV39 = 8 << 60

# Machine status register bits.
MSTATUS_MPP_MASK = 3 << 11
MSTATUS_MPP_M = 3 << 11
MSTATUS_MPP_S = 1 << 11
MSTATUS_MPP_U = 0 << 11
MSTATUS_MIE = 1 << 3

# Supervisor status register bits.
SSTATUS_SPP = 1 << 8
SSTATUS_SPIE = 1 << 5
SSTATUS_UPIE = 1 << 4
SSTATUS_SIE = 1 << 1
SSTATUS_UIE = 1 << 0

# Supervisor and machine interrupt-enable bits.
SIE_SEIE = 1 << 9
SIE_STIE = 1 << 5
SIE_SSIE = 1 << 1
MIE_MEIE = 1 << 11
MIE_MTIE = 1 << 7
MIE_MSIE = 1 << 3

# Physical memory layout.
ROMADDR = 0x1000
SDIO1 = 0x16020000
SDIO1_IRQ = 75
SDIO0 = 0x16010000
SPI0 = 0x10060000
SPI0_IRQ = 38
UART0 = 0x10000000
UART0_IRQ = 32
CLKGEN = 0x13020000
CLKGEN_GPIO_APB_CTRL = CLKGEN + 0x278
RSTGEN = 0x13030000
RSTGEN_ASSERT2 = RSTGEN + 0x8
RSTGEN_STATUS2 = RSTGEN + 0x18
GPIO = 0x13040000
EZGPIO_FULLMUX_BASE_ADDR = GPIO
GPIO_IRQ = 86
U74CACHE = 0x0002010000
U74L2LIM = 0x0008000000
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1
CLINT = 0x2000000
CLINT_MTIME = CLINT + 0xBFF8
PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000
KERNBASE = 0x40000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

TRAMPOLINE = MAXVA - PGSIZE
TRAPFRAME = TRAMPOLINE - PGSIZE


class PteFlag(enum.IntFlag):
    """Bits in an Sv39 page-table entry."""

    V = 1 << 0
    R = 1 << 1
    W = 1 << 2
    X = 1 << 3
    U = 1 << 4
    A = 1 << 6
    D = 1 << 7


def pgroundup(sz: int) -> int:
    """Round ``sz`` up to a page boundary."""
    return (sz + PGSIZE - 1) & ~(PGSIZE - 1)


def pgrounddown(a: int) -> int:
    """Round ``a`` down to a page boundary."""
    return a & ~(PGSIZE - 1)


def pa2pte(pa: int) -> int:
    """Shift a physical address into the page-number field of a PTE."""
    return (pa >> 12) << 10


def pte2pa(pte: int) -> int:
    """Extract the physical page address from a PTE."""
    return (pte >> 10) << 12


def pte_flags(pte: int) -> int:
    """Return the low ten flag bits of a PTE."""
    return pte & 0x3FF


def px(level: int, va: int) -> int:
    """Return the 9-bit page-table index of ``va`` at ``level``."""
    return (va >> (PGSHIFT + 9 * level)) & PXMASK


def make_satp(pagetable: int) -> int:
    """Build a satp value selecting Sv39 with the given root table."""
    return SATP_SV39 | (pagetable >> 12)


def kstack(p: int) -> int:
    """Virtual address of the kernel stack of process slot ``p``."""
    return TRAMPOLINE - (p + 1) * 2 * PGSIZE


def clint_mtimecmp(hartid: int) -> int:
    """Address of the timer-compare register of a hart."""
    return CLINT + 0x4000 + 8 * hartid


def plic_menable(hart: int) -> int:
    """Address of the machine-mode enable bits of a hart."""
    return PLIC + 0x2000 + hart * 0x100


def plic_senable(hart: int) -> int:
    """Address of the supervisor-mode enable bits of a hart."""
    return PLIC + 0x2080 + hart * 0x100


def plic_mpriority(hart: int) -> int:
    """Address of the machine-mode priority threshold of a hart."""
    return PLIC + 0x200000 + hart * 0x2000


def plic_spriority(hart: int) -> int:
    """Address of the supervisor-mode priority threshold of a hart."""
    return PLIC + 0x201000 + hart * 0x2000


def plic_mclaim(hart: int) -> int:
    """Address of the machine-mode claim register of a hart."""
    return PLIC + 0x200004 + hart * 0x2000


def plic_sclaim(hart: int) -> int:
    """Address of the supervisor-mode claim register of a hart."""
    return PLIC + 0x201004 + hart * 0x2000