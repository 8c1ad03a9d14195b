"""Virtio MMIO register map, descriptor ring layouts and block requests."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field

NUM = 8

VIRTIO_MAGIC = 0x74726976
VIRTIO_VENDOR = 0x554D4551

VIRTIO_BLK_F_RO = 5
VIRTIO_BLK_F_SCSI = 7
VIRTIO_BLK_F_CONFIG_WCE = 11
VIRTIO_BLK_F_MQ = 12
VIRTIO_F_ANY_LAYOUT = 27
VIRTIO_RING_F_INDIRECT_DESC = 28
VIRTIO_RING_F_EVENT_IDX = 29

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1


class MmioRegister(enum.IntEnum):
    """Offsets of the virtio MMIO control registers."""

    MAGIC_VALUE = 0x000
    VERSION = 0x004
    DEVICE_ID = 0x008
    VENDOR_ID = 0x00C
    DEVICE_FEATURES = 0x010
    DRIVER_FEATURES = 0x020
    QUEUE_SEL = 0x030
    QUEUE_NUM_MAX = 0x034
    QUEUE_NUM = 0x038
    QUEUE_READY = 0x044
    QUEUE_NOTIFY = 0x050
    INTERRUPT_STATUS = 0x060
    INTERRUPT_ACK = 0x064
    STATUS = 0x070
    QUEUE_DESC_LOW = 0x080
    QUEUE_DESC_HIGH = 0x084
    DRIVER_DESC_LOW = 0x090
    DRIVER_DESC_HIGH = 0x094
    DEVICE_DESC_LOW = 0x0A0
    DEVICE_DESC_HIGH = 0x0A4


class ConfigStatus(enum.IntFlag):
    """Bits of the device status register."""

    ACKNOWLEDGE = 1
    DRIVER = 2
    DRIVER_OK = 4
    FEATURES_OK = 8


class DescFlag(enum.IntFlag):
    """Descriptor flags."""

    NEXT = 1
    WRITE = 2


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < layout.size:
        raise ValueError(f"need {layout.size} bytes for {what}, got {len(data)}")
    return layout.unpack_from(data, 0)


def _pack(layout: struct.Struct, *values) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


def _check_ring(ring, what: str) -> None:
    if len(ring) != NUM:
        raise ValueError(f"{what} ring must have {NUM} entries, got {len(ring)}")


_DESC = struct.Struct("<QIHH")
_AVAIL = struct.Struct(f"<HH{NUM}HH")
_USED_ELEM = struct.Struct("<II")
_USED_HEAD = struct.Struct("<HH")
_BLK_REQ = struct.Struct("<IIQ")


@dataclass
class VirtqDesc:
    """A single descriptor."""

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    SIZE = _DESC.size

    def pack(self) -> bytes:
        return _pack(_DESC, self.addr, self.len, self.flags, self.next)

    @classmethod
    def unpack(cls, data: bytes) -> "VirtqDesc":
        return cls(*_unpack(_DESC, data, "a descriptor"))


@dataclass
class VirtqAvail:
    """The available ring written by the driver."""

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=lambda: (0,) * NUM)
    unused: int = 0

    SIZE = _AVAIL.size

    def pack(self) -> bytes:
        _check_ring(self.ring, "avail")
        return _pack(_AVAIL, self.flags, self.idx, *self.ring, self.unused)

    @classmethod
    def unpack(cls, data: bytes) -> "VirtqAvail":
        values = _unpack(_AVAIL, data, "an avail ring")
        return cls(values[0], values[1], tuple(values[2:2 + NUM]), values[2 + NUM])


@dataclass
class VirtqUsedElem:
    """One completed request reported by the device."""

    id: int = 0
    len: int = 0

    SIZE = _USED_ELEM.size

    def pack(self) -> bytes:
        return _pack(_USED_ELEM, self.id, self.len)

    @classmethod
    def unpack(cls, data: bytes) -> "VirtqUsedElem":
        return cls(*_unpack(_USED_ELEM, data, "a used element"))


@dataclass
class VirtqUsed:
    """The used ring written by the device."""

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=lambda: tuple(VirtqUsedElem() for _ in range(NUM)))

    SIZE = _USED_HEAD.size + NUM * _USED_ELEM.size

    def pack(self) -> bytes:
        _check_ring(self.ring, "used")
        head = _pack(_USED_HEAD, self.flags, self.idx)
        return head + b"".join(elem.pack() for elem in self.ring)

    @classmethod
    def unpack(cls, data: bytes) -> "VirtqUsed":
        if len(data) < cls.SIZE:
            raise ValueError(f"need {cls.SIZE} bytes for a used ring, got {len(data)}")
        flags, idx = _USED_HEAD.unpack_from(data, 0)
        ring = tuple(
            VirtqUsedElem(*_USED_ELEM.unpack_from(data, _USED_HEAD.size + i * _USED_ELEM.size))
            for i in range(NUM)
        )
        return cls(flags, idx, ring)


@dataclass
class BlkRequest:
    """Header of a block-device request."""

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    SIZE = _BLK_REQ.size

    def pack(self) -> bytes:
        return _pack(_BLK_REQ, self.type, self.reserved, self.sector)

    @classmethod
    def unpack(cls, data: bytes) -> "BlkRequest":
        return cls(*_unpack(_BLK_REQ, data, "a block request"))