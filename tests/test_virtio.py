import pytest

from xvutils.virtio import (
    NUM,
    VIRTIO_BLK_T_OUT,
    BlkRequest,
    ConfigStatus,
    DescFlag,
    MmioRegister,
    VirtqAvail,
    VirtqDesc,
    VirtqUsed,
    VirtqUsedElem,
)


def test_register_offsets_from_map():
    assert MmioRegister(0x070) is MmioRegister.STATUS
    assert MmioRegister(0x050) is MmioRegister.QUEUE_NOTIFY
    assert MmioRegister(0x0A4) is MmioRegister.DEVICE_DESC_HIGH


def test_config_status_combination():
    status = ConfigStatus(1) | ConfigStatus(2)
    assert ConfigStatus.DRIVER_OK not in status
    assert ConfigStatus(4) is ConfigStatus.DRIVER_OK
    assert ConfigStatus(8) is ConfigStatus.FEATURES_OK
    status |= ConfigStatus(8) | ConfigStatus(4)
    assert status == ConfigStatus(0xF)


def test_desc_round_trip():
    desc = VirtqDesc(addr=0x80001000, len=512, flags=DescFlag.NEXT | DescFlag.WRITE, next=3)
    data = desc.pack()
    assert len(data) == VirtqDesc.SIZE
    assert VirtqDesc.unpack(data) == desc


def test_desc_little_endian_addr():
    data = VirtqDesc(addr=0x10001000).pack()
    assert data[:8] == (0x10001000).to_bytes(8, "little")


def test_avail_round_trip():
    avail = VirtqAvail(flags=0, idx=5, ring=tuple(range(NUM)), unused=0)
    data = avail.pack()
    assert len(data) == VirtqAvail.SIZE
    assert VirtqAvail.unpack(data) == avail


def test_avail_wrong_ring_length():
    with pytest.raises(ValueError):
        VirtqAvail(ring=(1, 2)).pack()


def test_used_round_trip():
    ring = tuple(VirtqUsedElem(id=i, len=i * 10) for i in range(NUM))
    used = VirtqUsed(flags=0, idx=2, ring=ring)
    data = used.pack()
    assert len(data) == VirtqUsed.SIZE
    assert VirtqUsed.unpack(data) == used


def test_used_short_data():
    with pytest.raises(ValueError):
        VirtqUsed.unpack(bytes(VirtqUsed.SIZE - 1))


def test_used_elem_round_trip():
    elem = VirtqUsedElem(id=7, len=4096)
    assert VirtqUsedElem.unpack(elem.pack()) == elem


def test_blk_request_round_trip():
    req = BlkRequest(type=VIRTIO_BLK_T_OUT, sector=2000)
    data = req.pack()
    assert len(data) == BlkRequest.SIZE
    assert BlkRequest.unpack(data) == req


def test_out_of_range_field():
    with pytest.raises(ValueError):
        VirtqDesc(flags=1 << 20).pack()