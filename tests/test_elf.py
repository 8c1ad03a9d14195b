import pytest

from xvutils.elf import (
    ELF_MAGIC,
    ELF_PROG_LOAD,
    ElfFormatError,
    ElfHeader,
    ProgFlag,
    ProgramHeader,
    iter_program_headers,
)


def _image(segments):
    header = ElfHeader(entry=0x1000, phoff=ElfHeader.SIZE, phnum=len(segments))
    return header.to_bytes() + b"".join(ph.to_bytes() for ph in segments)


def test_header_starts_with_magic_bytes():
    data = ElfHeader().to_bytes()
    assert data[:4] == b"\x7fELF"
    assert len(data) == ElfHeader.SIZE


def test_header_round_trip():
    header = ElfHeader(type=2, machine=243, version=1, entry=0x80000000, phoff=64, phnum=3)
    assert ElfHeader.from_bytes(header.to_bytes()) == header


def test_bad_magic_rejected():
    data = bytearray(ElfHeader().to_bytes())
    data[0] = 0
    with pytest.raises(ElfFormatError):
        ElfHeader.from_bytes(bytes(data))


def test_short_header_rejected():
    with pytest.raises(ElfFormatError):
        ElfHeader.from_bytes(ElfHeader().to_bytes()[:10])


def test_bad_identification_length():
    with pytest.raises(ValueError):
        ElfHeader(elf=b"abc").to_bytes()


def test_out_of_range_field():
    with pytest.raises(ValueError):
        ElfHeader(type=1 << 20).to_bytes()


def test_program_header_round_trip_and_flags():
    ph = ProgramHeader(
        type=ELF_PROG_LOAD, flags=ProgFlag.READ | ProgFlag.EXEC,
        off=0x1000, vaddr=0, paddr=0, filesz=100, memsz=200, align=0x1000,
    )
    back = ProgramHeader.from_bytes(ph.to_bytes())
    assert back == ph
    assert back.loadable
    assert back.permissions == ProgFlag.READ | ProgFlag.EXEC
    assert ProgFlag.WRITE not in back.permissions


def test_short_program_header_rejected():
    with pytest.raises(ElfFormatError):
        ProgramHeader.from_bytes(bytes(ProgramHeader.SIZE - 1))


def test_iter_program_headers():
    segments = [
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0, filesz=10, memsz=10),
        ProgramHeader(type=ELF_PROG_LOAD, vaddr=0x2000, filesz=5, memsz=50),
    ]
    assert list(iter_program_headers(_image(segments))) == segments


def test_iter_truncated_image():
    image = _image([ProgramHeader(type=ELF_PROG_LOAD)])
    with pytest.raises(ElfFormatError):
        list(iter_program_headers(image[:-1]))


def test_magic_constant_matches_default():
    assert ElfHeader().magic == ELF_MAGIC