"""Reading and writing ELF64 file and program headers."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Iterator

ELF_MAGIC = 0x464C457F
ELF_PROG_LOAD = 1

_ELFHDR = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROGHDR = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """Raised when bytes do not hold a valid ELF header."""


class ProgFlag(enum.IntFlag):
    """Permission bits of a program header."""

    EXEC = 1
    WRITE = 2
    READ = 4


def _pack(layout: struct.Struct, *values) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


@dataclass
class ElfHeader:
    """ELF file header."""

    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = _ELFHDR.size
    phentsize: int = _PROGHDR.size
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    SIZE = _ELFHDR.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "ElfHeader":
        """Parse a header from the start of ``data``; check the magic."""
        if len(data) < _ELFHDR.size:
            raise ElfFormatError(
                f"need {_ELFHDR.size} bytes for an ELF header, got {len(data)}"
            )
        header = cls(*_ELFHDR.unpack_from(data, 0))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError(f"bad ELF magic {header.magic:#x}")
        return header

    def to_bytes(self) -> bytes:
        """Serialise the header."""
        if len(self.elf) != 12:
            raise ValueError("elf identification must be 12 bytes")
        return _pack(
            _ELFHDR,
            self.magic, bytes(self.elf), self.type, self.machine, self.version,
            self.entry, self.phoff, self.shoff, self.flags, self.ehsize,
            self.phentsize, self.phnum, self.shentsize, self.shnum, self.shstrndx,
        )


@dataclass
class ProgramHeader:
    """ELF program (segment) header."""

    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    SIZE = _PROGHDR.size

    @property
    def loadable(self) -> bool:
        """True for segments of type LOAD."""
        return self.type == ELF_PROG_LOAD

    @property
    def permissions(self) -> ProgFlag:
        """The flag bits as a :class:`ProgFlag`."""
        return ProgFlag(self.flags & 0x7)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProgramHeader":
        """Parse a program header from the start of ``data``."""
        if len(data) < _PROGHDR.size:
            raise ElfFormatError(
                f"need {_PROGHDR.size} bytes for a program header, got {len(data)}"
            )
        return cls(*_PROGHDR.unpack_from(data, 0))

    def to_bytes(self) -> bytes:
        """Serialise the program header."""
        return _pack(
            _PROGHDR,
            self.type, self.flags, self.off, self.vaddr,
            self.paddr, self.filesz, self.memsz, self.align,
        )


def iter_program_headers(data: bytes) -> Iterator[ProgramHeader]:
    """Yield every program header of the ELF image in ``data``."""
    header = ElfHeader.from_bytes(data)
    view = memoryview(data)
    for index in range(header.phnum):
        start = header.phoff + index * _PROGHDR.size
        if start + _PROGHDR.size > len(data):
            raise ElfFormatError(f"program header {index} lies beyond the data")
        yield ProgramHeader.from_bytes(view[start:start + _PROGHDR.size])