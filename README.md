# xvutils

Small, self-contained pieces of a teaching operating system, written as
ordinary Python with no runtime dependencies:

- `xvutils.regex`: a tiny pattern matcher for `^ . * $` (`match`) and a
  line filter built on it (`grep`, `main`)
- `xvutils.fmt`: a minimal printf (`sprintf`, `fprintf`, `printf`)
- `xvutils.shparse`: the shell's command-line parser (`parse_command`),
  producing `ExecCmd`, `RedirCmd`, `PipeCmd`, `ListCmd` and `BackCmd` trees
- `xvutils.kralloc`: a first-fit, address-ordered free-list `Allocator`
  over a simulated heap
- `xvutils.randgen`: the Park–Miller generator (`do_rand`,
  `ParkMillerRandom`)
- `xvutils.numconv`: integer helpers (`atoi`, `strtoint`, `do_div`,
  `div64_32`, `lldiv`, `div_u64_rem`, `genmask`, `roundup`, `align`,
  `div_round_up`, `swab32`, `log2`, `memcmp`, `strcmp`)
- `xvutils.riscv`: Sv39 page-table arithmetic (`pgroundup`, `pgrounddown`,
  `pa2pte`, `pte2pa`, `pte_flags`, `px`, `make_satp`, `PteFlag`), the
  machine's memory-layout addresses (`kstack`, `clint_mtimecmp`,
  `plic_menable`, `plic_sclaim`, ...) and kernel parameters such as
  `NPROC` and `MAXPATH`
- `xvutils.elf`: reading and writing ELF64 file and program headers
  (`ElfHeader`, `ProgramHeader`, `iter_program_headers`, `ProgFlag`)
- `xvutils.virtio`: virtio MMIO register offsets (`MmioRegister`),
  status and descriptor flags, and packing of `VirtqDesc`, `VirtqAvail`,
  `VirtqUsedElem`, `VirtqUsed` and `BlkRequest`
- `xvutils.errno`: the `Errno` codes and `describe()`
- `xvutils.tools`: `cat`, `echo`, `wc`, `ls`, `kill`, `ln`, `mkdir`, `rm`
  working on the host file system, and a `main` that dispatches to them

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Print the lines of files (or standard input) that match a pattern:

```
xvgrep 'ab*c$' notes.txt
```

Only newline-terminated lines are considered; a last line without a
newline is not reported. With no pattern the command prints a usage
message and exits with status 1.

Run one of the file tools, named by the first argument
(`cat`, `echo`, `wc`, `ls`, `kill`, `ln`, `mkdir`, `rm`):

```
xvtools wc notes.txt
xvtools ls .
xvtools echo hello world
```

`wc` prints `lines words characters name`; `ls` prints each entry's name
padded to 14 characters, its type (1 directory, 2 file, 3 device), inode
number and size. `kill` sends SIGTERM to each listed process id.

## Library use

```python
from xvutils.regex import match
from xvutils.fmt import sprintf
from xvutils.shparse import parse_command
from xvutils.kralloc import Allocator
from xvutils.randgen import ParkMillerRandom
from xvutils.numconv import swab32, do_div
from xvutils.riscv import pgroundup

match("^ab*c$", "abbbc")          # True
sprintf("%d %x", -5, 255)         # "-5 FF"
swab32(0x12345678)                # 0x78563412
do_div(10, 3)                     # (3, 1)
pgroundup(4097)                   # 8192

tree = parse_command("cat < in | wc > out; echo done &")

heap = Allocator(1 << 20)
addr = heap.malloc(100)
heap.free(addr)
heap.free_blocks()                # [(offset, length), ...]

rng = ParkMillerRandom(1)
values = [rng.rand() for _ in range(3)]
```

Notes on behaviour:

- `sprintf` understands `%d` (signed), `%l` (unsigned), `%x` (upper-case
  hex), `%p` (`0x` and 16 hex digits), `%s` (`None` prints `(null)`),
  `%c` and `%%`; numbers for `%d`, `%l` and `%x` are taken as 32-bit
  values. An unknown sequence such as `%q` is copied through unchanged.
- `atoi` reads leading digits only; `strtoint` also skips leading white
  space and accepts a sign. Both wrap to a signed 32-bit result.
- `Allocator.malloc` raises `MemoryError` when the heap would grow past its
  limit; `Allocator.free` raises `ValueError` for an address it did not
  hand out.
- `describe()` raises `ValueError` for an unknown error number.

Parsing errors in the shell grammar raise `xvutils.shparse.ParseError`;
malformed ELF data raises `xvutils.elf.ElfFormatError`.

## What the package does not do

It is not an operating system and does not boot, schedule or emulate
anything. The shell support is a parser only: `parse_command` builds a
command tree, but nothing in the package runs it. The ELF and virtio
modules describe data layouts and do not load programs or drive devices.
There is no file-system image or block storage; the file tools act on the
host's own files.