"""Small file utilities: cat, echo, wc, ls, kill, ln, mkdir and rm."""

from __future__ import annotations

import enum
import os
import signal
import stat as _stat
import sys
from typing import BinaryIO, Iterable, List, Optional, Sequence, TextIO, Union

from xvutils.fmt import sprintf
from xvutils.numconv import atoi

DIRSIZ = 14
_READ_SIZE = 512
_PATH_BUF = 512
_WC_SPACE = " \r\t\n\v\0"


class FileType(enum.IntEnum):
    """File types reported by ls."""

    DIR = 1
    FILE = 2
    DEVICE = 3


def _copy(src: BinaryIO, out: BinaryIO) -> None:
    while True:
        chunk = src.read(_READ_SIZE)
        if not chunk:
            return
        out.write(chunk)


def cat(paths: Iterable[Union[str, os.PathLike]], out: BinaryIO) -> None:
    """Copy the named files, or standard input if none, to ``out``."""
    paths = list(paths)
    if not paths:
        _copy(sys.stdin.buffer, out)
        return
    for path in paths:
        with open(path, "rb") as src:
            _copy(src, out)


def echo(args: Sequence[str], out: TextIO) -> None:
    """Write the arguments separated by spaces and ended by a newline."""
    if args:
        out.write(" ".join(args) + "\n")


def wc(stream, name: str) -> str:
    """Count lines, words and characters of ``stream``; return the report line."""
    lines = words = chars = 0
    in_word = False
    while True:
        data = stream.read(_READ_SIZE)
        if not data:
            break
        if isinstance(data, (bytes, bytearray)):
            data = data.decode("latin-1")
        for ch in data:
            chars += 1
            if ch == "\n":
                lines += 1
            if ch in _WC_SPACE:
                in_word = False
            elif not in_word:
                words += 1
                in_word = True
    return f"{lines} {words} {chars} {name}"


def fmtname(path: str) -> str:
    """Return the last path component, blank-padded to DIRSIZ characters."""
    name = path.rsplit("/", 1)[-1]
    if len(name) >= DIRSIZ:
        return name
    return name.ljust(DIRSIZ)


def _file_type(mode: int) -> FileType:
    if _stat.S_ISDIR(mode):
        return FileType.DIR
    if _stat.S_ISREG(mode):
        return FileType.FILE
    return FileType.DEVICE


def ls(path: str, out: TextIO) -> None:
    """List a file, or the entries of a directory, to ``out``."""
    try:
        st = os.stat(path)
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return
    kind = _file_type(st.st_mode)
    if kind != FileType.DIR:
        out.write(sprintf("%s %d %d %l\n", fmtname(path), int(kind), st.st_ino, st.st_size))
        return
    if len(path) + 1 + DIRSIZ + 1 > _PATH_BUF:
        out.write("ls: path too long\n")
        return
    try:
        names = [".", ".."] + sorted(os.listdir(path))
    except OSError:
        sys.stderr.write(f"ls: cannot open {path}\n")
        return
    for entry in names:
        full = f"{path}/{entry}"
        try:
            est = os.stat(full)
        except OSError:
            out.write(f"ls: cannot stat {full}\n")
            continue
        etype = _file_type(est.st_mode)
        out.write(sprintf("%s %d %d %d\n", fmtname(full), int(etype), est.st_ino, est.st_size))


def kill(pids: Iterable[str]) -> List[bool]:
    """Terminate each process; report for each whether it was signalled."""
    results = []
    for text in pids:
        pid = atoi(text)
        if pid <= 0:
            results.append(False)
            continue
        try:
            os.kill(pid, signal.SIGTERM)
        except (OSError, OverflowError):
            results.append(False)
        else:
            results.append(True)
    return results


def ln(old: str, new: str) -> None:
    """Create ``new`` as a hard link to ``old``."""
    os.link(old, new)


def mkdir(paths: Iterable[str]) -> None:
    """Create each directory in order, stopping at the first failure."""
    for path in paths:
        os.mkdir(path)


def rm(paths: Iterable[str]) -> None:
    """Remove each file or empty directory in order, stopping at the first failure."""
    for path in paths:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.unlink(path)


def _main_cat(args: List[str]) -> int:
    sys.stdout.flush()
    out = sys.stdout.buffer
    try:
        cat(args, out)
    except OSError as exc:
        out.flush()
        if exc.filename is not None:
            sys.stderr.write(f"cat: cannot open {exc.filename}\n")
        else:
            sys.stderr.write("cat: read error\n")
        return 1
    out.flush()
    return 0


def _main_wc(args: List[str]) -> int:
    try:
        if not args:
            print(wc(sys.stdin.buffer, ""))
            return 0
        for path in args:
            try:
                handle = open(path, "rb")
            except OSError:
                print(f"wc: cannot open {path}")
                return 1
            with handle:
                print(wc(handle, path))
    except OSError:
        print("wc: read error")
        return 1
    return 0


def _main_ls(args: List[str]) -> int:
    for path in args or ["."]:
        ls(path, sys.stdout)
    return 0


def _main_kill(args: List[str]) -> int:
    if not args:
        sys.stderr.write("usage: kill pid...\n")
        return 1
    kill(args)
    return 0


def _main_ln(args: List[str]) -> int:
    if len(args) != 2:
        sys.stderr.write("Usage: ln old new\n")
        return 1
    try:
        ln(args[0], args[1])
    except OSError:
        sys.stderr.write(f"link {args[0]} {args[1]}: failed\n")
    return 0


def _main_mkdir(args: List[str]) -> int:
    if not args:
        sys.stderr.write("Usage: mkdir files...\n")
        return 1
    try:
        mkdir(args)
    except OSError as exc:
        sys.stderr.write(f"mkdir: {exc.filename} failed to create\n")
    return 0


def _main_rm(args: List[str]) -> int:
    if not args:
        sys.stderr.write("Usage: rm files...\n")
        return 1
    try:
        rm(args)
    except OSError as exc:
        sys.stderr.write(f"rm: {exc.filename} failed to delete\n")
    return 0


def _main_echo(args: List[str]) -> int:
    echo(args, sys.stdout)
    return 0


_COMMANDS = {
    "cat": _main_cat,
    "echo": _main_echo,
    "wc": _main_wc,
    "ls": _main_ls,
    "kill": _main_kill,
    "ln": _main_ln,
    "mkdir": _main_mkdir,
    "rm": _main_rm,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool named by the first argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in _COMMANDS:
        sys.stderr.write(f"usage: tool [{'|'.join(_COMMANDS)}] args...\n")
        return 1
    return _COMMANDS[args[0]](args[1:])