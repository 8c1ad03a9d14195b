"""A small regular-expression matcher supporting ``^ . * $`` and a grep tool."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence


def _match_here(re: str, ri: int, text: str, ti: int) -> bool:
    """Search for ``re[ri:]`` at the start of ``text[ti:]``."""
    while True:
        if ri == len(re):
            return True
        if ri + 1 < len(re) and re[ri + 1] == "*":
            return _match_star(re[ri], re, ri + 2, text, ti)
        if re[ri] == "$" and ri + 1 == len(re):
            return ti == len(text)
        if ti < len(text) and (re[ri] == "." or re[ri] == text[ti]):
            ri += 1
            ti += 1
            continue
        return False


def _match_star(c: str, re: str, ri: int, text: str, ti: int) -> bool:
    """Search for ``c*`` followed by ``re[ri:]`` at the start of ``text[ti:]``."""
    while True:
        if _match_here(re, ri, text, ti):
            return True
        if ti >= len(text) or (text[ti] != c and c != "."):
            return False
        ti += 1


def match(re: str, text: str) -> bool:
    """Return True if ``re`` matches anywhere in ``text``."""
    if re.startswith("^"):
        return _match_here(re, 1, text, 0)
    return any(_match_here(re, 0, text, start) for start in range(len(text) + 1))


def grep(pattern: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield each newline-terminated line of the input that matches ``pattern``.

    The input may be given in chunks of any size; a final line without a
    newline is never reported.
    """
    pending = ""
    for chunk in lines:
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            if match(pattern, line):
                yield line + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run grep over the named files, or standard input; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stderr.write("usage: grep pattern [file ...]\n")
        return 1
    pattern, paths = args[0], args[1:]
    if not paths:
        sys.stdout.writelines(grep(pattern, sys.stdin))
        return 0
    for path in paths:
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError:
            sys.stdout.write(f"grep: cannot open {path}\n")
            return 1
        with handle:
            sys.stdout.writelines(grep(pattern, handle))
    return 0