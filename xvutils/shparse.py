"""Parser for the shell's command language: pipes, lists, background, redirection."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

MAXARGS = 10

_WHITESPACE = " \t\r\n\v"
_SYMBOLS = "<|>&;()"


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message: str, leftover: Optional[str] = None) -> None:
        super().__init__(message if leftover is None else f"{message}: leftovers: {leftover}")
        self.leftover = leftover


class OpenFlag(enum.IntFlag):
    """Flags for opening files."""

    RDONLY = 0x000
    WRONLY = 0x001
    RDWR = 0x002
    CREATE = 0x200
    TRUNC = 0x400


@dataclass
class ExecCmd:
    """Run a program with arguments."""

    argv: List[str] = field(default_factory=list)


@dataclass
class RedirCmd:
    """Run a command with one file descriptor redirected to a file."""

    cmd: "Command"
    file: str
    mode: OpenFlag
    fd: int


@dataclass
class PipeCmd:
    """Connect the output of ``left`` to the input of ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class ListCmd:
    """Run ``left`` then ``right``."""

    left: "Command"
    right: "Command"


@dataclass
class BackCmd:
    """Run a command in the background."""

    cmd: "Command"


Command = Union[ExecCmd, RedirCmd, PipeCmd, ListCmd, BackCmd]


class _Parser:
    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0
        self.end = len(line)

    def _skip_space(self) -> None:
        while self.pos < self.end and self.line[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self, toks: str) -> bool:
        self._skip_space()
        return self.pos < self.end and self.line[self.pos] in toks

    def next_token(self) -> tuple[str, str]:
        """Return ``(kind, text)``; kind is '' at end, 'a' for a word, '+' for >>."""
        self._skip_space()
        start = self.pos
        if start == self.end:
            return "", ""
        c = self.line[start]
        if c in "|();&<":
            self.pos += 1
            kind = c
        elif c == ">":
            self.pos += 1
            if self.pos < self.end and self.line[self.pos] == ">":
                self.pos += 1
                kind = "+"
            else:
                kind = ">"
        else:
            kind = "a"
            while (
                self.pos < self.end
                and self.line[self.pos] not in _WHITESPACE
                and self.line[self.pos] not in _SYMBOLS
            ):
                self.pos += 1
        text = self.line[start:self.pos]
        self._skip_space()
        return kind, text

    def parse_line(self) -> Command:
        cmd = self.parse_pipe()
        while self.peek("&"):
            self.next_token()
            cmd = BackCmd(cmd)
        if self.peek(";"):
            self.next_token()
            cmd = ListCmd(cmd, self.parse_line())
        return cmd

    def parse_pipe(self) -> Command:
        cmd = self.parse_exec()
        if self.peek("|"):
            self.next_token()
            cmd = PipeCmd(cmd, self.parse_pipe())
        return cmd

    def parse_redirs(self, cmd: Command) -> Command:
        while self.peek("<>"):
            kind, _ = self.next_token()
            file_kind, name = self.next_token()
            if file_kind != "a":
                raise ParseError("missing file for redirection")
            if kind == "<":
                cmd = RedirCmd(cmd, name, OpenFlag.RDONLY, 0)
            elif kind == ">":
                cmd = RedirCmd(cmd, name, OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC, 1)
            else:
                cmd = RedirCmd(cmd, name, OpenFlag.WRONLY | OpenFlag.CREATE, 1)
        return cmd

    def parse_block(self) -> Command:
        if not self.peek("("):
            raise ParseError("parseblock")
        self.next_token()
        cmd = self.parse_line()
        if not self.peek(")"):
            raise ParseError("syntax - missing )")
        self.next_token()
        return self.parse_redirs(cmd)

    def parse_exec(self) -> Command:
        if self.peek("("):
            return self.parse_block()
        exec_cmd = ExecCmd()
        result = self.parse_redirs(exec_cmd)
        while not self.peek("|)&;"):
            kind, word = self.next_token()
            if kind == "":
                break
            if kind != "a":
                raise ParseError("syntax")
            exec_cmd.argv.append(word)
            if len(exec_cmd.argv) >= MAXARGS:
                raise ParseError("too many args")
            result = self.parse_redirs(result)
        return result


def parse_command(line: str) -> Command:
    """Parse one command line into a command tree."""
    parser = _Parser(line.split("\0", 1)[0])
    cmd = parser.parse_line()
    parser.peek("")
    if parser.pos != parser.end:
        raise ParseError("syntax", leftover=parser.line[parser.pos:])
    return cmd