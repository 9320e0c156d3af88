"""I/O primitives: thin wrappers over host file handles held in Port values.

Host failures surface as DefaultError. Ports opened here stay open until the
program calls a close primitive, including when evaluation fails midway.
"""
from __future__ import annotations

import sys
from pathlib import Path

from schemelet import LispValue
from schemelet.errors import DefaultError, NumArgsError, TypeMismatchError
from schemelet.reader.parser import read_expr, read_expr_list
from schemelet.types.values import FALSE, TRUE, List, Port, String


def _filename(args: list[LispValue]) -> str:
    match args:
        case [String(name)]:
            return name
        case [bad_arg]:
            raise TypeMismatchError("string", bad_arg)
        case _:
            raise NumArgsError(1, args)


def make_port(mode: str):
    def fn(args: list[LispValue]) -> Port:
        filename = _filename(args)
        try:
            return Port(open(filename, mode, encoding="utf-8"))
        except OSError as ex:
            raise DefaultError(f"Could not open file {filename}: {ex.strerror}") from ex

    return fn


def close_port(args: list[LispValue]) -> LispValue:
    match args:
        case [Port(handle)]:
            handle.close()
            return TRUE
        case _:
            return FALSE


def read_proc(args: list[LispValue]) -> LispValue:
    """(read [port]) reads one line and parses it as an expression."""
    match args:
        case []:
            handle = sys.stdin
        case [Port(handle)]:
            pass
        case [bad_arg]:
            raise TypeMismatchError("port", bad_arg)
        case _:
            raise NumArgsError(1, args)
    try:
        line = handle.readline()
    except (OSError, ValueError) as ex:
        raise DefaultError(f"Could not read from port: {ex}") from ex
    if not line:
        raise DefaultError("End of file")
    return read_expr(line)


def write_proc(args: list[LispValue]) -> LispValue:
    """(write obj [port]) prints the rendered value and a newline."""
    match args:
        case [obj]:
            handle = sys.stdout
        case [obj, Port(handle)]:
            pass
        case [_, bad_arg]:
            raise TypeMismatchError("port", bad_arg)
        case _:
            raise NumArgsError(1, args)
    try:
        handle.write(f"{obj}\n")
    except (OSError, ValueError) as ex:
        raise DefaultError(f"Could not write to port: {ex}") from ex
    return TRUE


def read_contents(args: list[LispValue]) -> String:
    filename = _filename(args)
    try:
        return String(Path(filename).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as ex:
        raise DefaultError(f"Could not read file {filename}: {ex}") from ex


def load_helper(filename: str) -> list[LispValue]:
    """Read and parse a file full of expressions."""
    path = Path(filename)
    if not path.is_file():
        raise DefaultError(f"Could not load file {filename}")
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        raise DefaultError(f"Could not load file {filename}: {ex}") from ex
    return read_expr_list(source)


def read_all(args: list[LispValue]) -> List:
    return List(tuple(load_helper(_filename(args))))


IO_PRIMITIVES = (
    ("open-input-file", make_port("r")),
    ("open-output-file", make_port("w")),
    ("close-input-port", close_port),
    ("close-output-port", close_port),
    ("read", read_proc),
    ("write", write_proc),
    ("read-contents", read_contents),
    ("read-all", read_all),
)
