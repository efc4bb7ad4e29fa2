from dataclasses import dataclass
import sys
from typing import Any

from .debug import print_table
from .errors import TableError
from .shared import printf, printf_err
from .table import Table, set_debug_trace_resize


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class CommandSyntaxError:
    pass


@dataclass(frozen=True)
class CommandTableError:
    pass


CommandResult = CommandOk | CommandSyntaxError | CommandTableError


# name -> number of arguments
COMMANDS = {
    "put": 2,
    "get": 1,
    "remove": 1,
    "has": 1,
    "hasvalue": 1,
    "size": 0,
    "capacity": 0,
    "resize": 1,
    "print": 0,
    "trace": 1,
}


def parse_token(token: str) -> Any:
    try:
        return int(token)
    except ValueError:
        return token


def execute(table: Table, line: str) -> CommandResult:
    words = line.split()
    if not words or words[0].startswith("#"):
        return CommandOk()

    name, args = words[0], [parse_token(w) for w in words[1:]]
    if COMMANDS.get(name) != len(args):
        printf_err("Unknown command or wrong arguments: '{0:s}'\n", line.strip())
        return CommandSyntaxError()

    try:
        match name:
            case "put":
                printf("{0!s}\n", table.put(args[0], args[1]))
            case "get":
                printf("{0!s}\n", table.get(args[0]))
            case "remove":
                printf("{0!s}\n", table.remove(args[0]))
            case "has":
                printf("{0!s}\n", table.contains_key(args[0]))
            case "hasvalue":
                printf("{0!s}\n", table.contains_value(args[0]))
            case "size":
                printf("{0:d}\n", table.size())
            case "capacity":
                printf("{0:d}\n", table.capacity)
            case "resize":
                table.resize(args[0])
            case "print":
                print_table(table, repr(table))
            case "trace":
                if args[0] not in ("on", "off"):
                    printf_err("trace expects 'on' or 'off'\n")
                    return CommandSyntaxError()
                set_debug_trace_resize(args[0] == "on")
    except TableError as e:
        printf_err("{0:s}\n", str(e))
        return CommandTableError()

    return CommandOk()


def repl(table: Table):
    while True:
        try:
            inpt = input()
        except EOFError:
            return
        execute(table, inpt)


def run_file(table: Table, filepath: str):
    with open(filepath) as fp:
        lines = fp.readlines()

    for line in lines:
        result = execute(table, line)
        if isinstance(result, CommandSyntaxError):
            sys.exit(65)
        if isinstance(result, CommandTableError):
            sys.exit(70)


def main():
    table = Table()

    if len(sys.argv) == 1:
        repl(table)
    elif len(sys.argv) == 2:
        run_file(table, sys.argv[1])
    else:
        printf("Usage: pyhashtable [path]\n")
        sys.exit(64)
