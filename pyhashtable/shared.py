import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def format_pair(key: Any, value: Any) -> str:
    return "{0!s}={1!s}".format(key, value)
