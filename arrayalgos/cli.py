"""Command line front end reading whitespace-separated integers from a file or stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from .matrix import spiral_order
from .pair_sums import two_sum_better
from .rotation import Direction, rotate
from .sorting import bubble_sort, insertion_sort, merge_sort, quick_sort, selection_sort

SORTERS: dict[str, tuple[str, Callable[[list[int]], list[int]]]] = {
    "selection": ("Selection Sort", selection_sort),
    "bubble": ("Bubble Sort", bubble_sort),
    "insertion": ("Insertion Sort", insertion_sort),
    "merge": ("Merge Sort", merge_sort),
    "quick": ("Quick Sort", quick_sort),
}


class InputError(ValueError):
    """Raised when the input does not hold the values a command expects."""


class _Reader:
    """Hands out the whitespace-separated tokens of a text stream one at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (token for line in stream for token in line.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise InputError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise InputError(f"a count cannot be negative, got {value}")
        return value

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def sized_list(self) -> list[int]:
        return self.integers(self.count())


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _two_sum(reader: _Reader, args: argparse.Namespace) -> list[str]:
    nums = reader.sized_list()
    target = reader.integer()
    pair = two_sum_better(nums, target)
    return [] if pair is None else [f"{pair[0]} {pair[1]}"]


def _rotate(reader: _Reader, args: argparse.Namespace) -> list[str]:
    nums = reader.sized_list()
    k = reader.integer()
    letter = reader.word()
    if letter not in {d.value for d in Direction}:
        return ["Invalid Input"]
    try:
        return [_join(rotate(nums, k, letter))]
    except ValueError as exc:
        raise InputError(str(exc)) from None


def _spiral(reader: _Reader, args: argparse.Namespace) -> list[str]:
    rows = reader.count()
    cols = reader.count()
    matrix = [reader.integers(cols) for _ in range(rows)]
    return ["", _join(spiral_order(matrix))]


def _sort(reader: _Reader, args: argparse.Namespace) -> list[str]:
    label, sorter = SORTERS[args.algorithm]
    nums = reader.sized_list()
    return [f"{label} : {_join(sorter(nums))}"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arrayalgos",
        description="Run an array algorithm on integers read from a file or standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, handler: Callable[[_Reader, argparse.Namespace], list[str]], text: str):
        sub = commands.add_parser(name, help=text, description=text)
        sub.add_argument(
            "input",
            nargs="?",
            type=argparse.FileType("r"),
            default="-",
            help="file to read (default: standard input)",
        )
        sub.set_defaults(handler=handler)
        return sub

    add("two-sum", _two_sum, "Read n, n values and a target; print the indices of a matching pair.")
    add("rotate", _rotate, "Read n, n values, k and a direction (l or r); print the rotated values.")
    add("spiral", _spiral, "Read rows, columns and the matrix; print it in spiral order.")
    sort = add("sort", _sort, "Read n and n values; print them sorted.")
    sort.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(SORTERS),
        default="quick",
        help="sorting algorithm to use (default: quick)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    stream: TextIO = args.input
    try:
        with stream if stream is not sys.stdin else _keep_open(stream):
            lines = args.handler(_Reader(stream), args)
    except InputError as exc:
        print(f"arrayalgos: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


class _keep_open:
    """Context manager that leaves standard input open."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def __enter__(self) -> TextIO:
        return self._stream

    def __exit__(self, *exc_info: object) -> None:
        return None


if __name__ == "__main__":
    raise SystemExit(main())