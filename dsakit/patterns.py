"""Printable text patterns of stars, digits and letters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator


def _letters(start: int, count: int) -> str:
    return "".join(chr(start + offset) for offset in range(count))


def _digits(numbers) -> str:
    return "".join(str(number) for number in numbers)


def _pattern1() -> Iterator[str]:
    for i in range(1, 6):
        yield str(i) * i


def _pattern2() -> Iterator[str]:
    for i in range(5, 0, -1):
        yield "*" * i


def _pattern3() -> Iterator[str]:
    for i in range(5, 0, -1):
        yield _digits(range(1, i + 1))


def _pattern4() -> Iterator[str]:
    for i in range(5):
        yield " " * (5 - i) + "*" * (2 * i + 1)


def _pattern5() -> Iterator[str]:
    for i in range(5, 0, -1):
        yield " " * (5 - i) + "*" * (2 * i - 1)


def _pattern6() -> Iterator[str]:
    for i in range(5):
        yield " " * (4 - i) + "*" * (2 * i + 1)
    yield from _pattern5()


def _pattern7() -> Iterator[str]:
    for i in range(1, 6):
        yield "*" * i
    yield from _pattern2()


def _pattern8() -> Iterator[str]:
    for i in range(5):
        yield _digits((i + 1 + step) % 2 for step in range(i + 1))


def _pattern9() -> Iterator[str]:
    for i in range(4):
        yield (
            _digits(range(1, i + 2))
            + " " * (2 * (3 - i))
            + _digits(range(i + 1, 0, -1))
        )


def _pattern10() -> Iterator[str]:
    counter = 1
    for i in range(5):
        row = range(counter, counter + i + 1)
        counter += i + 1
        yield "".join(f"{number} " for number in row)


def _pattern11() -> Iterator[str]:
    for i in range(5):
        yield _letters(65, i + 1)


def _pattern12() -> Iterator[str]:
    for i in range(5, 0, -1):
        yield _letters(65, i)


def _pattern13() -> Iterator[str]:
    for i in range(5):
        yield chr(65 + i) * (i + 1)


def _pattern14() -> Iterator[str]:
    for i in range(4):
        rising = _letters(65, i + 1)
        yield " " * (3 - i) + rising + rising[-2::-1]


def _pattern15() -> Iterator[str]:
    for i in range(5):
        yield "".join(f"{letter}\t" for letter in _letters(69 - i, i + 1))


def _pattern16() -> Iterator[str]:
    for i in range(5):
        yield "*" * (5 - i) + " " * (2 * i) + "*" * (5 - i)
    for i in range(5):
        yield "*" * (i + 1) + " " * (2 * (4 - i)) + "*" * (i + 1)


def _pattern17() -> Iterator[str]:
    for i in range(5):
        yield "*" * (i + 1) + " " * (2 * (4 - i)) + "*" * (i + 1)
    for i in range(4):
        yield "*" * (4 - i) + " " * (2 * (i + 1)) + "*" * (4 - i)


def _pattern18() -> Iterator[str]:
    return iter(())


_PATTERNS: dict[int, Callable[[], Iterator[str]]] = {
    1: _pattern1,
    2: _pattern2,
    3: _pattern3,
    4: _pattern4,
    5: _pattern5,
    6: _pattern6,
    7: _pattern7,
    8: _pattern8,
    9: _pattern9,
    10: _pattern10,
    11: _pattern11,
    12: _pattern12,
    13: _pattern13,
    14: _pattern14,
    15: _pattern15,
    16: _pattern16,
    17: _pattern17,
    18: _pattern18,
}


def pattern(number: int) -> str:
    """Return the text of the numbered pattern, each line ending in a newline."""
    try:
        rows = _PATTERNS[number]
    except KeyError:
        raise ValueError(
            f"no pattern {number}; choose 1 to {len(_PATTERNS)}"
        ) from None
    return "".join(f"{row}\n" for row in rows())


def main(argv: list[str] | None = None) -> int:
    """Print the patterns named on the command line."""
    parser = argparse.ArgumentParser(description="Print text patterns.")
    parser.add_argument(
        "numbers",
        nargs="+",
        type=int,
        choices=range(1, len(_PATTERNS) + 1),
        metavar="N",
        help=f"pattern number, 1 to {len(_PATTERNS)}",
    )
    args = parser.parse_args(argv)
    for number in args.numbers:
        sys.stdout.write(pattern(number))
    return 0