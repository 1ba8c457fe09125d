"""Substitution cipher over n-bit blocks of a '0'/'1' text stream."""

from __future__ import annotations

import random
import sys
from typing import Iterable, Iterator, Sequence

MAX_WIDTH = 8


def _check_width(n: int) -> None:
    if not 1 <= n <= MAX_WIDTH:
        raise ValueError(f"n must be 1-{MAX_WIDTH}, got {n}")


def gen_permutation(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a random permutation of ``0 .. 2**n - 1`` to serve as a key."""
    _check_width(n)
    perm = list(range(1 << n))
    if rng is None:
        rng = random.Random()
    rng.shuffle(perm)
    return perm


def invert_permutation(perm: Sequence[int]) -> list[int]:
    """Return the permutation that undoes ``perm``."""
    if sorted(perm) != list(range(len(perm))):
        raise ValueError("key is not a permutation of 0..len-1")
    position = {value: index for index, value in enumerate(perm)}
    return [position[value] for value in range(len(perm))]


def _bit_stream(bits: str, strict: bool) -> Iterator[bool]:
    if strict:
        return (ch != "0" for ch in bits)
    return (ch == "1" for ch in bits if ch in "01")


def _substitute(stream: Iterable[bool], n: int, table: Sequence[int]) -> Iterator[str]:
    value = 0
    count = 0
    for bit in stream:
        value = value << 1 | bit
        count += 1
        if count == n:
            yield format(table[value], f"0{n}b")
            value = count = 0


def substitute_bits(
    bits: str,
    n: int,
    key: Sequence[int],
    encrypt: bool = True,
    strict: bool = False,
) -> str:
    """Map each complete n-bit block of ``bits`` through ``key`` or its inverse.

    By default characters other than '0' and '1' are skipped. With ``strict``
    every character is a bit and anything other than '0' reads as 1. A final
    incomplete block is dropped.
    """
    _check_width(n)
    if len(key) != 1 << n:
        raise ValueError(f"key must have {1 << n} entries, got {len(key)}")
    inverse = invert_permutation(key)
    table = list(key) if encrypt else inverse
    return "".join(_substitute(_bit_stream(bits, strict), n, table))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: enc|dec n  < infile > outfile", file=sys.stderr)
        return 1
    encrypt = args[0] == "enc"
    try:
        n = int(args[1])
    except ValueError:
        print(f"error: invalid n: {args[1]}", file=sys.stderr)
        return 1
    if not 1 <= n <= MAX_WIDTH:
        print(f"n must be 1-{MAX_WIDTH}", file=sys.stderr)
        return 1
    data = sys.stdin.read()
    key = gen_permutation(n)
    sys.stdout.write(substitute_bits(data, n, key, encrypt, strict=True))
    if len(data) % n:
        print("\n[WARN] Incomplete block ignored", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())