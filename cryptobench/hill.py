"""Hill cipher with a 2x2 key over a 29-symbol alphabet (A-Z , . ?)."""

from __future__ import annotations

import string
import sys
from typing import Sequence

MOD = 29
SYMBOLS = string.ascii_uppercase + ",.?"
PAD_SYMBOL = ","

_INDEX = {symbol: index for index, symbol in enumerate(SYMBOLS)}

Matrix = tuple[tuple[int, int], tuple[int, int]]
Vector = tuple[int, int]


def _matrix(m: Sequence[Sequence[int]]) -> Matrix:
    rows = tuple(tuple(int(v) for v in row) for row in m)
    if len(rows) != 2 or any(len(row) != 2 for row in rows):
        raise ValueError("key must be a 2x2 matrix")
    return rows  # type: ignore[return-value]


def mod_inv(a: int) -> int:
    """Return the inverse of ``a`` modulo 29."""
    try:
        return pow(a % MOD, -1, MOD)
    except ValueError:
        raise ValueError(f"no inverse of {a} modulo {MOD}") from None


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    left, right = _matrix(a), _matrix(b)
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) % MOD for col in zip(*right))
        for row in left
    )  # type: ignore[return-value]


def vec_mul(a: Sequence[Sequence[int]], v: Sequence[int]) -> Vector:
    return tuple(sum(x * y for x, y in zip(row, v)) % MOD for row in _matrix(a))  # type: ignore[return-value]


def mat_inv(k: Sequence[Sequence[int]]) -> Matrix:
    """Return the inverse of a 2x2 matrix modulo 29; raise if it has none."""
    (a, b), (c, d) = _matrix(k)
    inv_det = mod_inv((a * d - b * c) % MOD)
    return (
        (d * inv_det % MOD, -b * inv_det % MOD),
        (-c * inv_det % MOD, a * inv_det % MOD),
    )


def sym2num(c: str) -> int | None:
    """Return the alphabet index of ``c``, or None if it is not a symbol."""
    return _INDEX.get(c)


def num2sym(n: int) -> str:
    if not 0 <= n < MOD:
        raise ValueError(f"symbol index out of range: {n}")
    return SYMBOLS[n]


def hill_cipher(text: str, key: Sequence[Sequence[int]], encrypt: bool = True) -> str:
    """Encrypt or decrypt ``text``; unknown characters are dropped.

    Letters are upper-cased and an odd-length message is padded with a comma.
    The key must be invertible modulo 29 in either direction.
    """
    matrix = _matrix(key)
    inverse = mat_inv(matrix)
    transform = matrix if encrypt else inverse
    nums = [v for v in (sym2num(ch.upper()) for ch in text) if v is not None]
    if len(nums) % 2:
        nums.append(_INDEX[PAD_SYMBOL])
    return "".join(
        num2sym(value)
        for pair in zip(nums[::2], nums[1::2])
        for value in vec_mul(transform, pair)
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 5:
        print("Usage: enc|dec a b c d  < infile > outfile", file=sys.stderr)
        return 1
    encrypt = args[0] == "enc"
    try:
        a, b, c, d = (int(v) for v in args[1:])
        result = hill_cipher(sys.stdin.read(), ((a, b), (c, d)), encrypt)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(result + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())