"""Fast modular exponentiation by repeated squaring."""

from __future__ import annotations

import sys
from typing import Sequence

_U64_LIMIT = 1 << 64


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Return ``base ** exp % mod`` using square-and-multiply."""
    if mod == 0:
        raise ZeroDivisionError("modulus must be non-zero")
    if base < 0 or exp < 0 or mod < 0:
        raise ValueError("arguments must be non-negative")
    result = 1 % mod
    base %= mod
    while exp:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


def _parse_u64(text: str) -> int:
    value = int(text, 10)
    if not 0 <= value < _U64_LIMIT:
        raise ValueError(f"value out of range: {text}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: base e mod", file=sys.stderr)
        return 1
    try:
        base, exp, mod = (_parse_u64(a) for a in args)
        print(mod_pow(base, exp, mod))
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())