"""One entry point to the DES, letter-frequency, block-substitution,
modular-power and Hill cipher tools."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import Sequence

from . import des
from .block_sub import gen_permutation, substitute_bits
from .hill import hill_cipher
from .letter_freq import format_table, letter_freq_from_file
from .rsa import mod_pow

INVALID_KEY = "(invalid key)"


class DesMode(Enum):
    ECB = "ECB"
    CFB = "CFB"
    CTR = "CTR"


class DesAction(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


@dataclass
class BlockSubSession:
    """Keeps one substitution key while the block width stays the same."""

    rng: random.Random = field(default_factory=random.Random)
    key: list[int] | None = None

    def run(self, bits: str, n: int, encrypt: bool = True) -> str:
        if self.key is None or len(self.key) != 1 << n:
            self.key = gen_permutation(n, self.rng)
        return substitute_bits(bits, n, self.key, encrypt, strict=False)


def run_des(
    in_path: str | PathLike[str],
    out_path: str | PathLike[str],
    key_int: int,
    mode: DesMode | str | None,
    action: DesAction | str | None,
) -> None:
    """Run DES on a file with the integer key and an all-zero IV."""
    if not in_path:
        raise ValueError("Choose input file")
    if not out_path:
        raise ValueError("Choose output file")
    if mode is None or action is None:
        raise ValueError("Select mode/action")
    mode = DesMode(mode)
    action = DesAction(action)
    key = des.key_from_int(key_int)
    iv = (False,) * des.BLOCK_BITS
    encrypting = action is DesAction.ENCRYPT
    with open(in_path, "rb") as fin, open(out_path, "wb") as fout:
        if mode is DesMode.ECB:
            (des.ecb_encrypt if encrypting else des.ecb_decrypt)(fin, fout, key)
        elif mode is DesMode.CFB:
            (des.cfb_encrypt if encrypting else des.cfb_decrypt)(fin, fout, key, iv)
        else:
            des.ctr_crypt(fin, fout, key, iv)


def run_hill(text: str, key: Sequence[int], encrypt: bool = True) -> str:
    """Hill cipher with a flat key ``[a, b, c, d]``; reports a bad key in the result."""
    a, b, c, d = key
    try:
        return hill_cipher(text, ((a, b), (c, d)), encrypt)
    except ValueError:
        return INVALID_KEY


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crypto toolbox.")
    tools = parser.add_subparsers(dest="tool", required=True)

    p = tools.add_parser("des", help="DES on a file")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("--key", type=int, default=3000)
    p.add_argument("--mode", choices=[m.value for m in DesMode], required=True)
    p.add_argument("--action", choices=[a.value for a in DesAction], required=True)

    p = tools.add_parser("freq", help="letter frequency of a text file")
    p.add_argument("path")

    p = tools.add_parser("sub", help="n-bit block substitution")
    p.add_argument("bits")
    p.add_argument("--width", type=int, default=4, choices=range(1, 9))
    p.add_argument("--decrypt", action="store_true")

    p = tools.add_parser("pow", help="b^e mod m")
    p.add_argument("base", type=int, nargs="?", default=123)
    p.add_argument("exp", type=int, nargs="?", default=65537)
    p.add_argument("mod", type=int, nargs="?", default=1000000007)

    p = tools.add_parser("hill", help="Hill 2x2 cipher")
    p.add_argument("text", nargs="?", default="HELLO")
    p.add_argument("--key", type=int, nargs=4, default=[3, 3, 2, 5])
    p.add_argument("--decrypt", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.tool == "des":
            run_des(args.input, args.output, args.key, args.mode, args.action)
            print("DES Done")
        elif args.tool == "freq":
            counts, total = letter_freq_from_file(args.path)
            if total:
                sys.stdout.write(format_table(counts, total))
            print("Freq computed")
        elif args.tool == "sub":
            print(BlockSubSession().run(args.bits, args.width, not args.decrypt))
        elif args.tool == "pow":
            print(f"Result = {mod_pow(args.base, args.exp, args.mod)}")
        else:
            print(run_hill(args.text, args.key, not args.decrypt))
    except (OSError, ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())