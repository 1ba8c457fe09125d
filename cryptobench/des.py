"""Simplified DES block cipher with ECB, CFB and CTR modes over byte streams.

Bits are handled as tuples of booleans, most significant bit first within
each byte. The round function and key schedule are simplified: the round
function XORs the right half with the round key, and each round key is a
48-bit window of the 64-bit key rotated left by the round number.
"""

from __future__ import annotations

from functools import partial
from typing import BinaryIO, Iterator, Sequence

Bits = tuple[bool, ...]

BLOCK_BYTES = 8
BLOCK_BITS = 64
HALF_BITS = 32
SUBKEY_BITS = 48
ROUNDS = 16

_PAD = b" "
_COUNTER_MASK = (1 << 64) - 1

IP = (
    58, 50, 42, 34, 26, 18, 10, 2,
    60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6,
    64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1,
    59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5,
    63, 55, 47, 39, 31, 23, 15, 7,
)

IIP = (
    40, 8, 48, 16, 56, 24, 64, 32,
    39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30,
    37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28,
    35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26,
    33, 1, 41, 9, 49, 17, 57, 25,
)


def _bits(values: Sequence[bool], size: int, what: str) -> Bits:
    bits = tuple(bool(v) for v in values)
    if len(bits) != size:
        raise ValueError(f"{what} must have {size} bits, got {len(bits)}")
    return bits


def convert_in(c: int) -> Bits:
    """Return the eight bits of byte ``c``, most significant first."""
    if not 0 <= c <= 0xFF:
        raise ValueError(f"byte value out of range: {c}")
    return tuple(bool(c >> shift & 1) for shift in range(7, -1, -1))


def convert_out(bits: Sequence[bool]) -> int:
    """Return the byte value of eight bits, most significant first."""
    value = 0
    for bit in _bits(bits, 8, "byte"):
        value = value << 1 | bit
    return value


def initial_permutation(bits: Sequence[bool]) -> Bits:
    block = _bits(bits, BLOCK_BITS, "block")
    return tuple(block[p - 1] for p in IP)


def inverse_initial_permutation(bits: Sequence[bool]) -> Bits:
    block = _bits(bits, BLOCK_BITS, "block")
    return tuple(block[p - 1] for p in IIP)


def f_function(half_block: Sequence[bool], sub_key: Sequence[bool]) -> Bits:
    """Round function: XOR of the half block with the leading round-key bits."""
    half = _bits(half_block, HALF_BITS, "half block")
    key = _bits(sub_key, SUBKEY_BITS, "sub key")
    return tuple(h ^ k for h, k in zip(half, key))


def des_round(block: Sequence[bool], sub_key: Sequence[bool]) -> Bits:
    """One Feistel round: (L, R) becomes (R, L xor F(R, K))."""
    state = _bits(block, BLOCK_BITS, "block")
    left, right = state[:HALF_BITS], state[HALF_BITS:]
    mixed = tuple(l ^ f for l, f in zip(left, f_function(right, sub_key)))
    return right + mixed


def generate_subkeys(key: Sequence[bool]) -> list[Bits]:
    """Return the sixteen 48-bit round keys derived from a 64-bit key."""
    key_bits = _bits(key, BLOCK_BITS, "key")
    return [(key_bits[r:] + key_bits[:r])[:SUBKEY_BITS] for r in range(ROUNDS)]


def _feistel(block: Sequence[bool], subkeys: Sequence[Bits]) -> Bits:
    state = initial_permutation(block)
    for sub_key in subkeys:
        state = des_round(state, sub_key)
    return inverse_initial_permutation(state[HALF_BITS:] + state[:HALF_BITS])


def encrypt_block(block: Sequence[bool], key: Sequence[bool]) -> Bits:
    """Encrypt one 64-bit block."""
    return _feistel(block, generate_subkeys(key))


def decrypt_block(block: Sequence[bool], key: Sequence[bool]) -> Bits:
    """Decrypt one 64-bit block."""
    return _feistel(block, generate_subkeys(key)[::-1])


def key_from_int(key_int: int) -> Bits:
    """Build a 64-bit key whose first 32 bits are the low bits of ``key_int``."""
    value = key_int & 0xFFFFFFFF
    low = tuple(bool(value >> i & 1) for i in range(HALF_BITS))
    return low + (False,) * HALF_BITS


def _to_bits(data: bytes) -> Bits:
    return tuple(bit for byte in data for bit in convert_in(byte))


def _to_bytes(bits: Sequence[bool]) -> bytes:
    return bytes(convert_out(bits[i:i + 8]) for i in range(0, len(bits), 8))


def _blocks(fin: BinaryIO) -> Iterator[bytes]:
    """Yield 8-byte blocks from ``fin``, space-padding a short final block."""
    for chunk in iter(partial(fin.read, BLOCK_BYTES), b""):
        yield chunk.ljust(BLOCK_BYTES, _PAD)


def _xor(data: bytes, keystream: Sequence[bool]) -> bytes:
    return bytes(a ^ b for a, b in zip(data, _to_bytes(keystream)))


def ecb_encrypt(fin: BinaryIO, fout: BinaryIO, key: Sequence[bool]) -> None:
    for block in _blocks(fin):
        fout.write(_to_bytes(encrypt_block(_to_bits(block), key)))


def ecb_decrypt(fin: BinaryIO, fout: BinaryIO, key: Sequence[bool]) -> None:
    for block in _blocks(fin):
        plain = _to_bytes(decrypt_block(_to_bits(block), key))
        fout.write(plain.rstrip(_PAD))


def cfb_encrypt(
    fin: BinaryIO, fout: BinaryIO, key: Sequence[bool], iv: Sequence[bool]
) -> None:
    previous = _bits(iv, BLOCK_BITS, "iv")
    for block in _blocks(fin):
        cipher = _xor(block, encrypt_block(previous, key))
        fout.write(cipher)
        previous = _to_bits(cipher)


def cfb_decrypt(
    fin: BinaryIO, fout: BinaryIO, key: Sequence[bool], iv: Sequence[bool]
) -> None:
    previous = _bits(iv, BLOCK_BITS, "iv")
    for block in _blocks(fin):
        plain = _xor(block, encrypt_block(previous, key))
        fout.write(plain.rstrip(_PAD))
        previous = _to_bits(block)


def ctr_crypt(
    fin: BinaryIO, fout: BinaryIO, key: Sequence[bool], iv: Sequence[bool]
) -> None:
    """Counter mode; the same call encrypts and decrypts.

    The IV bits give the starting counter, bit ``i`` standing for ``2**i``.
    Trailing spaces of every output block are dropped.
    """
    counter = sum(1 << i for i, bit in enumerate(_bits(iv, BLOCK_BITS, "iv")) if bit)
    for block in _blocks(fin):
        counter_bits = tuple(bool(counter >> i & 1) for i in range(BLOCK_BITS))
        out = _xor(block, encrypt_block(counter_bits, key))
        fout.write(out.rstrip(_PAD))
        counter = (counter + 1) & _COUNTER_MASK