import io

import pytest

from cryptobench import des

ZERO = (False,) * 64


def _run(func, data, *args):
    fin = io.BytesIO(data)
    fout = io.BytesIO()
    func(fin, fout, *args)
    return fout.getvalue()


def _pattern_bits():
    return tuple(bool(i % 3 == 0 or i % 7 == 1) for i in range(64))


def test_convert_in_letter():
    assert des.convert_in(ord("A")) == (False, True, False, False, False, False, False, True)


def test_convert_round_trip_all_bytes():
    assert [des.convert_out(des.convert_in(c)) for c in range(256)] == list(range(256))


def test_convert_in_rejects_out_of_range():
    with pytest.raises(ValueError):
        des.convert_in(256)


def test_convert_out_rejects_wrong_length():
    with pytest.raises(ValueError):
        des.convert_out([True] * 7)


def test_initial_permutation_moves_bit_58_first():
    bits = [False] * 64
    bits[57] = True
    out = des.initial_permutation(bits)
    assert out[0] is True
    assert sum(out) == 1


def test_permutations_are_inverse():
    bits = _pattern_bits()
    assert des.inverse_initial_permutation(des.initial_permutation(bits)) == bits
    assert des.initial_permutation(des.inverse_initial_permutation(bits)) == bits


def test_f_function_with_zero_key_is_identity():
    half = _pattern_bits()[:32]
    assert des.f_function(half, (False,) * 48) == half


def test_des_round_swaps_halves_with_zero_key():
    block = (True,) * 32 + (False,) * 32
    out = des.des_round(block, (False,) * 48)
    assert out[:32] == (False,) * 32
    assert out[32:] == (True,) * 32


def test_generate_subkeys_rotate_key():
    key = _pattern_bits()
    subkeys = des.generate_subkeys(key)
    assert len(subkeys) == 16
    assert all(len(k) == 48 for k in subkeys)
    assert subkeys[0] == key[:48]
    for earlier, later in zip(subkeys, subkeys[1:]):
        assert later[:47] == earlier[1:]


def test_block_round_trip():
    key = des.key_from_int(3000)
    block = _pattern_bits()
    cipher = des.encrypt_block(block, key)
    assert des.decrypt_block(cipher, key) == block


def test_zero_block_zero_key_stays_zero():
    assert des.encrypt_block(ZERO, ZERO) == ZERO


def test_encrypt_block_rejects_short_block():
    with pytest.raises(ValueError):
        des.encrypt_block((True,) * 63, ZERO)


def test_key_from_int_low_bits():
    key = des.key_from_int(3000)
    assert len(key) == 64
    assert sum(key) == bin(3000).count("1")
    assert key[32:] == (False,) * 32
    assert des.key_from_int(1)[0] is True


def test_key_from_int_truncates_to_32_bits():
    assert des.key_from_int((1 << 32) + 5) == des.key_from_int(5)


def test_ecb_round_trip_and_padding():
    key = des.key_from_int(3000)
    plain = b"Hello, world!"
    cipher = _run(des.ecb_encrypt, plain, key)
    assert len(cipher) == 16
    assert _run(des.ecb_decrypt, cipher, key) == plain


def test_ecb_identical_blocks_give_identical_cipher():
    key = des.key_from_int(42)
    cipher = _run(des.ecb_encrypt, b"ABCDEFGHABCDEFGH", key)
    assert cipher[:8] == cipher[8:]


def test_ecb_decrypt_strips_trailing_spaces():
    key = des.key_from_int(7)
    cipher = _run(des.ecb_encrypt, b"ab      ", key)
    assert _run(des.ecb_decrypt, cipher, key) == b"ab"


def test_ecb_empty_input():
    assert _run(des.ecb_encrypt, b"", des.key_from_int(1)) == b""


def test_cfb_iv_changes_ciphertext():
    key = des.key_from_int(3000)
    plain = b"12345678"
    first = _run(des.cfb_encrypt, plain, key, ZERO)
    second = _run(des.cfb_encrypt, plain, key, _pattern_bits())
    assert first[:8] != second[:8]


def test_cfb_rejects_bad_iv():
    with pytest.raises(ValueError):
        _run(des.cfb_encrypt, b"data", des.key_from_int(1), (True,) * 10)


def test_ctr_keystream_independent_of_plaintext():
    key = des.key_from_int(3000)
    iv = _pattern_bits()
    p = b"ABCDEFGH"
    q = b"zyxwvuts"
    cp = _run(des.ctr_crypt, p, key, iv)
    cq = _run(des.ctr_crypt, q, key, iv)
    n = min(len(cp), len(cq))
    assert n >= 1
    assert bytes(a ^ b for a, b in zip(cp[:n], p)) == bytes(a ^ b for a, b in zip(cq[:n], q))


def test_ctr_output_blocks_at_most_eight_bytes():
    key = des.key_from_int(99)
    out = _run(des.ctr_crypt, b"x" * 24, key, ZERO)
    assert len(out) <= 24