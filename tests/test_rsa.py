import pytest

from cryptobench import rsa

PRIME = 1000000007


def test_fermat_little_theorem():
    for a in (2, 123, 65537, PRIME - 1):
        assert rsa.mod_pow(a, PRIME - 1, PRIME) == 1


def test_zero_exponent_gives_one():
    assert rsa.mod_pow(12345, 0, 97) == 1


def test_modulus_one_gives_zero():
    assert rsa.mod_pow(5, 0, 1) == 0
    assert rsa.mod_pow(5, 3, 1) == 0


def test_exponent_addition_law():
    a = rsa.mod_pow(123, 40, PRIME)
    b = rsa.mod_pow(123, 25, PRIME)
    assert rsa.mod_pow(123, 65, PRIME) == a * b % PRIME


def test_large_values_stay_below_modulus():
    m = (1 << 64) - 59
    result = rsa.mod_pow((1 << 64) - 1, (1 << 64) - 1, m)
    assert 0 <= result < m


def test_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        rsa.mod_pow(2, 3, 0)


def test_negative_argument_raises():
    with pytest.raises(ValueError):
        rsa.mod_pow(-2, 3, 5)


def test_main_prints_result(capsys):
    assert rsa.main(["4", "13", "497"]) == 0
    assert capsys.readouterr().out == "445\n"


def test_main_matches_mod_pow(capsys):
    assert rsa.main(["123", "65537", str(PRIME)]) == 0
    assert capsys.readouterr().out == f"{rsa.mod_pow(123, 65537, PRIME)}\n"


def test_main_usage_error(capsys):
    assert rsa.main(["1", "2"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_bad_number(capsys):
    assert rsa.main(["x", "2", "3"]) == 1
    assert "error" in capsys.readouterr().err