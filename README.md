# cryptobench

Textbook cryptography tools for study and experimentation. Everything runs on
the Python standard library (3.10 or later).

Modules:

- `cryptobench.des`: a simplified DES-style cipher. It is a 16-round Feistel
  network on 64-bit blocks with the standard initial and inverse initial
  permutations. The round function XORs the right half with the first 32 bits
  of the round key. Round key *r* is the 64-bit key rotated left by *r* bits and
  cut to 48 bits. ECB, CFB and CTR modes stream from one binary file object to
  another. Its output is **not** compatible with standard DES, and it is not
  meant to protect real data.
- `cryptobench.rsa`: square-and-multiply modular exponentiation (`mod_pow`).
- `cryptobench.letter_freq`: counts the letters A–Z, ignoring case, and
  formats a frequency table.
- `cryptobench.block_sub`: a substitution cipher on n-bit blocks
  (1 ≤ n ≤ 8) of a `0`/`1` text. The key is a random permutation.
- `cryptobench.hill`: a 2×2 Hill cipher over the 29 symbols `A–Z , . ?`,
  modulo 29.
- `cryptobench.toolbox`: one command with a subcommand for each tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Modular exponentiation

```
cryptobench-rsa 4 13 497
```

This prints `base^e mod m`. Each argument must be a non-negative integer below
2^64. A modulus of 0 is reported as an error.

### Letter frequency

```
cryptobench-letter-freq < book.txt
```

This reads standard input and prints one row per letter with its count and
its percentage to two decimals. It exits with status 1 and prints
`No letters!` when the input has no letters.

### Block substitution

```
cryptobench-block-sub enc 4 < bits.txt > out.txt
```

The first argument is `enc` or `dec`. The second is the block size `n`, from 1
to 8. Each character of the input counts as one bit: `0` is 0 and any other
character, newline included, is 1. A new random permutation key is drawn on
every run and is not shown, so one run cannot decrypt the output of another.
If the input does not fill a whole number of blocks, the leftover bits are
dropped and a warning goes to standard error.

### Hill cipher

```
cryptobench-hill enc 3 3 2 5 < message.txt
cryptobench-hill dec 3 3 2 5 < cipher.txt
```

The four integers are the key matrix `[a b; c d]`. Letters are upper-cased.
Characters outside `A–Z , . ?` are dropped, and a message of odd length is
padded with a comma. A key whose determinant has no inverse modulo 29 is
reported as an error.

### Toolbox

```
cryptobench-toolbox des plain.txt cipher.bin --mode ECB --action encrypt --key 3000
cryptobench-toolbox des cipher.bin plain.txt --mode ECB --action decrypt --key 3000
cryptobench-toolbox freq book.txt
cryptobench-toolbox sub 0101110010100011 --width 4
cryptobench-toolbox pow 123 65537 1000000007
cryptobench-toolbox hill HELLO --key 3 3 2 5
cryptobench-toolbox hill --decrypt --key 3 3 2 5 "CIPHERTEXT"
```

- `des` takes `--mode` (`ECB`, `CFB` or `CTR`), `--action` (`encrypt` or
  `decrypt`) and `--key`, an integer that defaults to 3000. Only the low 32
  bits of the key are used. CFB and CTR use an all-zero IV. In CTR mode
  encryption and decryption are the same operation.
- `freq` prints the frequency table of a file. A file that cannot be read
  counts as empty.
- `sub` skips characters other than `0` and `1`. It uses a fresh random key,
  `--width` is the block size (default 4), and `--decrypt` applies the inverse
  permutation.
- `pow` defaults to `123 65537 1000000007`.
- `hill` defaults to the text `HELLO` and the key `3 3 2 5`. It prints
  `(invalid key)` when the key cannot be inverted.

## Library use

```python
import random

from cryptobench.rsa import mod_pow
from cryptobench.hill import hill_cipher
from cryptobench.block_sub import gen_permutation, substitute_bits
from cryptobench.des import key_from_int, ecb_encrypt, ecb_decrypt

mod_pow(4, 13, 497)

cipher = hill_cipher("HELLO", [[3, 3], [2, 5]], True)
plain = hill_cipher(cipher, [[3, 3], [2, 5]], False)

perm = gen_permutation(4, random.Random(1))
enc = substitute_bits("01011100", 4, perm, encrypt=True)
dec = substitute_bits(enc, 4, perm, encrypt=False)

key = key_from_int(3000)
with open("plain.txt", "rb") as fin, open("cipher.bin", "wb") as fout:
    ecb_encrypt(fin, fout, key)
with open("cipher.bin", "rb") as fin, open("roundtrip.txt", "wb") as fout:
    ecb_decrypt(fin, fout, key)
```

`cryptobench.toolbox.BlockSubSession` keeps one substitution key across calls
for as long as the block width stays the same. Because of that, its `run`
method can decrypt what it encrypted earlier. `run_des` and `run_hill` are the
functions behind the `des` and `hill` subcommands.

In every DES mode, a short final block is padded with spaces. Decryption, and
CTR mode in both directions, removes trailing spaces from each output block.
Plaintext whose blocks end in spaces therefore does not come back exactly as
it went in.

## What it does not do

There is no graphical interface. The tools are available only as a library and
as the command-line programs above. The DES tools do not implement the
standard expansion, S-boxes or key schedule. None of the tools save or load
keys.