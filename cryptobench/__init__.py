"""Classroom cryptography tools: a simplified DES with ECB/CFB/CTR modes, modular exponentiation, letter frequency, block substitution and Hill ciphers."""

__version__ = "0.1.0"

__all__ = ["des", "rsa", "letter_freq", "block_sub", "hill", "toolbox"]