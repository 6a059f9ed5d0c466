# Core Cryptography Module
"""
Core number-theoretic and cryptographic implementations including:
- Euclidean GCD and Extended Euclidean Algorithm with step trace
- Modular inverse (Extended Euclid and brute-force search)
- RSA mathematics (square-and-multiply, key derivation, text encryption)
- Hill cipher (2x2 matrix key, mod 26)
"""

from .euclid import EuclidStep, ExtendedGcdResult, gcd, extended_gcd

from .modular_inverse import (
    NO_INVERSE,
    InverseResult,
    NoInverseExists,
    find_inverse_euclid,
    find_inverse_search,
    mod_inverse,
    mod_inverse_search,
)

from .rsa_math import (
    InvalidExponent,
    MessageOutOfRange,
    RSAKeyPair,
    RSAPrivateKey,
    RSAPublicKey,
    generate_rsa_keypair,
    mod_exp,
    rsa_decrypt,
    rsa_encrypt,
    rsa_key_gen,
)

from .hill_cipher import (
    HillCipher,
    InvalidCharacter,
    InvalidInputLength,
    KeyNotInvertible,
    hill_decrypt,
    hill_encrypt,
    inverse_key_matrix,
    multiply_matrix_vector,
)

__all__ = [
    # Euclid
    'EuclidStep',
    'ExtendedGcdResult',
    'gcd',
    'extended_gcd',
    # Modular inverse
    'NO_INVERSE',
    'InverseResult',
    'NoInverseExists',
    'find_inverse_euclid',
    'find_inverse_search',
    'mod_inverse',
    'mod_inverse_search',
    # RSA
    'InvalidExponent',
    'MessageOutOfRange',
    'RSAKeyPair',
    'RSAPrivateKey',
    'RSAPublicKey',
    'generate_rsa_keypair',
    'mod_exp',
    'rsa_decrypt',
    'rsa_encrypt',
    'rsa_key_gen',
    # Hill cipher
    'HillCipher',
    'InvalidCharacter',
    'InvalidInputLength',
    'KeyNotInvertible',
    'hill_decrypt',
    'hill_encrypt',
    'inverse_key_matrix',
    'multiply_matrix_vector',
]
