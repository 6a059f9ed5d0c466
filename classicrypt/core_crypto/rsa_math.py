"""
RSA Mathematical Operations Implementation

Implements the core mathematical operations for RSA cryptography:
- Modular exponentiation (square-and-multiply algorithm)
- RSA key pair derivation from caller-supplied primes p, q and exponent e
- Character-wise text encryption/decryption
- Miller-Rabin primality testing and random key pair generation

Note: This implementation avoids using Python's built-in pow(a, b, mod).
      All modular exponentiation uses the square-and-multiply algorithm.

Security Note:
    Text is encrypted one character at a time without padding, and the
    primes passed to rsa_key_gen are not validated. This is for learning
    purposes only.
"""

import math
import secrets
from dataclasses import dataclass
from typing import List, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from .euclid import gcd
from .modular_inverse import NoInverseExists, find_inverse_euclid


# ============================================================================
# Constants
# ============================================================================

DEFAULT_PUBLIC_EXPONENT = 65537  # 2^16 + 1
DEFAULT_KEY_BITS = 1024
MILLER_RABIN_ROUNDS = 40
SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)
SMALL_PRIMES_PRODUCT = math.prod(SMALL_PRIMES)


class InvalidExponent(ValueError):
    """Raised when the private exponent d cannot be derived from e."""
    pass


class MessageOutOfRange(ValueError):
    """Raised when a message value is not smaller than the modulus n."""
    pass


# ============================================================================
# Key Structures (Immutable)
# ============================================================================

@dataclass(frozen=True)
class RSAPublicKey:
    """Public key (e, n)."""
    e: int
    n: int


@dataclass(frozen=True)
class RSAPrivateKey:
    """Private key (d, n)."""
    d: int
    n: int


# ============================================================================
# Modular Exponentiation
# ============================================================================

def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation by square-and-multiply.

    Scans the exponent's bits from the most significant one down: square
    the accumulator for every bit, multiply by the base when the bit is set.
    Intermediate values stay below modulus^2.

    Raises:
        ValueError: If exponent < 0 or modulus <= 0
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")

    base %= modulus
    result = 1 % modulus
    for bit in bin(exponent)[2:]:
        result = (result * result) % modulus
        if bit == '1':
            result = (result * base) % modulus
    return result


# ============================================================================
# Key Derivation
# ============================================================================

def rsa_key_gen(p: int, q: int, e: int) -> 'RSAKeyPair':
    """
    Derive an RSA key pair from two primes and a public exponent.

    n = p * q, phi = (p - 1)(q - 1), d = e^(-1) mod phi.

    p and q are not checked for primality; that is the caller's job.

    Args:
        p: First prime
        q: Second prime
        e: Public exponent, must be co-prime to phi

    Returns:
        RSAKeyPair with public key (e, n) and private key (d, n)

    Raises:
        ValueError: If p or q is smaller than 2
        InvalidExponent: If gcd(e, phi) != 1
    """
    if p < 2 or q < 2:
        raise ValueError("Primes p and q must be at least 2")

    n = p * q
    phi = (p - 1) * (q - 1)

    try:
        d = find_inverse_euclid(e, phi).unwrap()
    except NoInverseExists as exc:
        raise InvalidExponent(
            f"Invalid 'e' value. Unable to compute the modular inverse: {exc}"
        ) from exc

    return RSAKeyPair(RSAPublicKey(e=e, n=n), RSAPrivateKey(d=d, n=n))


# ============================================================================
# Encryption / Decryption
# ============================================================================

def rsa_encrypt_int(message: int, public_key: RSAPublicKey) -> int:
    """
    RSA encryption of a single integer.

    Computes ciphertext = message^e mod n

    Raises:
        MessageOutOfRange: If message is negative or not smaller than n
    """
    if message < 0 or message >= public_key.n:
        raise MessageOutOfRange(
            f"Message {message} must be in range [0, {public_key.n})"
        )
    return mod_exp(message, public_key.e, public_key.n)


def rsa_decrypt_int(ciphertext: int, private_key: RSAPrivateKey) -> int:
    """Computes message = ciphertext^d mod n."""
    return mod_exp(ciphertext, private_key.d, private_key.n)


def rsa_encrypt(text: str, public_key: RSAPublicKey) -> str:
    """
    Encrypt text one character at a time.

    Each character's code point m becomes c = m^e mod n.

    Args:
        text: Plaintext message
        public_key: RSAPublicKey (e, n)

    Returns:
        Space-separated decimal ciphertext values

    Raises:
        MessageOutOfRange: If a character's code point is >= n
    """
    return ' '.join(
        str(rsa_encrypt_int(ord(char), public_key)) for char in text
    )


def rsa_decrypt(cipher_text: str, private_key: RSAPrivateKey) -> str:
    """
    Decrypt a space-separated list of ciphertext values.

    Each value c becomes the character with code point c^d mod n.

    Args:
        cipher_text: Output of rsa_encrypt
        private_key: RSAPrivateKey (d, n)

    Returns:
        Decrypted plaintext

    Raises:
        ValueError: If a token is not a decimal integer or does not decrypt
                    to a valid code point
    """
    chars: List[str] = []
    for token in cipher_text.split():
        try:
            c = int(token)
        except ValueError:
            raise ValueError(f"Invalid ciphertext value: {token!r}") from None
        m = rsa_decrypt_int(c, private_key)
        try:
            chars.append(chr(m))
        except (ValueError, OverflowError):
            raise ValueError(
                f"Decrypted value {m} is not a valid character code"
            ) from None
    return ''.join(chars)


# ============================================================================
# Random Key Generation
# ============================================================================

def _split_even_part(n: int) -> Tuple[int, int]:
    """Write n as 2^r * d with d odd; returns (r, d)."""
    r = 0
    while n % 2 == 0:
        n //= 2
        r += 1
    return r, n


def is_probably_prime_miller_rabin(n: int, k: int = MILLER_RABIN_ROUNDS) -> bool:
    """
    Miller-Rabin primality test with k random witnesses.

    Small factors are screened first with a single gcd against the
    product of SMALL_PRIMES. A composite survives with probability
    at most (1/4)^k.
    """
    if n < 2:
        return False
    if n in SMALL_PRIMES:
        return True
    if gcd(n, SMALL_PRIMES_PRODUCT) != 1:
        return False

    r, d = _split_even_part(n - 1)
    for _ in range(k):
        x = mod_exp(secrets.randbelow(n - 3) + 2, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_prime(bits: int, k: int = MILLER_RABIN_ROUNDS) -> int:
    """
    Random prime with exactly `bits` bits (top and bottom bits forced to 1).

    Raises:
        ValueError: If bits < 2
    """
    if bits < 2:
        raise ValueError("Bit length must be at least 2")

    top = 1 << (bits - 1)
    while True:
        candidate = top | (secrets.randbits(bits - 1) | 1)
        if is_probably_prime_miller_rabin(candidate, k):
            return candidate


def generate_rsa_keypair(
    bits: int = DEFAULT_KEY_BITS,
    e: int = DEFAULT_PUBLIC_EXPONENT
) -> 'RSAKeyPair':
    """
    Generate an RSA key pair from random primes.

    Draws two distinct primes of half the bit length, retrying until e is
    co-prime to phi, then derives the keys with rsa_key_gen.

    Args:
        bits: Desired bit length of modulus n
        e: Public exponent

    Returns:
        New RSAKeyPair
    """
    if bits < 16:
        raise ValueError("Key size must be at least 16 bits")

    prime_bits = bits // 2
    while True:
        p = generate_prime(prime_bits)
        q = generate_prime(bits - prime_bits)
        if p == q:
            continue
        try:
            return rsa_key_gen(p, q, e)
        except InvalidExponent:
            continue


class RSAKeyPair:
    """
    RSA key pair container with convenient methods.

    Example:
        >>> keypair = RSAKeyPair.from_primes(61, 53, 17)
        >>> keypair.private_exponent
        2753
        >>> keypair.decrypt(keypair.encrypt("Hi"))
        'Hi'
    """

    def __init__(self, public_key: RSAPublicKey, private_key: RSAPrivateKey):
        if public_key.n != private_key.n:
            raise ValueError("Public and private key moduli differ")
        self._public_key = public_key
        self._private_key = private_key

    @classmethod
    def from_primes(cls, p: int, q: int, e: int) -> 'RSAKeyPair':
        """Derive a key pair from primes p, q and exponent e."""
        return rsa_key_gen(p, q, e)

    @classmethod
    def generate(cls, bits: int = DEFAULT_KEY_BITS) -> 'RSAKeyPair':
        """Generate a new key pair from random primes."""
        return generate_rsa_keypair(bits)

    @property
    def public_key(self) -> RSAPublicKey:
        """Public key (e, n)."""
        return self._public_key

    @property
    def private_key(self) -> RSAPrivateKey:
        """Private key (d, n)."""
        return self._private_key

    @property
    def modulus(self) -> int:
        """Modulus n."""
        return self._public_key.n

    @property
    def public_exponent(self) -> int:
        """Public exponent e."""
        return self._public_key.e

    @property
    def private_exponent(self) -> int:
        """Private exponent d."""
        return self._private_key.d

    @property
    def key_size(self) -> int:
        """Key size in bits."""
        return self.modulus.bit_length()

    def encrypt(self, text: str) -> str:
        """Encrypt text using the public key."""
        return rsa_encrypt(text, self._public_key)

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt text using the private key."""
        return rsa_decrypt(cipher_text, self._private_key)

    def public_numbers(self) -> rsa.RSAPublicNumbers:
        """Public key as cryptography's RSAPublicNumbers."""
        return rsa.RSAPublicNumbers(self.public_exponent, self.modulus)

    def public_pem(self) -> bytes:
        """Export the public key in SubjectPublicKeyInfo PEM format."""
        public_key = self.public_numbers().public_key()
        return public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RSAKeyPair):
            return NotImplemented
        return (self._public_key == other._public_key and
                self._private_key == other._private_key)

    def __hash__(self) -> int:
        return hash((self._public_key, self._private_key))

    def __repr__(self) -> str:
        return f"RSAKeyPair(bits={self.key_size}, e={self.public_exponent})"
