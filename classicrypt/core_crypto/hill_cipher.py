"""
Hill Cipher (2x2 Matrix Key)

A polygraphic substitution cipher over the 26-letter alphabet.
This is for EDUCATIONAL/DEMONSTRATION purposes only - not cryptographically secure!

Components:
- 2x2 matrix-vector multiplication
- Encryption: C = K * P (mod 26)
- Decryption: P = K^(-1) * C (mod 26), where K^(-1) is built from the
  adjugate matrix and the modular inverse of det(K)

Security Note:
    The key space is tiny and the cipher is linear, so a single known
    plaintext/ciphertext block pair recovers the key. Blocks are exactly
    two letters; longer or shorter text is rejected.
"""

from typing import List, Sequence, Tuple

from .modular_inverse import find_inverse_search


# ============================================================================
# Constants
# ============================================================================

ALPHABET_SIZE = 26
ALPHABET_START = 'A'
BLOCK_SIZE = 2

Matrix = List[List[int]]
Vector2 = Tuple[int, int]


class InvalidInputLength(ValueError):
    """Raised when the text is not exactly one block long."""
    pass


class InvalidCharacter(ValueError):
    """Raised when the text contains characters outside A-Z."""
    pass


class KeyNotInvertible(ValueError):
    """Raised when the key matrix has no inverse modulo 26."""
    pass


# ============================================================================
# Matrix Helpers
# ============================================================================

def _validate_key(key: Sequence[Sequence[int]]) -> None:
    if len(key) != BLOCK_SIZE or any(len(row) != BLOCK_SIZE for row in key):
        raise ValueError("Key must be a 2x2 matrix")
    for row in key:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("Key matrix entries must be integers")


def multiply_matrix_vector(matrix: Sequence[Sequence[int]], vector: Sequence[int]) -> Vector2:
    """
    Multiply a 2x2 matrix with a 2x1 vector.

    No modular reduction is applied here; callers reduce when mapping
    back to letters.
    """
    result = [0, 0]
    for i in range(BLOCK_SIZE):
        for j in range(BLOCK_SIZE):
            result[i] += matrix[i][j] * vector[j]
    return result[0], result[1]


def determinant(key: Sequence[Sequence[int]]) -> int:
    """Determinant of a 2x2 matrix (not reduced)."""
    _validate_key(key)
    return key[0][0] * key[1][1] - key[0][1] * key[1][0]


def adjugate(key: Sequence[Sequence[int]]) -> Matrix:
    """Adjugate of [[a, b], [c, d]] is [[d, -b], [-c, a]]."""
    _validate_key(key)
    return [
        [key[1][1], -key[0][1]],
        [-key[1][0], key[0][0]],
    ]


def inverse_key_matrix(key: Sequence[Sequence[int]]) -> Matrix:
    """
    Compute the inverse of the key matrix modulo 26.

    Steps:
    1. det = ad - bc, reduced to [0, 26)
    2. det_inv = multiplicative inverse of det mod 26 (brute-force search)
    3. K^(-1) = det_inv * adj(K), each entry reduced to [0, 26)

    Raises:
        KeyNotInvertible: If det has no inverse modulo 26
    """
    det = determinant(key) % ALPHABET_SIZE

    inverse = find_inverse_search(det, ALPHABET_SIZE)
    if not inverse.exists:
        raise KeyNotInvertible(
            "Inverse does not exist. Key matrix is not invertible."
        )
    det_inv = inverse.value

    return [
        [(entry * det_inv) % ALPHABET_SIZE for entry in row]
        for row in adjugate(key)
    ]


def is_invertible(key: Sequence[Sequence[int]]) -> bool:
    """True if the key can be used for decryption."""
    return find_inverse_search(determinant(key) % ALPHABET_SIZE, ALPHABET_SIZE).exists


# ============================================================================
# Text <-> Vector
# ============================================================================

def text_to_vector(text: str) -> Vector2:
    """
    Convert a two-letter block to a vector (A=0, B=1, ..., Z=25).

    Length is checked on the raw input, then each letter is uppercased on
    its own. Letters whose uppercase form is not a single A-Z letter
    (e.g. "ß" -> "SS") are rejected.

    Raises:
        InvalidInputLength: If text is not exactly 2 characters
        InvalidCharacter: If a character is not a letter A-Z
    """
    if len(text) != BLOCK_SIZE:
        raise InvalidInputLength(
            f"Text must be exactly {BLOCK_SIZE} characters, got {len(text)}"
        )
    values = []
    for char in text:
        upper = char.upper()
        value = ord(upper[0]) - ord(ALPHABET_START)
        if len(upper) != 1 or not 0 <= value < ALPHABET_SIZE:
            raise InvalidCharacter(f"Invalid character {char!r}: only letters A-Z are allowed")
        values.append(value)
    return values[0], values[1]


def vector_to_text(vector: Sequence[int]) -> str:
    """Reduce each component mod 26 and map back to letters."""
    return ''.join(
        chr(value % ALPHABET_SIZE + ord(ALPHABET_START)) for value in vector
    )


# ============================================================================
# Encryption / Decryption
# ============================================================================

def hill_encrypt(text: str, key: Sequence[Sequence[int]]) -> str:
    """
    Encrypt a 2-letter block with a 2x2 key matrix.

    The key does not need to be invertible for encryption.

    Args:
        text: Two letters (case-insensitive)
        key: 2x2 integer matrix

    Returns:
        Two uppercase ciphertext letters
    """
    _validate_key(key)
    return vector_to_text(multiply_matrix_vector(key, text_to_vector(text)))


def hill_decrypt(cipher_text: str, key: Sequence[Sequence[int]]) -> str:
    """
    Decrypt a 2-letter block with a 2x2 key matrix.

    Args:
        cipher_text: Two letters (case-insensitive)
        key: The 2x2 matrix used for encryption

    Returns:
        Two uppercase plaintext letters

    Raises:
        KeyNotInvertible: If gcd(det(key) mod 26, 26) != 1
    """
    vector = text_to_vector(cipher_text)
    return vector_to_text(multiply_matrix_vector(inverse_key_matrix(key), vector))


class HillCipher:
    """
    Hill cipher bound to a fixed 2x2 key.

    Example:
        >>> cipher = HillCipher([[3, 3], [2, 5]])
        >>> cipher.encrypt("HI")
        'TC'
        >>> cipher.decrypt("TC")
        'HI'
    """

    def __init__(self, key: Sequence[Sequence[int]]):
        _validate_key(key)
        self._key = [list(row) for row in key]

    @property
    def key(self) -> Matrix:
        """Copy of the key matrix."""
        return [row.copy() for row in self._key]

    @property
    def determinant(self) -> int:
        """Key determinant (not reduced)."""
        return determinant(self._key)

    @property
    def is_invertible(self) -> bool:
        """True if this key can decrypt."""
        return is_invertible(self._key)

    def inverse(self) -> Matrix:
        """Inverse key matrix modulo 26."""
        return inverse_key_matrix(self._key)

    def encrypt(self, text: str) -> str:
        return hill_encrypt(text, self._key)

    def decrypt(self, cipher_text: str) -> str:
        return hill_decrypt(cipher_text, self._key)

    def __repr__(self) -> str:
        return f"HillCipher(key={self._key})"
