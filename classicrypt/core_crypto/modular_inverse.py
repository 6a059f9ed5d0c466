"""
Modular Inverse Finder

Finds x such that (n * x) mod m = 1 using one of two strategies:
- Extended Euclidean Algorithm (used by RSA key generation)
- Brute-force search over [1, m) (used by the Hill cipher)

Both strategies return an InverseResult. Call sites decide how a missing
inverse is surfaced: unwrap() raises NoInverseExists, or_sentinel()
returns NO_INVERSE (-1).
"""

from dataclasses import dataclass
from typing import Optional

from .euclid import extended_gcd


# ============================================================================
# Constants
# ============================================================================

NO_INVERSE = -1  # Sentinel returned by the brute-force call path


class NoInverseExists(ValueError):
    """Raised when a number has no multiplicative inverse for a modulus."""
    pass


@dataclass(frozen=True)
class InverseResult:
    """
    Outcome of a modular inverse computation.

    value is None when no inverse exists; reason then holds the
    diagnostic message.
    """
    number: int
    modulus: int
    value: Optional[int] = None
    reason: str = ""

    @property
    def exists(self) -> bool:
        """True if an inverse was found."""
        return self.value is not None

    def unwrap(self) -> int:
        """
        Return the inverse.

        Raises:
            NoInverseExists: If no inverse was found
        """
        if self.value is None:
            raise NoInverseExists(self.reason)
        return self.value

    def or_sentinel(self) -> int:
        """Return the inverse, or NO_INVERSE if none exists."""
        return NO_INVERSE if self.value is None else self.value


def _check_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise ValueError("Modulus must be positive")


def find_inverse_euclid(e: int, modulus: int) -> InverseResult:
    """
    Find the inverse of e modulo modulus via the Extended Euclidean Algorithm.

    Args:
        e: The number to invert
        modulus: The modulus (e.g. phi in RSA)

    Returns:
        InverseResult with the non-negative inverse, or a failure if
        gcd(e, modulus) != 1 or modulus == 1

    Raises:
        ValueError: If modulus <= 0
    """
    _check_modulus(modulus)
    if modulus == 1:
        # every residue is 0, so (e * x) mod 1 never equals 1
        return InverseResult(
            number=e,
            modulus=modulus,
            reason=f"Inverse doesn't exist (no x satisfies ({e} * x) mod 1 = 1)",
        )

    result = extended_gcd(e, modulus)
    if result.gcd != 1:
        return InverseResult(
            number=e,
            modulus=modulus,
            reason=f"Inverse doesn't exist (gcd({e}, {modulus}) = {result.gcd})",
        )

    return InverseResult(number=e, modulus=modulus, value=result.x % modulus)


def find_inverse_search(n: int, modulus: int) -> InverseResult:
    """
    Find the inverse of n modulo modulus by trying every candidate.

    Returns the first x in [1, modulus) with (n mod m)(x mod m) mod m == 1.
    Runs in O(modulus), so it is only meant for small moduli such as 26.

    Args:
        n: The number to invert
        modulus: The modulus

    Returns:
        InverseResult with the inverse, or a failure if the range
        is exhausted

    Raises:
        ValueError: If modulus <= 0
    """
    _check_modulus(modulus)

    residue = n % modulus
    for x in range(1, modulus):
        if (residue * (x % modulus)) % modulus == 1:
            return InverseResult(number=n, modulus=modulus, value=x)

    return InverseResult(
        number=n,
        modulus=modulus,
        reason=f"Inverse does not exist ({n} has no inverse modulo {modulus})",
    )


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Raises:
        NoInverseExists: If inverse doesn't exist (gcd(a, m) != 1)
    """
    return find_inverse_euclid(a, m).unwrap()


def mod_inverse_search(n: int, mod: int) -> int:
    """Brute-force modular inverse, NO_INVERSE (-1) if there is none."""
    return find_inverse_search(n, mod).or_sentinel()
