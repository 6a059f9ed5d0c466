"""
Unit tests for the Modular Inverse Finder.

Tests:
- Extended Euclid strategy
- Brute-force search strategy
- Exception and sentinel failure conventions
"""

import pytest
from classicrypt.core_crypto.modular_inverse import (
    NO_INVERSE, InverseResult, NoInverseExists,
    find_inverse_euclid, find_inverse_search, mod_inverse, mod_inverse_search
)


class TestEuclidStrategy:
    """Inverse via the Extended Euclidean Algorithm."""

    def test_rsa_private_exponent(self):
        """17^(-1) mod 3120 = 2753."""
        result = find_inverse_euclid(17, 3120)
        assert result.exists
        assert result.value == 2753

    def test_result_is_non_negative(self):
        """Negative Bezout coefficients are normalised into [0, m)."""
        # extended_gcd(3, 10) gives x = -3
        assert find_inverse_euclid(3, 10).value == 7

    def test_inverse_property(self):
        """(a * inv) mod m == 1 whenever gcd(a, m) == 1."""
        m = 97
        for a in range(1, m):
            inv = mod_inverse(a, m)
            assert 0 <= inv < m
            assert (a * inv) % m == 1

    def test_no_inverse(self):
        """gcd(e, phi) != 1 is a failure."""
        result = find_inverse_euclid(6, 3120)
        assert not result.exists
        assert result.value is None
        assert "gcd(6, 3120) = 6" in result.reason

    def test_mod_inverse_raises(self):
        """mod_inverse surfaces failure as NoInverseExists."""
        with pytest.raises(NoInverseExists):
            mod_inverse(4, 8)

    def test_no_inverse_is_value_error(self):
        """NoInverseExists can be caught as ValueError."""
        with pytest.raises(ValueError):
            mod_inverse(4, 8)

    def test_modulus_one_has_no_inverse(self):
        """Nothing times e is 1 mod 1, so both strategies fail."""
        result = find_inverse_euclid(5, 1)
        assert not result.exists
        assert result.or_sentinel() == NO_INVERSE
        assert "mod 1" in result.reason
        assert not find_inverse_search(5, 1).exists
        with pytest.raises(NoInverseExists):
            mod_inverse(0, 1)


class TestSearchStrategy:
    """Inverse via brute-force search."""

    def test_seven_mod_26(self):
        """7 * 15 = 105 = 4*26 + 1."""
        assert find_inverse_search(7, 26).value == 15
        assert mod_inverse_search(7, 26) == 15

    def test_matches_euclid(self):
        """Both strategies agree where an inverse exists."""
        for n in range(1, 26):
            euclid = find_inverse_euclid(n, 26)
            search = find_inverse_search(n, 26)
            assert euclid.exists == search.exists
            if euclid.exists:
                assert euclid.value == search.value

    def test_reduces_input(self):
        """Inputs larger than the modulus are reduced first."""
        assert mod_inverse_search(7 + 26 * 5, 26) == 15

    def test_negative_input(self):
        """-7 mod 26 = 19, and 19 * 11 = 209 = 8*26 + 1."""
        assert mod_inverse_search(-7, 26) == 11

    def test_sentinel_when_missing(self):
        """Even numbers have no inverse mod 26."""
        assert mod_inverse_search(13, 26) == NO_INVERSE
        assert mod_inverse_search(0, 26) == -1

    def test_modulus_one_has_no_candidates(self):
        """The search range [1, 1) is empty."""
        assert not find_inverse_search(5, 1).exists


class TestInverseResult:
    """Unit tests for the fallible result type."""

    def test_unwrap_success(self):
        """unwrap returns the value."""
        assert InverseResult(number=3, modulus=10, value=7).unwrap() == 7

    def test_unwrap_failure_raises(self):
        """unwrap raises with the diagnostic reason."""
        result = find_inverse_search(2, 26)
        with pytest.raises(NoInverseExists, match="no inverse modulo 26"):
            result.unwrap()

    def test_or_sentinel(self):
        """or_sentinel returns -1 on failure."""
        assert find_inverse_euclid(6, 3120).or_sentinel() == NO_INVERSE
        assert find_inverse_euclid(17, 3120).or_sentinel() == 2753

    @pytest.mark.parametrize("finder", [find_inverse_euclid, find_inverse_search])
    def test_non_positive_modulus(self, finder):
        """Modulus must be positive."""
        with pytest.raises(ValueError):
            finder(3, 0)
        with pytest.raises(ValueError):
            finder(3, -26)
