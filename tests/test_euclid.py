"""
Unit tests for the Euclidean algorithms.

Tests:
- Plain GCD
- Extended Euclidean Algorithm (Bezout coefficients and step trace)
"""

import pytest
from classicrypt.core_crypto.euclid import EuclidStep, gcd, extended_gcd


class TestGCD:
    """Unit tests for the Euclidean GCD."""

    def test_basic(self):
        """Test GCD calculation."""
        assert gcd(48, 18) == 6
        assert gcd(17, 13) == 1
        assert gcd(240, 46) == 2

    def test_zero_argument(self):
        """gcd(a, 0) is a."""
        assert gcd(12, 0) == 12
        assert gcd(0, 12) == 12

    def test_both_zero(self):
        """gcd(0, 0) is defined as 0."""
        assert gcd(0, 0) == 0

    def test_symmetric(self):
        """gcd(a, b) == gcd(b, a)."""
        for a in range(0, 40):
            for b in range(0, 40):
                assert gcd(a, b) == gcd(b, a)

    def test_is_greatest_common_divisor(self):
        """Result divides both inputs and nothing larger does."""
        for a in range(1, 60):
            for b in range(0, 60):
                g = gcd(a, b)
                assert a % g == 0 and b % g == 0
                for larger in range(g + 1, a + 1):
                    assert not (a % larger == 0 and b % larger == 0)

    def test_negative_inputs_non_negative_result(self):
        """GCD is never negative."""
        assert gcd(-4, 6) == 2
        assert gcd(4, -6) == 2
        assert gcd(-4, -6) == 2
        assert gcd(-7, 0) == 7

    def test_large_numbers(self):
        """GCD of large integers."""
        a = 2 ** 127 - 1
        assert gcd(a * 3, a * 5) == a


class TestExtendedGCD:
    """Unit tests for the Extended Euclidean Algorithm."""

    def test_bezout_identity(self):
        """a*x + b*y == gcd for the top level."""
        for a, b in [(240, 46), (5, 3), (17, 3120), (99, 78), (1, 1), (35, 15)]:
            result = extended_gcd(a, b)
            assert result.gcd == gcd(a, b)
            assert a * result.x + b * result.y == result.gcd

    def test_known_coefficients(self):
        """240*(-9) + 46*47 = 2."""
        result = extended_gcd(240, 46)
        assert result.gcd == 2
        assert result.bezout == (-9, 47)

    def test_step_count_and_order(self):
        """Steps are recorded deepest level first."""
        result = extended_gcd(240, 46)
        assert [(s.a, s.b) for s in result.steps] == [
            (4, 2), (6, 4), (10, 6), (46, 10), (240, 46)
        ]

    def test_last_step_is_top_level(self):
        """The last step holds the original inputs."""
        result = extended_gcd(240, 46)
        top = result.steps[-1]
        assert (top.a, top.b) == (240, 46)
        assert (top.x, top.y) == (result.x, result.y)

    def test_quotient_and_remainder(self):
        """Each step satisfies a == q*b + r."""
        for step in extended_gcd(1071, 462).steps:
            assert step.a == step.quotient * step.b + step.remainder
            assert 0 <= step.remainder < step.b

    def test_rolling_pair_recurrence(self):
        """s3 = s2 - q*s1 and t3 = t2 - q*t1 on every step."""
        for a, b in [(240, 46), (5, 3), (1071, 462), (17, 3120)]:
            for step in extended_gcd(a, b).steps:
                assert step.s3 == step.s2 - step.quotient * step.s1
                assert step.t3 == step.t2 - step.quotient * step.t1

    def test_every_step_satisfies_bezout(self):
        """a*x + b*y == gcd for every step's own (a, b)."""
        for a, b in [(240, 46), (5, 3), (1071, 462), (3120, 17)]:
            for step in extended_gcd(a, b).steps:
                assert step.satisfies_bezout()

    def test_gcd_constant_across_steps(self):
        """Every step reports the same gcd."""
        result = extended_gcd(1071, 462)
        assert {step.gcd for step in result.steps} == {21}

    def test_trace_values(self):
        """Rolling-pair trace for (5, 3)."""
        steps = extended_gcd(5, 3).steps
        assert steps == (
            EuclidStep(quotient=2, a=2, b=1, remainder=0,
                       s1=0, s2=1, s3=1, t1=1, t2=0, t3=-2,
                       gcd=1, x=0, y=1),
            EuclidStep(quotient=1, a=3, b=2, remainder=1,
                       s1=1, s2=1, s3=0, t1=0, t2=-2, t3=-2,
                       gcd=1, x=1, y=-1),
            EuclidStep(quotient=1, a=5, b=3, remainder=2,
                       s1=1, s2=0, s3=-1, t1=-2, t2=-2, t3=0,
                       gcd=1, x=-1, y=2),
        )

    def test_trace_rolls_from_child(self):
        """Each step's (s2, t2) is the previous step's (s3, t3)."""
        steps = extended_gcd(240, 46).steps
        for child, parent in zip(steps, steps[1:]):
            assert (parent.s2, parent.t2) == (child.s3, child.t3)
            assert (parent.s1, parent.t1) == (child.s2, child.t2)

    def test_base_case_has_no_steps(self):
        """b == 0 records no steps."""
        result = extended_gcd(7, 0)
        assert result.gcd == 7
        assert (result.x, result.y) == (1, 0)
        assert result.steps == ()

    def test_both_zero(self):
        """extended_gcd(0, 0) has gcd 0 and no steps."""
        result = extended_gcd(0, 0)
        assert result.gcd == 0
        assert result.steps == ()

    def test_smaller_first(self):
        """a < b adds one swap step with quotient 0."""
        result = extended_gcd(46, 240)
        assert result.gcd == 2
        assert result.steps[-1].quotient == 0
        assert 46 * result.x + 240 * result.y == 2

    @pytest.mark.parametrize("a,b", [(4, -6), (-4, 6), (-4, -6), (-12, 0), (0, -5)])
    def test_negative_inputs(self, a, b):
        """Negative inputs give a non-negative gcd with valid coefficients."""
        result = extended_gcd(a, b)
        assert result.gcd == gcd(a, b)
        assert a * result.x + b * result.y == result.gcd
        for step in result.steps:
            assert step.satisfies_bezout()

    def test_deep_recursion(self):
        """Consecutive Fibonacci numbers need many steps without recursion errors."""
        fib = [1, 1]
        while len(fib) < 3000:
            fib.append(fib[-1] + fib[-2])
        a, b = fib[-1], fib[-2]
        result = extended_gcd(a, b)
        assert result.gcd == 1
        assert len(result.steps) > 1000
        assert a * result.x + b * result.y == 1

    def test_steps_are_immutable(self):
        """EuclidStep is frozen."""
        step = extended_gcd(5, 3).steps[0]
        with pytest.raises(AttributeError):
            step.gcd = 99
