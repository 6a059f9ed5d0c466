"""
Euclidean Algorithm Implementation

Implements the greatest common divisor family:
- Plain Euclidean GCD
- Extended Euclidean Algorithm with a full derivation trace

Every recursion level of the extended algorithm is recorded as an
EuclidStep so the derivation can be displayed as a table. Steps are
recorded while the recursion unwinds, so the deepest level comes first
and the top-level call comes last.

Integer convention:
    Quotient and remainder use Python floor semantics (a // b, a % b),
    so a == q * b + r holds for every step, including negative inputs.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class EuclidStep:
    """
    One level of the extended Euclidean recursion.

    Two coefficient tracks are recorded:
    - (s1, s2, s3) and (t1, t2, t3): the rolling-pair table values,
      s3 = s2 - quotient * s1 and t3 = t2 - quotient * t1
    - (x, y): Bezout coefficients for this step, a * x + b * y = gcd
    """
    quotient: int
    a: int
    b: int
    remainder: int
    s1: int
    s2: int
    s3: int
    t1: int
    t2: int
    t3: int
    gcd: int
    x: int
    y: int

    def satisfies_bezout(self) -> bool:
        """Check a * x + b * y == gcd for this step."""
        return self.a * self.x + self.b * self.y == self.gcd


@dataclass(frozen=True)
class ExtendedGcdResult:
    """Result of the extended Euclidean algorithm."""
    gcd: int
    x: int
    y: int
    steps: Tuple[EuclidStep, ...]

    @property
    def bezout(self) -> Tuple[int, int]:
        """Top-level Bezout coefficients (x, y)."""
        return self.x, self.y


def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using Euclidean algorithm.

    gcd(a, b) = a if b == 0 else gcd(b, a mod b), evaluated as a loop.
    The result is never negative and gcd(0, 0) is 0.

    Args:
        a: First integer
        b: Second integer

    Returns:
        GCD of a and b
    """
    while b:
        a, b = b, a % b
    return abs(a)


def extended_gcd(a: int, b: int) -> ExtendedGcdResult:
    """
    Extended Euclidean Algorithm with step trace.

    Finds integers x, y such that: a*x + b*y = gcd(a, b), and records
    one EuclidStep per recursion level.

    The recursion is unrolled onto an explicit stack:
    1. Descend: push (a, b) frames until b reaches 0
    2. Base case: gcd = a, x = 1, y = 0
    3. Unwind: pop frames, deriving each frame's values from its child

    While unwinding, each frame's (s2, t2) is the child's (s3, t3) and its
    (s1, t1) is the child's (s2, t2). The base case seeds (s2, t2) = (1, 0)
    and (s1, t1) = (0, 1).

    Args:
        a: First integer
        b: Second integer

    Returns:
        ExtendedGcdResult with gcd, top-level (x, y) and the steps,
        deepest level first
    """
    frames: List[Tuple[int, int]] = []
    while b != 0:
        frames.append((a, b))
        a, b = b, a % b

    g = a
    x, y = 1, 0
    # Rolling pairs as returned by the child level
    s_prev, t_prev = 1, 0  # child's (s3, t3)
    s_prev2, t_prev2 = 0, 1  # child's (s2, t2)

    steps: List[EuclidStep] = []
    while frames:
        a, b = frames.pop()
        q, r = a // b, a % b

        x, y = y, x - q * y

        s2, t2 = s_prev, t_prev
        s1, t1 = s_prev2, t_prev2
        s3 = s2 - q * s1
        t3 = t2 - q * t1

        steps.append(EuclidStep(
            quotient=q, a=a, b=b, remainder=r,
            s1=s1, s2=s2, s3=s3,
            t1=t1, t2=t2, t3=t3,
            gcd=g, x=x, y=y,
        ))

        s_prev, t_prev = s3, t3
        s_prev2, t_prev2 = s2, t2

    # Floor division carries the sign of the divisor into the gcd
    if g < 0:
        g, x, y = -g, -x, -y
        steps = [
            EuclidStep(
                quotient=s.quotient, a=s.a, b=s.b, remainder=s.remainder,
                s1=s.s1, s2=s.s2, s3=s.s3,
                t1=s.t1, t2=s.t2, t3=s.t3,
                gcd=-s.gcd, x=-s.x, y=-s.y,
            )
            for s in steps
        ]

    return ExtendedGcdResult(gcd=g, x=x, y=y, steps=tuple(steps))
