"""
Prime-field arithmetic on plain Python ints. Used for the Baby Jubjub base field
and for reducing nonces and responses modulo the subgroup order.
"""

from __future__ import annotations


class PrimeField:
    """Integers modulo a prime p. Elements are ints in [0, p)."""

    __slots__ = ("p", "_half", "_q", "_s", "_z")

    def __init__(self, p: int) -> None:
        if p < 3 or p % 2 == 0:
            raise ValueError("modulus must be an odd prime")
        self.p = p
        self._half = p >> 1
        # p - 1 = q * 2^s with q odd (Tonelli-Shanks)
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1
        self._q = q
        self._s = s
        z = 2
        while pow(z, (p - 1) // 2, p) != p - 1:
            z += 1
        self._z = z

    def __repr__(self) -> str:
        return f"PrimeField({self.p})"

    def e(self, value: int) -> int:
        """Reduce an int into [0, p)."""
        return value % self.p

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.p

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.p

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def neg(self, a: int) -> int:
        return (-a) % self.p

    def square(self, a: int) -> int:
        return (a * a) % self.p

    def inv(self, a: int) -> int:
        a %= self.p
        if a == 0:
            raise ZeroDivisionError("zero has no inverse")
        return pow(a, self.p - 2, self.p)

    def div(self, a: int, b: int) -> int:
        return (a * self.inv(b)) % self.p

    def eq(self, a: int, b: int) -> bool:
        return (a - b) % self.p == 0

    def is_zero(self, a: int) -> bool:
        return a % self.p == 0

    def is_negative(self, a: int) -> bool:
        """True iff a, read as a signed element in (-p/2, p/2], is negative."""
        return a % self.p > self._half

    def sqrt(self, a: int) -> int | None:
        """
        Square root of a (Tonelli-Shanks).

        Returns:
            The root r with r <= p // 2, or None if a is not a quadratic residue.
        """
        p = self.p
        a %= p
        if a == 0:
            return 0
        if pow(a, (p - 1) // 2, p) != 1:
            return None
        m = self._s
        c = pow(self._z, self._q, p)
        t = pow(a, self._q, p)
        r = pow(a, (self._q + 1) // 2, p)
        while t != 1:
            i, t2 = 0, t
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = pow(c, 1 << (m - i - 1), p)
            m = i
            c = b * b % p
            t = t * c % p
            r = r * b % p
        return r if r <= self._half else p - r


__all__: tuple[str, ...] = ("PrimeField",)
