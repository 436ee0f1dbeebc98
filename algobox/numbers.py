"""Number utilities: primes, factorials, Fibonacci, GCD, digit reversal and Hanoi."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterator, Sequence


def is_buzz_number(num: int) -> bool:
    """Tell whether a number is divisible by 7 or ends in the digit 7."""
    return num % 7 == 0 or (num > 0 and num % 10 == 7)


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division up to its square root."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def primes_up_to(n: int) -> list[int]:
    """Return all primes not greater than ``n`` using the sieve of Eratosthenes."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    for p in range(2, math.isqrt(n) + 1):
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, n + 1, p))
    return [number for number, prime in enumerate(flags) if prime]


def reverse_number(num: int) -> int:
    """Reverse the decimal digits of a number, keeping its sign."""
    reversed_digits = int(str(abs(num))[::-1])
    return -reversed_digits if num < 0 else reversed_digits


def factorial_iterative(n: int) -> int:
    """Multiply 1..n together; 1 when ``n`` is below 1."""
    return math.prod(range(1, n + 1))


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("position must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n for a non-negative ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n * (n + 1) // 2


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def tower_of_hanoi(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_rod, to_rod)`` that carry ``n`` disks to ``target``."""
    if n <= 0:
        return
    yield from tower_of_hanoi(n - 1, source, auxiliary, target)
    yield (n, source, target)
    yield from tower_of_hanoi(n - 1, auxiliary, target, source)


_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def prime_main(argv: Sequence[str] | None = None) -> int:
    """Report whether the single argument is a prime number."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: prime-check <number>")
        return 1
    n = _leading_int(args[0])
    if is_prime(n):
        print(f"{n} is a prime number.")
    else:
        print(f"{n} is not a prime number.")
    return 0


def sieve_main(argv: Sequence[str] | None = None) -> int:
    """Print every prime up to the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: sieve <n>")
        return 1
    n = _leading_int(args[0])
    if n < 2:
        print(f"No primes <= {n}")
        return 0
    print(f"Primes <= {n}:")
    print(" ".join(str(prime) for prime in primes_up_to(n)))
    return 0