"""Small number puzzles: bit strings, gcd, digits, bits and recursion."""

from __future__ import annotations


def add_bit_strings(first: str, second: str) -> str:
    """Add two binary numbers written as strings of '0' and '1'."""
    for bits in (first, second):
        if set(bits) - {"0", "1"}:
            raise ValueError(f"not a bit string: {bits!r}")
    width = max(len(first), len(second))
    carry = 0
    digits: list[str] = []
    for a, b in zip(reversed(first.rjust(width, "0")), reversed(second.rjust(width, "0"))):
        total = int(a) + int(b) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def extended_euclid(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``, the gcd of ``a`` and ``b``."""
    if b == 0:
        return a, 1, 0
    g, x, y = extended_euclid(b, a % b)
    return g, y, x - (a // b) * y


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from Celsius to Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


def reverse_digits(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    remaining = abs(number)
    reversed_number = 0
    while True:
        remaining, digit = divmod(remaining, 10)
        reversed_number = reversed_number * 10 + digit
        if remaining == 0:
            return sign * reversed_number


def is_palindrome_number(number: int) -> bool:
    """Return True if ``number`` reads the same with its digits reversed."""
    return number == reverse_digits(number)


def xor_up_to(n: int) -> int:
    """The XOR of all integers from 1 to ``n``, in constant time."""
    if n & 3 == 3:
        return 0
    if n & 2:
        return n + 1
    if n & 1:
        return 1
    return n


def get_bit(value: int, n: int) -> int:
    """Return ``value`` masked to bit ``n``: either 0 or ``1 << n``."""
    if n < 0:
        raise ValueError(f"bit position must not be negative, got {n}")
    return value & (1 << n)


def digit_square_sum(n: int) -> int:
    """Sum of the squares of the decimal digits of a positive ``n``."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Return True if repeated digit-square sums of ``n`` reach 1."""
    slow = fast = n
    while True:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
        if slow == fast:
            return slow == 1


def mccarthy91(n: int) -> int:
    """McCarthy's nested recursion: n - 10 above 100, otherwise f(f(n + 11))."""
    pending = 1
    while pending:
        if n > 100:
            n -= 10
            pending -= 1
        else:
            n += 11
            pending += 1
    return n