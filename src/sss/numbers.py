# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Number helpers used around the field arithmetic.

The engine in :mod:`sss.shamir` only consumes already validated integers.
Everything that needs randomness, primality testing or a text encoding lives
here:

``random_integer_below`` / ``random_coefficients``
    Uniform values from the operating system CSPRNG.

``first_prime_greater_than`` / ``random_prime_greater_than``
    Probable primes bounding the field, backed by pycryptodome.

``string_to_integer`` / ``integer_to_string``
    Lossless mapping between Unicode text and strictly positive integers.
"""

from __future__ import annotations

import logging
import secrets

from Crypto.Util.number import getPrime, isPrime

from .errors import InvalidArgument

_logger = logging.getLogger(__name__)

# getPrime() draws before falling back to a sequential search
_RANDOM_PRIME_ATTEMPTS = 4096


def random_integer_below(bound: int) -> int:
    """Return a uniformly distributed integer in ``[0, bound)``."""
    if bound <= 0:
        raise InvalidArgument("bound must be positive integer")
    return secrets.randbelow(bound)


def random_coefficients(count: int, element_zero: int, prime: int) -> list[int]:
    """Build a polynomial coefficient vector of length *count*.

    The first coefficient is *element_zero* (the secret), the others are
    random field elements below *prime*.
    """
    if count < 1:
        raise InvalidArgument("at least one coefficient is required")
    return [element_zero] + [random_integer_below(prime) for _ in range(count - 1)]


def first_prime_greater_than(num: int) -> int:
    """Return the smallest probable prime strictly greater than *num*."""
    if num < 2:
        return 2
    candidate = num + 1
    if candidate % 2 == 0:
        candidate += 1
    while not isPrime(candidate):
        candidate += 2
    return candidate


def random_prime_greater_than(num: int) -> int:
    """Return a random probable prime of ``num.bit_length()`` bits above *num*."""
    bits = num.bit_length()
    if bits < 2:
        return first_prime_greater_than(num)

    smallest = first_prime_greater_than(num)
    if smallest.bit_length() > bits:
        raise InvalidArgument(f"no {bits}-bit prime is greater than the given number")

    for _ in range(_RANDOM_PRIME_ATTEMPTS):
        prime = getPrime(bits)
        if prime > num:
            return prime
    _logger.debug("random %d-bit prime search exhausted, using the next prime", bits)
    return smallest


def string_to_integer(text: str) -> int:
    """Encode *text* as a strictly positive integer (UTF-8, big-endian)."""
    data = text.encode("utf-8")
    number = int.from_bytes(data, "big")
    if number <= 0:
        raise InvalidArgument("secret string must contain at least one non-NUL character")
    return number


def integer_to_string(number: int) -> str:
    """Decode an integer produced by :func:`string_to_integer`.

    Leading NUL characters do not survive the round trip.
    """
    if number < 0:
        raise InvalidArgument("cannot decode a negative integer")
    data = number.to_bytes((number.bit_length() + 7) // 8, "big")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidArgument("integer does not encode a UTF-8 string") from exc


__all__ = [
    "random_integer_below",
    "random_coefficients",
    "first_prime_greater_than",
    "random_prime_greater_than",
    "string_to_integer",
    "integer_to_string",
]
