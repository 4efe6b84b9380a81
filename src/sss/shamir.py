# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over a prime field.

``split``
    Evaluate the polynomial defined by a caller supplied coefficient vector at
    ``x = 1 .. total`` and return the resulting shares.

``join``
    Recover the constant term (the secret) from a set of shares with Lagrange
    interpolation at ``x = 0``.

``split_secret`` / ``split_string`` / ``join_to_string``
    Convenience wrappers that pick the prime and the random coefficients.

``join`` cannot tell a set of fewer than ``threshold`` shares from a complete
one: such a set yields an integer that is *not* the secret and no error is
raised. That is the security property of the scheme, not a bug.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .errors import InvalidArgument
from .numbers import (
    first_prime_greater_than,
    integer_to_string,
    random_coefficients,
    random_prime_greater_than,
    string_to_integer,
)
from .policy import policy
from .share import SecretShare

_logger = logging.getLogger(__name__)

MAX_SHARES = 255  # the index is stored in a single byte on the wire


def split(
    secret: int,
    coefficients: Sequence[int],
    total: int,
    threshold: int,
    prime: int,
) -> list[SecretShare]:
    """Split ``secret`` into ``total`` shares, ``threshold`` of which recover it.

    Only the first ``threshold`` entries of ``coefficients`` are used and
    ``coefficients[0]`` is expected to equal ``secret``.
    """
    if secret <= 0:
        raise InvalidArgument("secret must be positive integer")
    if prime <= secret:
        raise InvalidArgument("prime must be greater than secret")
    if threshold < 1:
        raise InvalidArgument("threshold must be at least 1")
    if len(coefficients) < threshold:
        raise InvalidArgument(
            f"not enough coefficients, need {threshold}, have {len(coefficients)}"
        )
    if total < threshold:
        raise InvalidArgument("total number of shares must be greater than or equal threshold")
    if total > MAX_SHARES:
        raise InvalidArgument(f"total number of shares must not exceed {MAX_SHARES}")

    _logger.debug(
        "splitting secret into %d shares, threshold %d, %d-bit prime",
        total,
        threshold,
        prime.bit_length(),
    )

    shares: list[SecretShare] = []
    for x in range(1, total + 1):
        y = 0
        for c in range(threshold):
            y = (y + coefficients[c] * pow(x, c, prime) % prime) % prime
        shares.append(SecretShare(x, y, prime))
    return shares


def join(shares: Iterable[SecretShare]) -> int:
    """Recover the secret integer from ``shares`` of a single series."""
    points = list(shares)
    if not points:
        raise InvalidArgument("at least one share is required")
    prime = points[0].prime
    if any(share.prime != prime for share in points):
        raise InvalidArgument("shares not from the same series")

    _logger.debug("joining %d shares, %d-bit prime", len(points), prime.bit_length())

    result = 0
    for i, share in enumerate(points):
        num = 1
        den = 1
        for j, other in enumerate(points):
            if i == j:
                continue
            num = (num * -other.index) % prime
            den = (den * (share.index - other.index)) % prime
        try:
            inverse = pow(den, -1, prime)
        except ValueError as exc:
            raise InvalidArgument(
                f"share indices are not distinct modulo the prime (index {share.index})"
            ) from exc
        result = (result + prime + share.value * num * inverse) % prime
    return result


def split_secret(
    secret: int,
    total: int,
    threshold: int,
    *,
    random_prime: bool | None = None,
) -> list[SecretShare]:
    """Split ``secret`` choosing the prime and the coefficients automatically.

    ``random_prime`` selects a random prime of the secret's bit length instead
    of the smallest prime above it; ``None`` follows :data:`sss.policy.policy`.
    """
    if random_prime is None:
        random_prime = policy.random_prime
    # indices 1..total must stay distinct modulo the prime
    bound = max(secret, total)
    prime = None
    if random_prime:
        try:
            prime = random_prime_greater_than(bound)
        except InvalidArgument:
            _logger.debug("no random prime of the bound's bit length, using the next prime")
    if prime is None:
        prime = first_prime_greater_than(bound)
    coefficients = random_coefficients(max(threshold, 1), secret, prime)
    return split(secret, coefficients, total, threshold, prime)


def split_string(
    secret: str,
    total: int,
    threshold: int,
    *,
    random_prime: bool | None = None,
) -> list[SecretShare]:
    """Encode ``secret`` as an integer and split it with :func:`split_secret`."""
    return split_secret(
        string_to_integer(secret), total, threshold, random_prime=random_prime
    )


def join_to_string(shares: Iterable[SecretShare]) -> str:
    """Join ``shares`` and decode the result back into a string."""
    return integer_to_string(join(shares))


__all__ = [
    "MAX_SHARES",
    "split",
    "join",
    "split_secret",
    "split_string",
    "join_to_string",
]
