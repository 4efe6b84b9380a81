# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Value type describing a single share of a split secret."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SecretShare:
    """One point ``(index, value)`` of the secret polynomial in GF(``prime``).

    ``index`` is the x-coordinate (never 0 for shares produced by a split),
    ``value`` the polynomial evaluated there and ``prime`` the field modulus
    shared by every share of the same series.
    """

    index: int
    value: int
    prime: int


__all__ = ["SecretShare"]
