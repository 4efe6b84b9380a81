# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by the secret sharing package."""

from __future__ import annotations


class SSSError(Exception):
    """Base class for every error raised by :mod:`sss`."""


class InvalidArgument(SSSError, ValueError):
    """Raised when a caller passes arguments the scheme cannot work with."""


class MalformedMessage(InvalidArgument):
    """Raised when a binary or armoured share cannot be decoded."""


__all__ = ["SSSError", "InvalidArgument", "MalformedMessage"]
