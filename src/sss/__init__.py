# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Threshold secret sharing over a prime field."""

from .codec import decode, encode, from_text, to_text
from .errors import InvalidArgument, MalformedMessage, SSSError
from .shamir import join, join_to_string, split, split_secret, split_string
from .share import SecretShare

__version__ = "0.1.0"

__all__ = [
    "SecretShare",
    "split",
    "split_secret",
    "split_string",
    "join",
    "join_to_string",
    "encode",
    "decode",
    "to_text",
    "from_text",
    "SSSError",
    "InvalidArgument",
    "MalformedMessage",
]
