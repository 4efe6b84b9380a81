# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Binary wire format of a single share.

Layout (big-endian, no padding)::

    "SS" | index:u8 | value_len:u32 | value | prime_len:u32 | prime

``value`` and ``prime`` are stored as minimal two's-complement integers, so a
leading zero byte appears whenever the top bit of the magnitude is set.
"""

from __future__ import annotations

import base64
import logging
import struct

from .errors import InvalidArgument, MalformedMessage
from .policy import TEXT_FORMATS
from .share import SecretShare

_logger = logging.getLogger(__name__)

SIGNATURE = b"SS"
HEADER_STRUCT = struct.Struct("!2sB")
LENGTH_STRUCT = struct.Struct("!I")


def _int_to_bytes(number: int) -> bytes:
    magnitude = ~number if number < 0 else number
    return number.to_bytes(magnitude.bit_length() // 8 + 1, "big", signed=True)


def _read_field(view: memoryview, offset: int, name: str) -> tuple[bytes, int]:
    if len(view) - offset < LENGTH_STRUCT.size:
        raise MalformedMessage(f"message truncated before {name} length")
    (length,) = LENGTH_STRUCT.unpack_from(view, offset)
    offset += LENGTH_STRUCT.size
    if len(view) - offset < length:
        raise MalformedMessage(f"message truncated inside {name} data")
    return bytes(view[offset : offset + length]), offset + length


def encode(share: SecretShare) -> bytes:
    """Serialize ``share`` into the binary share message."""
    if not 0 <= share.index <= 255:
        raise InvalidArgument("Invalid share number, must be between 0 and 255")

    value_data = _int_to_bytes(share.value)
    prime_data = _int_to_bytes(share.prime)
    return b"".join(
        (
            HEADER_STRUCT.pack(SIGNATURE, share.index),
            LENGTH_STRUCT.pack(len(value_data)),
            value_data,
            LENGTH_STRUCT.pack(len(prime_data)),
            prime_data,
        )
    )


def _parse(view: memoryview) -> SecretShare:
    if len(view) < len(SIGNATURE) or bytes(view[: len(SIGNATURE)]) != SIGNATURE:
        raise MalformedMessage("signature missing")
    if len(view) < HEADER_STRUCT.size:
        raise MalformedMessage("message truncated before share index")
    _, index = HEADER_STRUCT.unpack_from(view, 0)

    value_data, offset = _read_field(view, HEADER_STRUCT.size, "share")
    prime_data, _ = _read_field(view, offset, "prime")

    value = int.from_bytes(value_data, "big", signed=True)
    prime = int.from_bytes(prime_data, "big", signed=True)
    if value <= 0:
        raise MalformedMessage("invalid share number")
    if prime <= 0:
        raise MalformedMessage("invalid prime")
    return SecretShare(index, value, prime)


def decode(data: bytes | bytearray | memoryview) -> SecretShare:
    """Parse a binary share message produced by :func:`encode`.

    Bytes following the prime field are ignored.
    """
    view = memoryview(data).cast("B")
    try:
        return _parse(view)
    except MalformedMessage as exc:
        _logger.debug("rejecting share message of %d bytes: %s", len(view), exc)
        raise


def to_text(share: SecretShare, fmt: str = "hex") -> str:
    """Encode ``share`` and armour it as hex or base64 text."""
    if fmt not in TEXT_FORMATS:
        raise InvalidArgument(f"unknown share format: {fmt}")
    data = encode(share)
    if fmt == "hex":
        return data.hex()
    return base64.b64encode(data).decode("ascii")


def from_text(text: str, fmt: str = "hex") -> SecretShare:
    """Inverse of :func:`to_text`."""
    if fmt not in TEXT_FORMATS:
        raise InvalidArgument(f"unknown share format: {fmt}")
    text = text.strip()
    try:
        if fmt == "hex":
            data = bytes.fromhex(text)
        else:
            data = base64.b64decode(text, validate=True)
    except ValueError as exc:
        raise MalformedMessage(f"share is not valid {fmt} text") from exc
    return decode(data)


__all__ = ["SIGNATURE", "encode", "decode", "to_text", "from_text"]
