# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Runtime configuration for the secret sharing helpers.

Values are read from the environment once at import time so that the CLI and
library callers share the same defaults. Unknown or malformed values fall back
to the defaults instead of failing.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

PRIME_STRATEGIES = ("first", "random")
TEXT_FORMATS = ("hex", "base64")


def _load_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value not in choices:
        return default
    return value


def _load_log_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        return default
    return value


@dataclass(frozen=True)
class SharingPolicy:
    """Holds tunables for prime selection, share armour and logging."""

    prime_strategy: str = "first"
    text_format: str = "hex"
    log_level: str = "WARNING"

    @property
    def random_prime(self) -> bool:
        return self.prime_strategy == "random"


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    return SharingPolicy(
        prime_strategy=_load_choice("SSS_PRIME_STRATEGY", "first", PRIME_STRATEGIES),
        text_format=_load_choice("SSS_TEXT_FORMAT", "hex", TEXT_FORMATS),
        log_level=_load_log_level("SSS_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy", "PRIME_STRATEGIES", "TEXT_FORMATS"]
