#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

# Literal prefix of an EU digital COVID certificate payload (base45 body follows).
HC1_PREFIX = "HC1:"


def validate_payload(candidate: object) -> bool:
    """Return True when candidate looks like a certificate payload.

    This is a format gate only: the payload body is neither decoded nor
    verified.
    """
    return isinstance(candidate, str) and candidate.startswith(HC1_PREFIX)


def require_positive_int(value: object, *, label: str) -> int:
    """Validate that value is a positive integer (> 0)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{label} must be a positive int")
    return value


def require_length(value: bytes, length: int, *, label: str, prefix: str = "") -> None:
    """Validate that bytes value has exact length."""
    if len(value) != length:
        raise ValueError(f"{prefix}{label} must be {length} bytes, got {len(value)}")


def require_bytes_like(value: object, *, label: str) -> bytes:
    """Validate that value is bytes-like and return an immutable copy."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"{label} must be bytes")
    return bytes(value)
