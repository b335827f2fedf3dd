from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Callable, Final

from fairrps.errors import EntropySourceError

logger = logging.getLogger(__name__)

MIN_KEY_BITS: Final[int] = 256

TokenSource = Callable[[int], bytes]


def generate_key(bit_length: int = MIN_KEY_BITS, *, token_bytes: TokenSource | None = None) -> str:
    if bit_length < MIN_KEY_BITS or bit_length % 8:
        raise ValueError(f"bit_length must be a multiple of 8 and at least {MIN_KEY_BITS}, got {bit_length}")

    if token_bytes is None:
        token_bytes = secrets.token_bytes

    num_bytes = bit_length // 8
    try:
        raw = token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"secure random source unavailable: {exc}") from exc

    if not isinstance(raw, bytes) or len(raw) != num_bytes:
        raise EntropySourceError(f"secure random source returned a short read, expected {num_bytes} bytes")

    logger.debug("Generated %d-bit key", bit_length)
    return raw.hex()


def compute_commitment(*, key: str, move: str) -> str:
    # Keyed with the raw key bytes, not the hex text.
    return hmac.new(reveal_key(key), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: str) -> bool:
    try:
        computed = compute_commitment(key=key, move=move)
    except ValueError:
        # Key is not valid hex.
        return False
    return secrets.compare_digest(expected_commitment.lower().encode("utf-8"), computed.encode("utf-8"))


def reveal_key(key: str) -> bytes:
    return bytes.fromhex(key)
