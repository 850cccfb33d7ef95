"""
Request signing for the Podcast Index API.
"""

import hashlib
import math
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .errors import SigningError


@dataclass(frozen=True)
class Credentials:
    """API key and secret issued by Podcast Index."""

    key: str
    secret: str = field(repr=False)


@dataclass(frozen=True)
class AuthHeaders:
    """Signed header values for a single request."""

    key: str
    timestamp: int
    authorization: str

    def as_headers(self) -> Dict[str, str]:
        return {
            "X-Auth-Key": self.key,
            "X-Auth-Date": str(self.timestamp),
            "Authorization": self.authorization,
        }


def now_ms() -> float:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time() * 1000


def sign(key: str, secret: str, now: Optional[Union[int, float]] = None) -> AuthHeaders:
    """Sign a request.

    Args:
        key: Podcast Index API key
        secret: Podcast Index API secret
        now: Milliseconds since the epoch, defaults to the current time

    Returns:
        AuthHeaders carrying the key, the timestamp in whole seconds and
        SHA1(key + secret + timestamp) as a hex digest

    Raises:
        SigningError: If ``now`` is negative or not a finite number
    """
    if now is None:
        now = now_ms()
    if isinstance(now, bool) or not isinstance(now, (int, float)):
        raise SigningError(f"Clock reading must be a number, got {type(now).__name__}")
    try:
        if not math.isfinite(now) or now < 0:
            raise SigningError(f"Clock reading must be finite and non-negative, got {now!r}")
        timestamp = math.floor(now / 1000)
    except OverflowError as e:
        raise SigningError("Clock reading is out of range", cause=e) from e

    # Create authorization hash: SHA1(api_key + api_secret + unix_time)
    auth_string = key + secret + str(timestamp)
    auth_hash = hashlib.sha1(auth_string.encode()).hexdigest()

    return AuthHeaders(key=key, timestamp=timestamp, authorization=auth_hash)
