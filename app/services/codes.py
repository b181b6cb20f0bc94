# Capability codes: unguessable bearer secrets standing in for accounts

import logging
import os
import secrets
from typing import Callable, Iterable, Tuple

logger = logging.getLogger(__name__)

CODE_BYTES = 16
CODE_MAX_ATTEMPTS = int(os.getenv("CODE_MAX_ATTEMPTS", "3"))


class CodeAllocationError(Exception):
    """No unused code pair could be produced within CODE_MAX_ATTEMPTS."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code


def generate_code() -> str:
    """16 random bytes from the OS CSPRNG, URL-safe base64 without padding."""
    return secrets.token_urlsafe(CODE_BYTES)


def allocate_codes(
    is_taken: Callable[[Iterable[str]], bool],
    max_attempts: int = CODE_MAX_ATTEMPTS,
) -> Tuple[str, str]:
    """
    Return (join_code, leader_code), two distinct codes nobody holds yet.

    is_taken receives both candidates and reports whether either already exists
    in the store. A collision over 128 bits is not expected in practice; the
    unique constraints on hikes stay the final guard against a concurrent insert.
    """
    for attempt in range(1, max_attempts + 1):
        join_code = generate_code()
        leader_code = generate_code()
        if join_code != leader_code and not is_taken((join_code, leader_code)):
            return join_code, leader_code
        logger.warning("Capability code collision, regenerating (attempt %d/%d)", attempt, max_attempts)
    raise CodeAllocationError(f"Failed to generate unique hike codes after {max_attempts} attempts")
